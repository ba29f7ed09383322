# airport_parking/utils/report.py
"""Console rendering for receipts and parking history tables."""

from typing import Iterable, List
from airport_parking.config import settings
from airport_parking.schemas.vehicle_stay import Receipt, StayOut

RECEIPT_RULE = "#" * 35
HISTORY_HEADER = "Registration  Entered       Exited       Charging used       Parking cost"
HISTORY_TITLES = {
    "entry_date": "Parking history sorted by entrance date",
    "registration": "Parking history sorted by registration number",
}


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_receipt(receipt: Receipt) -> List[str]:
    return [
        RECEIPT_RULE,
        "# RECEIPT PARKING #",
        RECEIPT_RULE,
        "# Reg IN OUT #",
        f"# {receipt.registration} {receipt.entry_date} {receipt.exit_date} #",
        "# #",
        f"# Number of days: {receipt.days} days #",
        f"# Charge: {yes_no(receipt.charging)} #",
        f"# Cost: {receipt.cost} {receipt.currency} #",
        RECEIPT_RULE,
    ]


def format_history_row(stay: StayOut) -> str:
    cost = "" if stay.cost is None else f"{stay.cost}{settings.CURRENCY}"
    return "%-13s %-12s %-12s %-16s %-12s" % (
        stay.registration,
        stay.entry_date,
        stay.exit_date or "",
        yes_no(stay.charging),
        cost,
    )


def format_history(stays: Iterable[StayOut], sorted_by: str) -> List[str]:
    """Title line, column header, then one row per stay."""
    lines = [HISTORY_TITLES[sorted_by], HISTORY_HEADER]
    lines.extend(format_history_row(stay) for stay in stays)
    return lines
