# airport_parking/services/tariff_service.py
"""
Date checks, stay length and parking fees.

Stay length uses a simplified calendar: every month is 30 days and every
year is 360 days. Billing depends on it, so it must not be replaced by real
calendar arithmetic.

Fee per stay:
  - DAILY_RATE for each of the first DISCOUNT_AFTER_DAYS days
  - REDUCED_DAILY_RATE for each day after that
  - CHARGING_FEE once if the car was charged, regardless of length
"""

import re
from airport_parking.config import settings

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def is_valid_registration(registration: str) -> bool:
    return settings.MIN_REGISTRATION_LENGTH <= len(registration) <= settings.MAX_REGISTRATION_LENGTH


def is_valid_date(value: str) -> bool:
    """Shape check only: 2024-13-40 passes."""
    return DATE_PATTERN.fullmatch(value) is not None


def total_days(value: str) -> int:
    year, month, day = (int(part) for part in value.split("-"))
    return year * 360 + month * 30 + day


def calculate_days(entry_date: str, exit_date: str) -> int:
    """Days between two YYYY-MM-DD strings. Negative if exit is before entry."""
    return total_days(exit_date) - total_days(entry_date)


def is_exit_date_valid(entry_date: str, exit_date: str) -> bool:
    if not is_valid_date(exit_date):
        return False
    return 0 <= calculate_days(entry_date, exit_date) <= settings.MAX_PARKING_DAYS


def calculate_cost(days: int, charging: bool) -> int:
    if days < 0:
        raise ValueError(f"days must be >= 0, got {days}")
    full_rate_days = min(days, settings.DISCOUNT_AFTER_DAYS)
    reduced_days = max(days - settings.DISCOUNT_AFTER_DAYS, 0)
    cost = settings.DAILY_RATE * full_rate_days + settings.REDUCED_DAILY_RATE * reduced_days
    if charging:
        cost += settings.CHARGING_FEE
    return cost
