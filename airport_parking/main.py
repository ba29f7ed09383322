# airport_parking/main.py
"""
Console entry point.
Menu-driven loop around one ParkingRegistry that lives for the whole run.
Usage: python -m airport_parking.main [--max-cars N] [--log-level LEVEL]
"""

import argparse
import sys
from airport_parking.config import settings
from airport_parking.database import SessionLocal, create_tables
from airport_parking.exceptions import NotCurrentlyParked, ParkingError
from airport_parking.services.registry_service import ParkingRegistry
from airport_parking.utils import report
from airport_parking.utils.logger import get_logger, set_level

logger = get_logger(__name__)

MENU = [
    "----------------------------------",
    "# LULEA AIRPORT PARKING LOT",
    "----------------------------------",
    "1. Drive in",
    "2. Drive out",
    "3. Check parking",
    "4. Print parking history (by arrival date)",
    "5. Print parking history (by registration number)",
    "q. End program",
]

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ParkingConsole:
    """Reads one command per line and maps it onto registry operations."""

    def __init__(self, registry: ParkingRegistry, stdin=None, stdout=None):
        self.registry = registry
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.commands = {
            "1": self.drive_in,
            "2": self.drive_out,
            "3": self.check_parking,
            "4": self.print_history_by_date,
            "5": self.print_history_by_registration,
        }

    # ── I/O ───────────────────────────────────────────────────────────────
    def say(self, *lines: str):
        for line in lines:
            self.stdout.write(line + "\n")

    def ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    # ── Loop ──────────────────────────────────────────────────────────────
    def run(self) -> int:
        while True:
            self.say(*MENU)
            try:
                option = self.ask("> Enter your option: ")
            except EOFError:
                self.say("", "Exiting program...")
                return 0

            if option == "q":
                self.say("Exiting program...")
                return 0

            handler = self.commands.get(option)
            if handler is None:
                self.say("Invalid option. Please try again.")
                continue
            try:
                handler()
            except ParkingError as e:
                self.say(str(e))
            except EOFError:
                self.say("", "Exiting program...")
                return 0

    # ── Commands ──────────────────────────────────────────────────────────
    def drive_in(self):
        if self.registry.is_full():
            self.say("Parking lot is full.")
            return

        registration = self.ask("> Enter registration number: ")
        self.registry.validate_registration(registration)

        date = self.ask("> Current date (YYYY-MM-DD): ")
        self.registry.validate_entry_date(registration, date)

        charging = self.ask("> Charge electric vehicle (Yes/No): ").lower() == "yes"

        self.registry.register_arrival(registration, date, charging)
        self.say(f"Car {registration} entered at {date}")

    def drive_out(self):
        registration = self.ask("> Enter registration number: ")
        if not self.registry.check_status(registration).parked:
            raise NotCurrentlyParked("Car is not currently parked.", registration=registration)

        exit_date = self.ask("> Current date (YYYY-MM-DD): ")
        receipt = self.registry.register_departure(registration, exit_date)
        self.say(*report.format_receipt(receipt))

    def check_parking(self):
        registration = self.ask("> Enter registration number: ")
        status = self.registry.check_status(registration)
        if status.parked:
            self.say(f"Car {registration} is currently parked since {status.entry_date}")
        else:
            self.say(f"Car {registration} is not parked at the moment.")

    def print_history_by_date(self):
        self.say(*report.format_history(self.registry.list_history_by_entry_date(), "entry_date"))

    def print_history_by_registration(self):
        self.say(*report.format_history(self.registry.list_history_by_registration(), "registration"))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Lulea airport parking lot")
    parser.add_argument("--max-cars", type=int, default=None,
                        help=f"Lot capacity, 0 for unlimited (default: {settings.MAX_CARS})")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help=f"File log level (default: {settings.LOG_LEVEL})")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.log_level:
        set_level(args.log_level)

    create_tables()
    db = SessionLocal()
    try:
        if args.max_cars is None:
            registry = ParkingRegistry(db)
        else:
            registry = ParkingRegistry(db, max_cars=args.max_cars)
        logger.info(f"🚀 Parking console starting (capacity={registry.max_cars or 'unlimited'})")
        return ParkingConsole(registry).run()
    finally:
        db.close()
        logger.info("🛑 Parking console shutting down")


if __name__ == "__main__":
    sys.exit(main())
