"""Classified, recoverable errors raised by the parking registry."""

from typing import Optional


class ParkingError(Exception):
    """Base exception for all parking registry errors."""

    def __init__(self, message: str, *, registration: Optional[str] = None):
        self.registration = registration
        super().__init__(message)


class RegistryFull(ParkingError):
    """The parking lot has reached its configured capacity."""


class InvalidRegistration(ParkingError):
    """Registration number has the wrong length."""


class InvalidDate(ParkingError):
    """Entry date does not look like YYYY-MM-DD."""


class InvalidExitDate(ParkingError):
    """Exit date is malformed, before the entry date, or past the maximum stay."""


class NotCurrentlyParked(ParkingError):
    """No open stay exists for the registration."""
