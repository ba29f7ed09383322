# airport_parking/services/registry_service.py
"""
Parking registry: arrivals, departures, status checks and history.

How it works:
  - Drive in  → validate, append a VehicleStay with no exit date
  - Drive out → first open stay for the plate (arrival order) gets its
                exit date, day count and cost filled in
  - The same table is both current occupancy and full history; rows are
    never deleted
  - Arrivals do not check for an open stay with the same plate, so one
    plate can be parked twice; drive out then closes the earliest
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from airport_parking.config import settings
from airport_parking.exceptions import (
    InvalidDate,
    InvalidExitDate,
    InvalidRegistration,
    NotCurrentlyParked,
    RegistryFull,
)
from airport_parking.models.vehicle_stay import VehicleStay
from airport_parking.schemas.vehicle_stay import ParkingStatus, Receipt, StayOut
from airport_parking.services import tariff_service
from airport_parking.utils.logger import get_logger

logger = get_logger(__name__)


class ParkingRegistry:
    """Owns the parking history for one process run."""

    def __init__(self, db: Session, max_cars: Optional[int] = settings.MAX_CARS):
        self.db = db
        # None or <= 0 means no cap
        self.max_cars: Optional[int] = max_cars if max_cars and max_cars > 0 else None

    # ── Capacity ──────────────────────────────────────────────────────────
    def count(self) -> int:
        return self.db.query(VehicleStay).count()

    def is_full(self) -> bool:
        return self.max_cars is not None and self.count() >= self.max_cars

    # ── Operations ────────────────────────────────────────────────────────
    def register_arrival(self, registration: str, entry_date: str, charging: bool) -> int:
        """Add a parked car. Returns the new stay id."""
        if self.is_full():
            logger.warning(f"[IN] Rejected {registration}: lot full ({self.max_cars})")
            raise RegistryFull("Parking lot is full.", registration=registration)
        self.validate_registration(registration)
        self.validate_entry_date(registration, entry_date)

        stay = VehicleStay(
            registration=registration,
            entry_date=entry_date,
            charging=bool(charging),
            created_at=datetime.utcnow(),
        )
        self.db.add(stay)
        self._commit()
        logger.info(f"[IN] Stay={stay.id} | Reg={registration} | Date={entry_date} | Charging={bool(charging)}")
        return stay.id

    def register_departure(self, registration: str, exit_date: str) -> Receipt:
        """Close the earliest open stay for the plate and bill it."""
        stay = self._find_open_stay(registration)
        if stay is None:
            logger.warning(f"[OUT] Rejected {registration}: not currently parked")
            raise NotCurrentlyParked("Car is not currently parked.", registration=registration)
        if not tariff_service.is_exit_date_valid(stay.entry_date, exit_date):
            logger.warning(f"[OUT] Rejected {registration}: exit {exit_date!r} after entry {stay.entry_date}")
            raise InvalidExitDate("Invalid exit date.", registration=registration)

        days = tariff_service.calculate_days(stay.entry_date, exit_date)
        cost = tariff_service.calculate_cost(days, stay.charging)
        stay.exit_date = exit_date
        stay.days = days
        stay.cost = cost
        self._commit()
        logger.info(f"[OUT] Stay={stay.id} | Reg={registration} | Days={days} | Cost={cost} {settings.CURRENCY}")

        return Receipt(
            registration=stay.registration,
            entry_date=stay.entry_date,
            exit_date=exit_date,
            days=days,
            charging=stay.charging,
            cost=cost,
            currency=settings.CURRENCY,
        )

    def check_status(self, registration: str) -> ParkingStatus:
        stay = self._find_open_stay(registration)
        if stay is None:
            return ParkingStatus(registration=registration, parked=False)
        return ParkingStatus(registration=registration, parked=True, entry_date=stay.entry_date)

    def list_history_by_entry_date(self) -> List[StayOut]:
        return self._history(VehicleStay.entry_date)

    def list_history_by_registration(self) -> List[StayOut]:
        return self._history(VehicleStay.registration)

    # ── Validation ────────────────────────────────────────────────────────
    @staticmethod
    def validate_registration(registration: str):
        if not tariff_service.is_valid_registration(registration):
            logger.warning(f"[IN] Rejected {registration!r}: bad registration length")
            raise InvalidRegistration(
                f"Invalid registration number. It must be "
                f"{settings.MIN_REGISTRATION_LENGTH}-{settings.MAX_REGISTRATION_LENGTH} characters long.",
                registration=registration,
            )

    @staticmethod
    def validate_entry_date(registration: str, entry_date: str):
        if not tariff_service.is_valid_date(entry_date):
            logger.warning(f"[IN] Rejected {registration}: bad date {entry_date!r}")
            raise InvalidDate("Invalid date format.", registration=registration)

    # ── Helpers ───────────────────────────────────────────────────────────
    def _find_open_stay(self, registration: str) -> Optional[VehicleStay]:
        return (
            self.db.query(VehicleStay)
            .filter(
                VehicleStay.registration == registration,
                VehicleStay.exit_date == None,  # still parked
            )
            .order_by(VehicleStay.id)
            .first()
        )

    def _history(self, key) -> List[StayOut]:
        # id as second key keeps equal keys in arrival order
        rows = self.db.query(VehicleStay).order_by(key, VehicleStay.id).all()
        return [StayOut.model_validate(row) for row in rows]

    def _commit(self):
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.error("Commit failed, changes rolled back", exc_info=True)
            raise
