# airport_parking/schemas/vehicle_stay.py
from pydantic import BaseModel
from typing import Optional


class StayOut(BaseModel):
    id: int
    registration: str
    entry_date: str
    exit_date: Optional[str]
    charging: bool
    days: Optional[int]
    cost: Optional[int]     # set once the car has driven out

    class Config:
        from_attributes = True

    @property
    def is_parked(self) -> bool:
        return self.exit_date is None


class Receipt(BaseModel):
    registration: str
    entry_date: str
    exit_date: str
    days: int
    charging: bool
    cost: int
    currency: str = "kr"


class ParkingStatus(BaseModel):
    registration: str
    parked: bool
    entry_date: Optional[str] = None
