"""
Vehicle stay table.
One row per parking episode, in arrival order. Departures fill in
exit_date, days and cost on the same row; rows are never deleted.
"""

from sqlalchemy import Column, Integer, String, Boolean, DateTime
from airport_parking.database import Base


class VehicleStay(Base):
    __tablename__ = "vehicle_stays"

    id = Column(Integer, primary_key=True, autoincrement=True)
    registration = Column(String(8), nullable=False, index=True)
    entry_date = Column(String(10), nullable=False, index=True)   # YYYY-MM-DD
    exit_date = Column(String(10))                                 # NULL while parked
    charging = Column(Boolean, nullable=False, default=False)
    days = Column(Integer)                                         # set on exit
    cost = Column(Integer)                                         # set on exit
    created_at = Column(DateTime)

    def __repr__(self):
        return f"<VehicleStay {self.id} reg={self.registration} in={self.entry_date} out={self.exit_date}>"
