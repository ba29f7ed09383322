# Airport Parking — Database Models
# Import all models here for SQLAlchemy discovery

from airport_parking.models.vehicle_stay import VehicleStay   # noqa
