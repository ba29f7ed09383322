# airport_parking/database.py
"""
Database engine, session factory, and table creation.
Uses SQLAlchemy on an in-memory SQLite database by default, so the whole
parking history lives for exactly one process run.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from airport_parking.config import settings

Base = declarative_base()


def make_engine(url: str = None):
    """
    Build an engine for the given URL.
    In-memory SQLite needs a single shared connection, otherwise every
    new connection would see an empty database.
    """
    url = url or settings.DATABASE_URL
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,                  # Set True to log all SQL queries (debug only)
        )
    return create_engine(url, pool_pre_ping=True, echo=False)


engine = make_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables(bind=None):
    """
    Creates all DB tables. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from airport_parking.models.vehicle_stay import VehicleStay   # noqa

    Base.metadata.create_all(bind=bind or engine)
