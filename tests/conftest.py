"""Shared fixtures: every test gets its own empty in-memory database."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from sqlalchemy.orm import sessionmaker
from airport_parking.database import make_engine, create_tables
from airport_parking.services.registry_service import ParkingRegistry


@pytest.fixture
def db():
    engine = make_engine("sqlite://")
    create_tables(bind=engine)
    session = sessionmaker(autoflush=False, bind=engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def registry(db):
    return ParkingRegistry(db, max_cars=None)
