# tests/test_config.py
"""Tests for settings defaults and logging setup."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging
from logging.handlers import RotatingFileHandler
from airport_parking.config import Settings
from airport_parking.utils.logger import get_logger


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LOG_DIR", "MAX_CARS", "MAX_PARKING_DAYS", "CURRENCY"):
            monkeypatch.delenv(name, raising=False)
        s = Settings(_env_file=None)
        assert s.LOG_DIR == ""
        assert s.MAX_CARS == 100
        assert s.MAX_PARKING_DAYS == 30
        assert s.CURRENCY == "kr"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MAX_CARS", "5")
        assert Settings(_env_file=None).MAX_CARS == 5


class TestLogging:
    def test_no_log_file_by_default(self):
        get_logger("airport_parking.tests")
        handlers = logging.getLogger().handlers
        assert not any(isinstance(h, RotatingFileHandler) for h in handlers)
