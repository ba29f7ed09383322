# airport_parking/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite://"   # in-memory, lost at process exit

    # ── Capacity ──────────────────────────────────────────────────────────
    MAX_CARS: Optional[int] = 100     # None or <= 0 disables the cap

    # ── Stay rules ────────────────────────────────────────────────────────
    MAX_PARKING_DAYS: int = 30
    MIN_REGISTRATION_LENGTH: int = 3
    MAX_REGISTRATION_LENGTH: int = 8

    # ── Tariff ────────────────────────────────────────────────────────────
    DAILY_RATE: int = 120             # per day, first DISCOUNT_AFTER_DAYS days
    DISCOUNT_AFTER_DAYS: int = 10
    REDUCED_DAILY_RATE: int = 50      # per day after that
    CHARGING_FEE: int = 250           # flat EV charging surcharge
    CURRENCY: str = "kr"

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    CONSOLE_LOG_LEVEL: str = "ERROR"     # keep stderr quiet under the menu
    LOG_DIR: str = ""                    # set to a directory to keep parking.log there

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
