# airport_parking/utils/logger.py
"""
Centralised logging configuration for the entire application.
Logs to stderr, and to a rotating file in LOG_DIR when one is configured.
The console handler defaults to ERROR so it does not clutter the menu.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from airport_parking.config import settings

_configured = False


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    log_level = settings.LOG_LEVEL.upper()
    console_level = settings.CONSOLE_LOG_LEVEL.upper()

    # Console handler
    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(log_level)
    root.addHandler(console)

    # Rotating file handler — keeps last 10 × 5MB log files
    if settings.LOG_DIR:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=os.path.join(settings.LOG_DIR, "parking.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=10,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)


def set_level(level: str):
    """Override the root and file log level after startup (e.g. from --log-level)."""
    _configure_root_logger()
    root = logging.getLogger()
    root.setLevel(level.upper())
    for handler in root.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
