"""Configuration package — settings, logging, and exceptions."""

from config.exceptions import (
    OutlinerError,
    UnauthorizedError,
    NotFoundError,
    DatabaseError,
    ValidationError,
    EmptyUpdateError,
)
from config.logging_config import setup_logging
from config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "OutlinerError",
    "UnauthorizedError",
    "NotFoundError",
    "DatabaseError",
    "ValidationError",
    "EmptyUpdateError",
]
