"""Configuration settings loaded from .env file."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, loaded from .env file.

    Every field can be overridden with an ``OUTLINER_`` prefixed environment
    variable, e.g. ``OUTLINER_CLI_USER_ID``.
    """

    # Database
    sqlite_db_path: Path = Path("./data/outliner.db")

    # Logging
    log_dir: Path = Path("./data/logs")
    log_level: str = "INFO"

    # Identity used by the local CLI (the core never reads this directly)
    cli_user_id: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "OUTLINER_",
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    @field_validator("cli_user_id")
    @classmethod
    def validate_cli_user_id(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("cli_user_id must not be blank")
        return v

    @field_validator("sqlite_db_path", "log_dir")
    @classmethod
    def ensure_parent_dirs(cls, v: Path) -> Path:
        v.parent.mkdir(parents=True, exist_ok=True)
        return v

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
