# Area: Shared
"""
ttt_engine._config — Engine configuration
=========================================

Settings read from the environment (and a .env file, if present).

Environment variables:
    TTT_LOG_LEVEL     Logging level name (default: INFO)
    TTT_LOG_FILE      Path of a JSON log file (default: none)
    TTT_FIRST_PLAYER  X, O or EMPTY for random (default: EMPTY)
"""

from __future__ import annotations
import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, field_validator

from .enums import Symbol

# Environment variable -> settings field
ENV_MAPPINGS = {
    "TTT_LOG_LEVEL": "log_level",
    "TTT_LOG_FILE": "log_file",
    "TTT_FIRST_PLAYER": "first_player",
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """Validated engine settings."""

    log_level: str = "INFO"
    log_file: Optional[str] = None
    first_player: Symbol = Symbol.EMPTY

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = str(value).upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}, expected one of {sorted(LOG_LEVELS)}")
        return value

    @field_validator("first_player", mode="before")
    @classmethod
    def _symbol_from_name(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env_file: Optional .env path. Defaults to the nearest .env at or
            above the working directory. Values already in the
            environment are not overridden.

    Raises:
        pydantic.ValidationError: If a value is invalid
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    config = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        value = os.environ.get(env_key)
        if value:
            config[config_key] = value

    return Settings(**config)
