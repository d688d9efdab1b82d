# Area: Shared
"""
Shared utilities used across the engine.

This package contains:
- Logging configuration
- Game snapshot builder
"""

from .logging_config import setup_logging, log_engine_error
from .snapshot import build_game_snapshot

__all__ = [
    "setup_logging",
    "log_engine_error",
    "build_game_snapshot",
]
