# Area: Shared
"""
ttt_engine._shared.logging_config — Logging setup
=================================================

Configures dual logging: terminal (colored) + optional file (JSON).
The library never calls this on import; applications opt in.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..errors import TicTacToeError

# Package logger
logger = logging.getLogger("ttt_engine")


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        levelname = record.levelname
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: Optional[str] = None,
    level: Optional[int] = None,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str, optional
        Path to a JSON log file. Defaults to TTT_LOG_FILE; no file
        handler when neither is set.
    level : int, optional
        Logging level. Defaults to TTT_LOG_LEVEL (INFO).
    """
    if level is None or log_file_path is None:
        from .._config import load_settings

        settings = load_settings()
        if level is None:
            level = settings.log_level_number
        if log_file_path is None:
            log_file_path = settings.log_file

    pkg_logger = logging.getLogger("ttt_engine")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    pkg_logger.handlers.clear()

    # Terminal handler with colors
    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    # File handler with JSON
    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_engine_error(error: "TicTacToeError") -> None:
    """
    Log an engine error in the structured format.

    Parameters
    ----------
    error : TicTacToeError
        The error to log. Errors with format_error_log() get the full
        block, others a single line.
    """
    formatter = getattr(error, "format_error_log", None)
    if formatter is not None:
        print(formatter(), file=sys.stderr)

    logger.error(
        f"Engine error: {error.__class__.__name__}: {error}",
        extra={"error_type": error.__class__.__name__},
    )
