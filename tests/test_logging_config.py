# Area: Shared Tests
"""Tests for logging setup and engine error logging."""

import json
import logging
import os

import pytest

from ttt_engine import Cell, CellOccupiedError, Symbol
from ttt_engine._config import ENV_MAPPINGS
from ttt_engine._shared.logging_config import (
    JSONFormatter,
    TerminalFormatter,
    log_engine_error,
    setup_logging,
)


@pytest.fixture
def restore_pkg_logger(monkeypatch, tmp_path):
    """Undo setup_logging() side effects on the package logger."""
    for key in ENV_MAPPINGS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    pkg_logger = logging.getLogger("ttt_engine")
    handlers = list(pkg_logger.handlers)
    level = pkg_logger.level
    propagate = pkg_logger.propagate
    yield pkg_logger
    for handler in pkg_logger.handlers:
        handler.close()
    pkg_logger.handlers[:] = handlers
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate


def _record(level=logging.INFO, msg="hello"):
    return logging.LogRecord("ttt_engine.test", level, __file__, 1, msg, None, None)


class TestFormatters:
    """Tests for terminal and JSON formatters."""

    def test_terminal_formatter_colors_level(self):
        text = TerminalFormatter(fmt="%(levelname)s %(message)s").format(_record(logging.WARNING))
        assert "\033[33m" in text
        assert text.endswith("hello")

    def test_terminal_formatter_leaves_record_untouched(self):
        record = _record(logging.ERROR)
        TerminalFormatter().format(record)
        assert record.levelname == "ERROR"

    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "ttt_engine.test"
        assert data["message"] == "hello"


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_terminal_only_by_default(self, restore_pkg_logger):
        setup_logging()
        assert len(restore_pkg_logger.handlers) == 1
        assert restore_pkg_logger.level == logging.INFO
        assert restore_pkg_logger.propagate is False

    def test_level_from_env(self, restore_pkg_logger, monkeypatch):
        monkeypatch.setenv("TTT_LOG_LEVEL", "DEBUG")
        setup_logging()
        assert restore_pkg_logger.level == logging.DEBUG

    def test_file_handler_writes_json(self, restore_pkg_logger, tmp_path):
        log_file = tmp_path / "logs" / "engine.log"
        setup_logging(log_file_path=str(log_file), level=logging.INFO)
        logging.getLogger("ttt_engine.game").info("State: IN_PROGRESS → X_WON")
        for handler in restore_pkg_logger.handlers:
            handler.flush()
        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "State: IN_PROGRESS → X_WON"

    def test_explicit_arguments_skip_environment(self, restore_pkg_logger, monkeypatch, tmp_path):
        """With level and file given, unrelated bad settings do not matter."""
        monkeypatch.setenv("TTT_FIRST_PLAYER", "Z")
        (tmp_path / ".env").write_text("TTT_LOG_FILE=from-dotenv.log\n", encoding="utf-8")
        setup_logging(log_file_path=str(tmp_path / "engine.log"), level=logging.WARNING)
        assert restore_pkg_logger.level == logging.WARNING
        assert len(restore_pkg_logger.handlers) == 2
        assert "TTT_LOG_FILE" not in os.environ

    def test_repeated_setup_does_not_stack_handlers(self, restore_pkg_logger):
        setup_logging()
        setup_logging()
        assert len(restore_pkg_logger.handlers) == 1


class TestLogEngineError:
    """Tests for structured error logging."""

    def test_error_block_printed(self, capsys):
        error = CellOccupiedError(1, 2, Cell(row=1, col=2, symbol=Symbol.O))
        log_engine_error(error)
        err = capsys.readouterr().err
        assert "CELL_OCCUPIED" in err
        assert "Occupied by:  O" in err

    def test_error_message(self):
        error = CellOccupiedError(0, 1, Cell(row=0, col=1, symbol=Symbol.X))
        assert str(error) == "Cell (0, 1) is already occupied by X"
        assert isinstance(error.format_error_log(), str)
