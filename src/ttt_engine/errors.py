# Area: Core
"""
ttt_engine.errors — Custom exception classes
============================================

Defines the exception hierarchy for programming errors raised by the
engine. Normal game outcomes (invalid move, no response, game over) are
reported through MoveResult values and never raised.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .cell import Cell


class TicTacToeError(Exception):
    """Base exception for all ttt_engine errors."""
    pass


class CellOccupiedError(TicTacToeError):
    """Raised when a cell is set on a coordinate that is already taken.

    Callers are expected to check Board.is_valid_move() first, so this
    signals a bug in the caller rather than a bad move by a player.
    """

    def __init__(self, row: int, col: int, existing: Optional["Cell"] = None):
        self.row = row
        self.col = col
        self.existing = existing
        held_by = existing.symbol.value if existing is not None else "?"
        super().__init__(
            f"Cell ({row}, {col}) is already occupied by {held_by}"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="CELL_OCCUPIED",
            details={
                "Row": self.row,
                "Column": self.col,
                "Occupied by": self.existing.symbol.value if self.existing else None,
            },
        )


def _format_error_block(error_type: str, details: dict) -> str:
    """Format a structured error block for the error log."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " TIC-TAC-TOE ENGINE ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
    ]
    for key, value in details.items():
        if value is not None:
            lines.append(f" {key + ':':<13} {value}")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)
