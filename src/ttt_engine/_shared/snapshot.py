# Area: Shared
"""
ttt_engine._shared.snapshot — Game state snapshot builder
=========================================================

Builds a plain, JSON-serializable dict describing a game. Used by the
logging output and handy for callers that want to record a position.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..cell import Cell
    from ..game import Game
    from ..move import Move


def build_game_snapshot(game: "Game") -> dict:
    """Build serializable snapshot of the game."""
    return {
        "state": game.state.value,
        "player_x": game.player_x.name,
        "player_o": game.player_o.name,
        "current_player": game.current_player.name,
        "current_symbol": game.current_symbol.value,
        "last_move": _move_snapshot(game.last_move),
        "winning_cells": _cells_snapshot(game.winning_cells),
        "board": [
            {"row": cell.row, "col": cell.col, "symbol": cell.symbol.value}
            for cell in game.board.get_cells()
        ],
    }


def _move_snapshot(move: Optional["Move"]) -> Optional[dict]:
    if move is None:
        return None
    return {"row": move.row, "col": move.col, "player": move.player.name}


def _cells_snapshot(cells: Optional[List["Cell"]]) -> List[List[int]]:
    """Return winning cells as [row, col] pairs, empty list when none."""
    if not cells:
        return []
    return [[cell.row, cell.col] for cell in cells]
