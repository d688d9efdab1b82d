# Area: Core
"""
ttt_engine.move — Proposed placement
====================================

A Move is what a player proposes. It is not checked against the board
until the game hands it to Board.is_valid_move().
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .player import Player


@dataclass(frozen=True)
class Move:
    """
    An intended placement by a player.

    Attributes:
        row: Target row (not range-checked here)
        col: Target column (not range-checked here)
        player: The player proposing the move
    """

    row: int
    col: int
    player: "Player"

    @property
    def position(self) -> tuple:
        return (self.row, self.col)
