# Area: Players
"""
ttt_engine.manual_player — Scriptable player
============================================

A player whose next move is set from outside with set_next(). When
nothing is staged it either picks a random empty cell or gives no move.

Usage:
    from ttt_engine import Game, ManualPlayer, Symbol

    alice = ManualPlayer("Alice", always_have_move=False)
    bob = ManualPlayer("Bob")              # random when nothing staged
    game = Game(alice, bob, Symbol.X)
    alice.set_next(1, 1)
    game.next_move()
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional
import logging
import random

from .move import Move
from .player import Player

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger("ttt_engine.player")


class ManualPlayer(Player):
    """
    Player driven by staged moves, with an optional random fallback.

    The staged move is one-shot: the next make_move() call returns and
    clears it, whoever makes that call.
    """

    def __init__(
        self,
        name: str,
        always_have_move: bool = True,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize ManualPlayer.

        Args:
            name: Name of the player
            always_have_move: Pick a random empty cell when no move is staged
            rng: Random source for the fallback. Defaults to a fresh Random
        """
        super().__init__(name)
        self.always_have_move = always_have_move
        self._rng = rng if rng is not None else random.Random()
        self._next_move: Optional[Move] = None

    def set_next(self, row: int, col: int) -> None:
        """Stage the coordinates of the next move. Cleared after one use."""
        self._next_move = Move(row, col, self)

    def has_next(self) -> bool:
        return self._next_move is not None

    def clear_next(self) -> None:
        self._next_move = None

    def make_move(self, board: "Board") -> Optional[Move]:
        if self._next_move is not None:
            move = self._next_move
            self._next_move = None
            return move

        if self.always_have_move:
            return self._get_random(board)
        return None

    def _get_random(self, board: "Board") -> Optional[Move]:
        """Return a move on a uniformly chosen empty cell, or None if full."""
        empty_cells = board.get_empty_cells()
        if not empty_cells:
            logger.debug(f"{self.name}: no empty cells for a random move")
            return None
        row, col = empty_cells[self._rng.randrange(len(empty_cells))]
        return Move(row, col, self)
