# Area: Players
"""
ttt_engine.player — The move-supplier contract
==============================================

Subclass Player and implement make_move(). The game calls it exactly
once per Game.next_move() while that player is the current one.

    from ttt_engine import Player, Move

    class CornerPlayer(Player):
        def make_move(self, board):
            for row, col in [(0, 0), (0, 2), (2, 0), (2, 2)]:
                if board.get_cell(row, col) is None:
                    return Move(row, col, self)
            return None
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .board import Board
    from .move import Move


class Player(ABC):
    """
    Abstract base class for a Tic-Tac-Toe player.

    Attributes:
        name: Display name of the player
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def make_move(self, board: "Board") -> Optional["Move"]:
        """
        Called when it is this player's turn.

        Parameters
        ----------
        board : Board
            The live game board. Read it, do not mutate it.

        Returns
        -------
        Move or None
            The proposed move. Returning None forfeits and the game is
            cancelled.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
