# Area: Outputs
"""
ttt_engine.outputs — Game observers
===================================

An output is told when a game starts, when a move is made and when the
game ends. Every handler is optional: subclass GameOutput and override
only what you need, or pass any object with some of the three methods.
A missing handler is skipped.

Each handler receives the Game and reads what it needs through the
game's accessors.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional
import logging

from ._shared.snapshot import build_game_snapshot

if TYPE_CHECKING:
    from .game import Game

# Handler names looked up on each output
ON_GAME_START = "on_game_start"
ON_MOVE = "on_move"
ON_GAME_OVER = "on_game_over"


class GameOutput:
    """Base output with no-op handlers."""

    def on_game_start(self, game: "Game") -> None:
        pass

    def on_move(self, game: "Game") -> None:
        pass

    def on_game_over(self, game: "Game") -> None:
        pass


class LoggingOutput(GameOutput):
    """Output that writes every game event to a logger."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger("ttt_engine.output")
        self.level = level

    def on_game_start(self, game: "Game") -> None:
        snap = build_game_snapshot(game)
        self.logger.log(
            self.level,
            f"Game started: {snap['player_x']} (X) vs {snap['player_o']} (O), "
            f"{snap['current_player']} to move",
        )

    def on_move(self, game: "Game") -> None:
        move = game.last_move
        cell = game.board.get_cell(move.row, move.col)
        self.logger.log(
            self.level,
            f"{game.current_player.name} ({cell.symbol.value}) played "
            f"({move.row}, {move.col})",
        )
        self.logger.debug(f"Board:\n{game.board}")

    def on_game_over(self, game: "Game") -> None:
        snap = build_game_snapshot(game)
        message = f"Game over: {snap['state']}"
        if snap["winning_cells"]:
            message += f" on {snap['winning_cells']}"
        self.logger.log(self.level, message)
