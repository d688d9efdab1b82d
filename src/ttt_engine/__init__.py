"""
ttt_engine — Tic-Tac-Toe Rules Engine
=====================================

Board state, move validation, win/draw detection, turn rotation and
event notification for a two-player game of Tic-Tac-Toe.

Quick Start:
    from ttt_engine import Game, ManualPlayer, Symbol

    x = ManualPlayer("Alice", always_have_move=False)
    o = ManualPlayer("Bob")                 # random moves when idle
    game = Game(x, o, Symbol.X)

    x.set_next(1, 1)
    game.next_move()                        # MoveResult.SUCCESS
    game.next_move()                        # Bob plays a random cell

Custom Players:
    from ttt_engine import Player, Move
    class MyPlayer(Player): ...             # Implement make_move(board)

Observers:
    from ttt_engine import GameOutput
    class Scoreboard(GameOutput):
        def on_game_over(self, game): ...
    game.add_outputs(Scoreboard())
"""

from .board import Board, WINNING_LINES
from .cell import Cell
from .enums import GameState, MoveResult, Symbol
from .errors import TicTacToeError, CellOccupiedError
from .game import Game
from .manual_player import ManualPlayer
from .move import Move
from .outputs import GameOutput, LoggingOutput
from .player import Player
from ._config import Settings, load_settings
from ._shared import setup_logging, build_game_snapshot

__all__ = [
    # Main classes
    "Game",
    "Board",
    "Cell",
    "Move",
    # Enums
    "Symbol",
    "GameState",
    "MoveResult",
    # Players
    "Player",
    "ManualPlayer",
    # Outputs
    "GameOutput",
    "LoggingOutput",
    # Errors
    "TicTacToeError",
    "CellOccupiedError",
    # Configuration
    "Settings",
    "load_settings",
    "setup_logging",
    "build_game_snapshot",
    "WINNING_LINES",
]
__version__ = "1.0.0"
