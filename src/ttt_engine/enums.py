# Area: Core
"""
ttt_engine.enums — Symbol, state and move result enums
======================================================

Defines the enumerations shared by the board, the players and the game
state machine.
"""

from enum import Enum


class Symbol(Enum):
    """
    Mark placed on a cell.

    EMPTY marks an unset cell. When passed as a starting-player
    preference it means "pick a player at random".
    """
    EMPTY = "EMPTY"
    X = "X"
    O = "O"


class GameState(Enum):
    """
    Lifecycle phase of a game.

    State transitions:
    IN_PROGRESS -> X_WON      (X completes a line)
    IN_PROGRESS -> O_WON      (O completes a line)
    IN_PROGRESS -> DRAW       (board full, no line)
    IN_PROGRESS -> CANCELLED  (cancel() or player gave no move)
    Any state   -> IN_PROGRESS (reset())
    """
    IN_PROGRESS = "IN_PROGRESS"
    X_WON = "X_WON"
    O_WON = "O_WON"
    DRAW = "DRAW"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self is not GameState.IN_PROGRESS


class MoveResult(Enum):
    """
    Outcome of a single Game.next_move() call.

    - SUCCESS: move applied and turn rotated
    - INVALID: board rejected the move; same player goes again
    - NO_RESPONSE: player returned no move; game cancelled
    - GAME_UNAVAILABLE: game already over; nothing happened
    """
    SUCCESS = "SUCCESS"
    INVALID = "INVALID"
    NO_RESPONSE = "NO_RESPONSE"
    GAME_UNAVAILABLE = "GAME_UNAVAILABLE"


# Symbol -> winning state
WIN_STATES = {
    Symbol.X: GameState.X_WON,
    Symbol.O: GameState.O_WON,
}
