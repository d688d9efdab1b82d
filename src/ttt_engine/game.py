# Area: Game
"""
ttt_engine.game — The game state machine
========================================

Drives turn order: asks the current player for a move, checks it
against the board, applies it, re-evaluates the position, tells the
outputs and hands the turn to the other player.

Usage:
    from ttt_engine import Game, ManualPlayer, Symbol, MoveResult

    game = Game(ManualPlayer("X"), ManualPlayer("O"), Symbol.X)
    while not game.is_over():
        game.next_move()
    print(game.state, game.winning_cells)
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, List, Optional
import logging
import random

from .board import Board
from .cell import Cell
from .enums import GameState, MoveResult, Symbol
from .move import Move
from .outputs import ON_GAME_OVER, ON_GAME_START, ON_MOVE
from .player import Player

if TYPE_CHECKING:
    from ._config import Settings

logger = logging.getLogger("ttt_engine.game")


class Game:
    """
    A game of Tic-Tac-Toe between two players.

    The game is mutated only through next_move(), cancel() and reset().
    Terminal states stay put until reset().

    Attributes:
        _board: The live board
        _player_x: Player holding the X symbol
        _player_o: Player holding the O symbol
        _current_player: Player asked on the next next_move()
        _state: Current GameState
        _winning_cells: Completed line after a win
        _last_move: Last move applied
        _outputs: Observers notified of game events
    """

    def __init__(
        self,
        player_x: Player,
        player_o: Player,
        first_player: Symbol = Symbol.EMPTY,
        *outputs: Any,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the game and announce its start.

        Args:
            player_x: Player that plays the X symbol
            player_o: Player that plays the O symbol
            first_player: Symbol of the starting player, EMPTY for random
            *outputs: Observers to notify
            rng: Random source for the starting player. Defaults to a
                fresh Random

        Raises:
            ValueError: If the same player is passed for both symbols
        """
        if player_x is player_o:
            raise ValueError("player_x and player_o must be different players")

        self._player_x = player_x
        self._player_o = player_o
        self._rng = rng if rng is not None else random.Random()
        self._board = Board()
        self._state = GameState.IN_PROGRESS
        self._winning_cells: Optional[List[Cell]] = None
        self._last_move: Optional[Move] = None
        self._outputs: List[Any] = list(outputs)
        self._current_player = self._get_player_from_symbol(first_player)

        logger.debug(
            f"New game: {player_x.name} (X) vs {player_o.name} (O), "
            f"{self._current_player.name} starts"
        )
        self._announce(ON_GAME_START)

    @classmethod
    def from_settings(
        cls,
        player_x: Player,
        player_o: Player,
        *outputs: Any,
        settings: Optional["Settings"] = None,
        rng: Optional[random.Random] = None,
    ) -> "Game":
        """Build a game whose starting player comes from Settings."""
        if settings is None:
            from ._config import load_settings
            settings = load_settings()
        return cls(player_x, player_o, settings.first_player, *outputs, rng=rng)

    # ── Turn handling ────────────────────────────────────────

    def next_move(self) -> MoveResult:
        """
        Request a move from the current player and handle the result.

        Returns:
            GAME_UNAVAILABLE if the game is over (nothing changes),
            NO_RESPONSE if the player gave no move (game cancelled),
            INVALID if the board rejected the move (same player next),
            SUCCESS otherwise.
        """
        if self.is_over():
            return MoveResult.GAME_UNAVAILABLE

        player = self._current_player
        move = player.make_move(self._board)
        if move is None:
            logger.warning(f"{player.name} gave no move, cancelling game")
            self.cancel()
            return MoveResult.NO_RESPONSE

        if not self._board.is_valid_move(move):
            logger.warning(f"{player.name} proposed invalid move ({move.row}, {move.col})")
            return MoveResult.INVALID

        # Symbol comes from turn tracking, not from move.player
        symbol = self.current_symbol
        self._board.set_cell(Cell(row=move.row, col=move.col, symbol=symbol))
        logger.debug(f"{player.name} ({symbol.value}) played ({move.row}, {move.col})")

        self._handle_move_made(move)
        self._next_player()
        return MoveResult.SUCCESS

    def play(self, max_turns: Optional[int] = None) -> GameState:
        """
        Call next_move() until the game is over.

        Args:
            max_turns: Stop after this many next_move() calls, INVALID
                ones included. None means no limit.

        Returns:
            The state when the loop stopped.
        """
        turns = 0
        while not self.is_over():
            if max_turns is not None and turns >= max_turns:
                break
            self.next_move()
            turns += 1
        return self._state

    def _handle_move_made(self, move: Move) -> None:
        """Record the move, update state and announce to outputs."""
        state, winning_cells = self._board.get_current_state()

        self._last_move = move
        self._winning_cells = winning_cells
        if state != self._state:
            self._advance_state(state)

        if state.is_terminal:
            self._announce(ON_GAME_OVER)
        else:
            self._announce(ON_MOVE)

    def _next_player(self) -> None:
        self._current_player = (
            self._player_o if self._current_player is self._player_x else self._player_x
        )

    def cancel(self) -> None:
        """Cancel the game, if it is in progress."""
        if self.is_over():
            return
        self._advance_state(GameState.CANCELLED)
        self._announce(ON_GAME_OVER)

    def reset(self, first_player: Symbol = Symbol.EMPTY) -> None:
        """
        Start over on a fresh board.

        Announces a new game start. Does NOT announce the end of the
        game being replaced; call cancel() first for that.
        """
        self._board = Board()
        self._current_player = self._get_player_from_symbol(first_player)
        self._state = GameState.IN_PROGRESS
        self._winning_cells = None
        self._last_move = None

        logger.debug(f"Game reset, {self._current_player.name} starts")
        self._announce(ON_GAME_START)

    def _advance_state(self, new_state: GameState) -> None:
        logger.info(f"State: {self._state.value} → {new_state.value}")
        self._state = new_state

    # ── Player selection ─────────────────────────────────────

    def _get_player_from_symbol(self, symbol: Symbol) -> Player:
        """Return the player for the symbol, or a random one for EMPTY."""
        if symbol is Symbol.X:
            return self._player_x
        if symbol is Symbol.O:
            return self._player_o
        return self._get_random_player()

    def _get_random_player(self) -> Player:
        return self._rng.choice((self._player_x, self._player_o))

    def get_player(self, symbol: Symbol) -> Player:
        """
        Return the player assigned to X or O.

        Raises:
            ValueError: For Symbol.EMPTY
        """
        if symbol is Symbol.X:
            return self._player_x
        if symbol is Symbol.O:
            return self._player_o
        raise ValueError("No player is assigned to the EMPTY symbol")

    # ── Outputs ──────────────────────────────────────────────

    def _announce(self, handler_name: str) -> None:
        """Call the named handler on every output that has one."""
        for output in list(self._outputs):
            handler = getattr(output, handler_name, None)
            if handler is not None:
                handler(self)

    def add_outputs(self, *outputs: Any) -> None:
        """Add outputs; they are told about every later event."""
        self._outputs.extend(outputs)

    def remove_output(self, output: Any) -> None:
        """Remove an output. Does nothing if it is not registered."""
        if output in self._outputs:
            self._outputs.remove(output)

    @property
    def outputs(self) -> List[Any]:
        return self._outputs

    # ── Accessors ────────────────────────────────────────────

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def current_symbol(self) -> Symbol:
        """Symbol of the current player, X or O."""
        return Symbol.X if self._current_player is self._player_x else Symbol.O

    @property
    def board(self) -> Board:
        """The live board."""
        return self._board

    def board_copy(self) -> Board:
        """An independent copy of the board."""
        return self._board.copy()

    @property
    def last_move(self) -> Optional[Move]:
        return self._last_move

    @property
    def winning_cells(self) -> Optional[List[Cell]]:
        return self._winning_cells

    @property
    def state(self) -> GameState:
        return self._state

    def is_over(self) -> bool:
        """Whether the game is in any state except IN_PROGRESS."""
        return self._state.is_terminal

    @property
    def player_x(self) -> Player:
        return self._player_x

    @property
    def player_o(self) -> Player:
        return self._player_o
