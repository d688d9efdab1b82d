# Area: Core
"""
ttt_engine.board — 3x3 board
============================

Holds the occupied cells, validates moves and evaluates whether the
position is won, drawn or still in progress.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from .cell import Cell
from .enums import GameState, WIN_STATES
from .errors import CellOccupiedError
from .move import Move

logger = logging.getLogger("ttt_engine.board")

BOARD_SIZE = 3

# All possible winning lines (as list of (row, col) tuples)
WINNING_LINES = [
    # Rows
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    # Columns
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    # Diagonals
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]


def _on_board(index) -> bool:
    """Whether index is a whole-number row or column of the grid."""
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < BOARD_SIZE


class Board:
    """
    The Tic-Tac-Toe grid.

    Cells are keyed by (row, col); there is never more than one cell per
    coordinate pair. Passing existing cells to the constructor builds an
    independent snapshot.

    Attributes:
        _cells: Occupied cells keyed by (row, col)
    """

    def __init__(self, cells: Optional[Iterable[Cell]] = None):
        self._cells: Dict[Tuple[int, int], Cell] = {}
        for cell in cells or ():
            self.set_cell(cell)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Return the cell at (row, col), or None if it is empty."""
        return self._cells.get((row, col))

    def get_cells(self) -> List[Cell]:
        """Return the occupied cells in row-major order."""
        return [self._cells[pos] for pos in sorted(self._cells)]

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        return [
            (row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if (row, col) not in self._cells
        ]

    def is_valid_move(self, move: Move) -> bool:
        """
        Check a move against the board.

        Only checks bounds and occupancy. Whose turn it is belongs to
        the game.
        """
        if not (_on_board(move.row) and _on_board(move.col)):
            return False
        return (move.row, move.col) not in self._cells

    def set_cell(self, cell: Cell) -> None:
        """
        Place a cell on the board.

        Raises:
            CellOccupiedError: If the coordinate is already taken
        """
        existing = self._cells.get(cell.position)
        if existing is not None:
            raise CellOccupiedError(cell.row, cell.col, existing)
        self._cells[cell.position] = cell
        logger.debug(f"Placed {cell}")

    def is_full(self) -> bool:
        return len(self._cells) == BOARD_SIZE * BOARD_SIZE

    def get_current_state(self) -> Tuple[GameState, Optional[List[Cell]]]:
        """
        Evaluate the position.

        A complete line wins even on a full board.

        Returns:
            (state, winning_cells). winning_cells is the completed line
            for a win and None otherwise.
        """
        for line in WINNING_LINES:
            cells = self._check_line(line)
            if cells is not None:
                return WIN_STATES[cells[0].symbol], cells

        if self.is_full():
            return GameState.DRAW, None
        return GameState.IN_PROGRESS, None

    def _check_line(self, line: List[Tuple[int, int]]) -> Optional[List[Cell]]:
        """Return the line's cells if all three hold the same symbol."""
        cells = []
        for pos in line:
            cell = self._cells.get(pos)
            if cell is None:
                return None  # Empty cell, no winner on this line
            cells.append(cell)

        if cells[0].symbol == cells[1].symbol == cells[2].symbol:
            return cells
        return None

    def copy(self) -> "Board":
        """Return an independent copy of this board."""
        return Board(self._cells.values())

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, position: Tuple[int, int]) -> bool:
        return position in self._cells

    def __str__(self) -> str:
        rows = []
        for row in range(BOARD_SIZE):
            marks = []
            for col in range(BOARD_SIZE):
                cell = self._cells.get((row, col))
                marks.append(cell.symbol.value if cell else ".")
            rows.append(" ".join(marks))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Board({self.get_cells()!r})"
