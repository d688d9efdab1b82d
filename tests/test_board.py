# Area: Core Tests
"""Tests for Board validation and state evaluation."""

import pytest

from ttt_engine import Board, Cell, CellOccupiedError, GameState, ManualPlayer, Move, Symbol
from ttt_engine.board import WINNING_LINES


def _board_from(rows):
    """Build a board from three strings like 'XO.'."""
    cells = []
    for r, line in enumerate(rows):
        for c, mark in enumerate(line):
            if mark != ".":
                cells.append(Cell(row=r, col=c, symbol=Symbol(mark)))
    return Board(cells)


@pytest.fixture
def player():
    return ManualPlayer("Tester", always_have_move=False)


class TestBoardCells:
    """Tests for getting and setting cells."""

    def test_new_board_is_empty(self):
        board = Board()
        assert len(board) == 0
        assert board.get_cells() == []
        assert len(board.get_empty_cells()) == 9

    def test_set_and_get_cell(self):
        board = Board()
        cell = Cell(row=1, col=1, symbol=Symbol.X)
        board.set_cell(cell)
        assert board.get_cell(1, 1) == cell
        assert board.get_cell(0, 0) is None
        assert (1, 1) in board

    def test_empty_cells_exclude_occupied(self):
        board = _board_from(["X..", ".O.", "..."])
        empty = board.get_empty_cells()
        assert (0, 0) not in empty
        assert (1, 1) not in empty
        assert len(empty) == 7

    def test_empty_cells_are_row_major(self):
        board = _board_from(["X.X", "...", "OOO"])
        assert board.get_empty_cells() == [(0, 1), (1, 0), (1, 1), (1, 2)]

    def test_set_occupied_cell_raises(self):
        board = Board()
        board.set_cell(Cell(row=0, col=0, symbol=Symbol.X))
        with pytest.raises(CellOccupiedError) as exc_info:
            board.set_cell(Cell(row=0, col=0, symbol=Symbol.O))
        assert exc_info.value.row == 0
        assert exc_info.value.col == 0
        assert exc_info.value.existing.symbol == Symbol.X
        assert board.get_cell(0, 0).symbol == Symbol.X

    def test_constructor_rejects_duplicate_coordinates(self):
        with pytest.raises(CellOccupiedError):
            Board([Cell(row=2, col=2, symbol=Symbol.X), Cell(row=2, col=2, symbol=Symbol.O)])

    def test_str_renders_grid(self):
        board = _board_from(["X..", ".O.", "..X"])
        assert str(board) == "X . .\n. O .\n. . X"


class TestBoardCopy:
    """Tests for snapshot independence."""

    def test_copy_is_independent(self):
        board = _board_from(["X..", "...", "..."])
        copy = board.copy()
        copy.set_cell(Cell(row=1, col=1, symbol=Symbol.O))
        assert board.get_cell(1, 1) is None
        board.set_cell(Cell(row=2, col=2, symbol=Symbol.O))
        assert copy.get_cell(2, 2) is None

    def test_constructor_copy(self):
        board = _board_from(["XO.", "...", "..."])
        copy = Board(board.get_cells())
        assert copy.get_cells() == board.get_cells()


class TestIsValidMove:
    """Tests for move validation."""

    def test_valid_move_on_empty_cell(self, player):
        assert Board().is_valid_move(Move(1, 1, player)) is True

    def test_occupied_cell_is_invalid(self, player):
        board = _board_from(["...", ".X.", "..."])
        assert board.is_valid_move(Move(1, 1, player)) is False

    @pytest.mark.parametrize("row,col", [(-1, 0), (3, 0), (0, -1), (0, 3), (9, 9)])
    def test_out_of_range_is_invalid(self, player, row, col):
        assert Board().is_valid_move(Move(row, col, player)) is False

    @pytest.mark.parametrize("row,col", [(1.5, 0), (0, 1.0), (True, 0), ("1", 1), (None, 0)])
    def test_non_integer_coordinates_are_invalid(self, player, row, col):
        """Only whole-number indexes a Cell would accept are valid."""
        assert Board().is_valid_move(Move(row, col, player)) is False


class TestGetCurrentState:
    """Tests for win and draw detection."""

    @pytest.mark.parametrize("line", WINNING_LINES)
    @pytest.mark.parametrize("symbol,expected", [
        (Symbol.X, GameState.X_WON),
        (Symbol.O, GameState.O_WON),
    ])
    def test_every_line_wins(self, line, symbol, expected):
        board = Board([Cell(row=r, col=c, symbol=symbol) for r, c in line])
        state, winning = board.get_current_state()
        assert state == expected
        assert sorted(cell.position for cell in winning) == sorted(line)
        assert all(cell.symbol == symbol for cell in winning)

    def test_there_are_eight_lines(self):
        assert len(WINNING_LINES) == 8

    def test_empty_board_in_progress(self):
        assert Board().get_current_state() == (GameState.IN_PROGRESS, None)

    def test_mixed_line_is_not_a_win(self):
        board = _board_from(["XXO", "...", "..."])
        assert board.get_current_state() == (GameState.IN_PROGRESS, None)

    def test_full_board_without_line_is_draw(self):
        board = _board_from(["XOX", "XOO", "OXX"])
        assert board.is_full()
        assert board.get_current_state() == (GameState.DRAW, None)

    def test_win_beats_draw_on_full_board(self):
        board = _board_from(["XOX", "OXO", "OXX"])
        assert board.is_full()
        state, winning = board.get_current_state()
        assert state == GameState.X_WON
        assert [cell.position for cell in winning] == [(0, 0), (1, 1), (2, 2)]

    def test_winning_cells_are_on_board(self):
        board = _board_from(["O..", "O.X", "O.X"])
        state, winning = board.get_current_state()
        assert state == GameState.O_WON
        for cell in winning:
            assert board.get_cell(cell.row, cell.col) == cell
