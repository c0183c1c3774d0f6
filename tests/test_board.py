"""Tests for the grid/mask board."""

import numpy as np
import pytest

from gravitywords.board import EMPTY, Board


def test_new_board_is_empty() -> None:
    board = Board(3)

    assert board.grid.shape == (3, 3)
    assert np.all(board.mask == 0)
    assert all(board[r, c] == EMPTY for r in range(3) for c in range(3))
    assert board.open_columns() == [0, 1, 2]
    assert not board.is_full()


def test_set_cell_keeps_grid_and_mask_in_lockstep() -> None:
    board = Board(3)
    board.set_cell(2, 1, "A", 1)

    assert board[2, 1] == "A"
    assert board.owner(2, 1) == 1
    assert board.column_count(1) == 1

    with pytest.raises(ValueError):
        board.set_cell(0, 0, "A", 0)
    with pytest.raises(ValueError):
        board.set_cell(0, 0, EMPTY, 2)

    board.set_cell(2, 1, EMPTY, 0)
    assert board.column_count(1) == 0


def test_open_columns_and_full_board() -> None:
    board = Board(2)
    for row in range(2):
        board.set_cell(row, 0, "X", 1)

    assert board.open_columns() == [1]

    for row in range(2):
        board.set_cell(row, 1, "Y", 2)

    assert board.open_columns() == []
    assert board.is_full()
    assert str(board) == "XY\nXY"


def test_rejects_mismatched_arrays() -> None:
    with pytest.raises(ValueError):
        Board(3, grid=np.full((2, 2), EMPTY, dtype="<U1"))
    with pytest.raises(ValueError):
        Board(0)
