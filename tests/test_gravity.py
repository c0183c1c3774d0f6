"""Tests for gravity insertion and column compaction."""

import numpy as np
import pytest

from gravitywords.board import EMPTY, Board
from gravitywords.generator.gravity import (
    InvalidPlacementError,
    apply_gravity,
    compact_column,
    insert_letter,
    undo_changes,
)


def _column(board: Board, col: int) -> list[tuple[str, int]]:
    return [(board[r, col], board.owner(r, col)) for r in range(board.size)]


def test_insert_into_empty_cell() -> None:
    board = Board(3)

    changes = insert_letter(board, 2, 0, "A", 1)

    assert _column(board, 0) == [(EMPTY, 0), (EMPTY, 0), ("A", 1)]
    undo_changes(board, changes)
    assert board.column_count(0) == 0


def test_insert_lifts_other_words_to_top() -> None:
    board = Board(4)
    board.set_cell(2, 0, "Y", 1)
    board.set_cell(3, 0, "X", 1)

    insert_letter(board, 3, 0, "Z", 2)

    assert _column(board, 0) == [("Y", 1), ("X", 1), (EMPTY, 0), ("Z", 2)]


def test_insert_keeps_own_letters_in_place() -> None:
    board = Board(4)
    board.set_cell(1, 0, "S", 2)
    board.set_cell(3, 0, "X", 1)

    insert_letter(board, 3, 0, "Z", 2)

    assert _column(board, 0) == [("X", 1), ("S", 2), (EMPTY, 0), ("Z", 2)]


def test_insert_loses_no_shifted_letter() -> None:
    board = Board(3)
    board.set_cell(1, 2, "A", 1)
    board.set_cell(2, 2, "B", 1)

    insert_letter(board, 2, 2, "C", 2)

    assert _column(board, 2) == [("A", 1), ("B", 1), ("C", 2)]
    assert board.column_count(2) == 3


def test_undo_restores_shifted_column() -> None:
    board = Board(4)
    board.set_cell(1, 1, "P", 3)
    board.set_cell(2, 1, "Q", 2)
    board.set_cell(3, 1, "R", 1)
    grid_before, mask_before = board.grid.copy(), board.mask.copy()

    changes = insert_letter(board, 3, 1, "N", 4)
    assert _column(board, 1) == [("P", 3), ("Q", 2), ("R", 1), ("N", 4)]

    undo_changes(board, changes)
    assert np.array_equal(board.grid, grid_before)
    assert np.array_equal(board.mask, mask_before)


def test_insert_without_room_is_rejected() -> None:
    board = Board(3)
    for row, letter in enumerate("ABC"):
        board.set_cell(row, 0, letter, 1)
    grid_before, mask_before = board.grid.copy(), board.mask.copy()

    with pytest.raises(InvalidPlacementError):
        insert_letter(board, 2, 0, "D", 2)

    assert np.array_equal(board.grid, grid_before)
    assert np.array_equal(board.mask, mask_before)


def test_compact_column_preserves_order() -> None:
    column = np.array(["A", EMPTY, "B", EMPTY], dtype="<U1")

    assert compact_column(column).tolist() == [EMPTY, EMPTY, "A", "B"]
    assert column.tolist() == ["A", EMPTY, "B", EMPTY]


def test_apply_gravity_settles_every_column() -> None:
    grid = np.array(
        [
            ["A", "B", EMPTY],
            [EMPTY, "C", EMPTY],
            [EMPTY, EMPTY, "D"],
        ],
        dtype="<U1",
    )

    apply_gravity(grid)

    assert grid.tolist() == [
        [EMPTY, EMPTY, EMPTY],
        [EMPTY, "B", EMPTY],
        ["A", "C", "D"],
    ]
