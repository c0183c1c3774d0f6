"""Letter insertion and column settling under the gravity rule."""

from typing import NamedTuple

import numpy as np

from gravitywords.board import EMPTY, Board


class CellChange(NamedTuple):
    """Previous contents of a cell overwritten by an insertion."""

    row: int
    col: int
    letter: str
    word_id: int


class InvalidPlacementError(Exception):
    """Exception raised when a letter cannot be inserted at the requested cell."""

    pass


def insert_letter(board: Board, row: int, col: int, letter: str, word_id: int) -> list[CellChange]:
    """Insert a letter of word `word_id` at (row, col), mutating `board` in-place.

    An empty target is a plain write.  If the target holds a letter of another word,
    every letter of other words at or above the target row is lifted, in its original
    top-to-bottom order, into the topmost rows that are not held by `word_id` itself,
    and the new letter takes the target cell.  Letters of `word_id` never move.

    Returns:
        Undo record for `undo_changes`.

    Raises:
        InvalidPlacementError: If the lifted letters do not fit above the target row.
            The board is left untouched.
    """
    if board.owner(row, col) == 0:
        changes = [CellChange(row, col, board[row, col], 0)]
        board.set_cell(row, col, letter, word_id)
        return changes

    static_rows: set[int] = set()
    to_shift: list[CellChange] = []
    for r in range(row + 1):
        owner = board.owner(r, col)
        if owner == word_id:
            static_rows.add(r)
        elif owner != 0:
            to_shift.append(CellChange(r, col, board[r, col], owner))

    free_rows = [r for r in range(row) if r not in static_rows]
    if len(to_shift) > len(free_rows):
        raise InvalidPlacementError(f"Column {col} cannot make room above row {row}.")

    # Record every touched cell before writing, so undo restores the exact prior column.
    touched = sorted({cell.row for cell in to_shift} | set(free_rows[: len(to_shift)]) | {row})
    changes = [CellChange(r, col, board[r, col], board.owner(r, col)) for r in touched]

    for cell in to_shift:
        board.set_cell(cell.row, col, EMPTY, 0)
    for dest, cell in zip(free_rows, to_shift):
        board.set_cell(dest, col, cell.letter, cell.word_id)
    board.set_cell(row, col, letter, word_id)
    return changes


def undo_changes(board: Board, changes: list[CellChange]) -> None:
    """Restore the cells recorded by `insert_letter`."""
    for row, col, letter, word_id in reversed(changes):
        board.set_cell(row, col, letter, word_id)


def compact_column(column: np.ndarray) -> np.ndarray:
    """Let the letters of one column fall to the bottom, keeping their order."""
    letters = [ch for ch in column.tolist() if ch != EMPTY]
    settled = np.full(column.shape, EMPTY, dtype=column.dtype)
    if letters:
        settled[len(column) - len(letters) :] = letters
    return settled


def apply_gravity(grid: np.ndarray) -> None:
    """Compact every column of a letter grid downward, in-place."""
    for col in range(grid.shape[1]):
        grid[:, col] = compact_column(grid[:, col])
