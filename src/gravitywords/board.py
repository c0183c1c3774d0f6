"""Classes and functions for representing the puzzle grid under construction."""

from typing import TextIO

import numpy as np

EMPTY = ""
"""Grid sentinel for an unfilled cell."""


class Board:
    """Store a square letter grid together with its word-ownership mask.

    `grid[r, c]` holds a single letter, or `EMPTY`.  `mask[r, c]` holds 0 for an empty
    cell, or `k` if the cell belongs to the k-th word in placement order (1-indexed).
    Both arrays are only written through `set_cell`, which keeps them in lockstep.
    """

    def __init__(
        self, size: int, grid: np.ndarray | None = None, mask: np.ndarray | None = None
    ) -> None:
        if size <= 0:
            raise ValueError("Board size must be positive.")
        self.size = size
        self.grid: np.ndarray = (
            np.full((size, size), EMPTY, dtype="<U1") if grid is None else grid
        )
        self.mask: np.ndarray = np.zeros((size, size), dtype=np.int32) if mask is None else mask
        if self.grid.shape != (size, size) or self.mask.shape != (size, size):
            raise ValueError(f"Grid and mask must both have shape ({size}, {size}).")

    def __getitem__(self, idx: tuple[int, int]) -> str:
        """Get the letter at (row, col)."""
        return str(self.grid[idx])

    def owner(self, row: int, col: int) -> int:
        """Get the (1-indexed) word owning a cell, or 0 if the cell is empty."""
        return int(self.mask[row, col])

    def set_cell(self, row: int, col: int, letter: str, word_id: int) -> None:
        """Write a letter and its owner.  Pass `EMPTY` and 0 to clear the cell."""
        if (letter == EMPTY) != (word_id == 0):
            raise ValueError("A cell is empty in the grid iff it is 0 in the mask.")
        self.grid[row, col] = letter
        self.mask[row, col] = word_id

    def column_count(self, col: int) -> int:
        """Number of occupied cells in a column."""
        return int(np.count_nonzero(self.mask[:, col]))

    def open_columns(self) -> list[int]:
        """Columns with at least one empty cell."""
        return [col for col in range(self.size) if self.column_count(col) < self.size]

    def is_full(self) -> bool:
        """Whether every cell holds a letter."""
        return bool(np.all(self.mask != 0))

    def rows(self) -> list[str]:
        """Rows as strings, with '.' for empty cells."""
        return ["".join(ch or "." for ch in row) for row in self.grid.tolist()]

    def __str__(self) -> str:
        """Returns a string representation of the board."""
        return "\n".join(self.rows())

    def print(self, file: TextIO | None = None) -> None:
        """Print the board, one row per line."""
        for row in self.rows():
            print(row, file=file)
