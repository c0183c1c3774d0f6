"""Legality predicates and the reverse-removal simulation.

All functions here are pure: they never modify their arguments.
"""

from collections.abc import Sequence

import numpy as np

from gravitywords.board import EMPTY
from gravitywords.generator.gravity import apply_gravity
from gravitywords.generator.utils import Coord
from gravitywords.puzzle_config import GeneratedPuzzle


def letter_is_legal(mask: np.ndarray, word_id: int, row: int, col: int) -> bool:
    """Whether a letter of word `word_id` may be placed at (row, col).

    The cell must be in bounds and not already claimed by the same word, and the
    column must have room for one more letter.
    """
    n_rows, n_cols = mask.shape
    if not (0 <= row < n_rows and 0 <= col < n_cols):
        return False
    if mask[row, col] == word_id:
        return False
    return int(np.count_nonzero(mask[:, col])) + 1 <= n_rows


def word_is_legal(mask: np.ndarray, word_id: int, word_length: int) -> bool:
    """Whether word `word_id` is completely placed with none of its letters floating."""
    owned = mask == word_id
    if int(np.count_nonzero(owned)) != word_length:
        return False
    # A letter floats if the cell directly below it is empty.
    below_empty = mask[1:, :] == 0
    return not bool(np.any(owned[:-1, :] & below_empty))


def remove_word(grid: np.ndarray, word: str, path: Sequence[Coord]) -> bool:
    """Clear a word's path cells in-place, after checking they spell `word`.

    Returns:
        False (leaving `grid` partially cleared) if a cell does not hold its letter.
    """
    for ch, (row, col) in zip(word, path):
        if grid[row, col] != ch:
            return False
        grid[row, col] = EMPTY
    return True


def puzzle_is_legal(
    grid: np.ndarray, solution: Sequence[str], paths: Sequence[Sequence[Coord]]
) -> bool:
    """Whether a grid is full and its words can be removed in reverse placement order.

    Removal is simulated on a copy: before each word is removed its path must hold
    exactly its letters, and the remaining letters fall down their columns afterwards.
    """
    if not bool(np.all(grid != EMPTY)):
        return False
    if len(paths) != len(solution):
        return False

    current = grid.copy()
    for word, path in zip(reversed(solution), reversed(paths)):
        if len(path) != len(word):
            return False
        if not remove_word(current, word, path):
            return False
        apply_gravity(current)
    return True


def path_is_connected(path: Sequence[Coord]) -> bool:
    """Whether consecutive cells are grid-adjacent and no cell repeats."""
    if len(set(path)) != len(path):
        return False
    return all(
        abs(r1 - r2) + abs(c1 - c2) == 1 for (r1, c1), (r2, c2) in zip(path, path[1:])
    )


def puzzle_is_solvable(puzzle: GeneratedPuzzle) -> bool:
    """Check a finished puzzle: connected in-bounds paths and a legal reverse removal."""
    size = puzzle.grid_size
    for word, path in zip(puzzle.solution, puzzle.solution_paths):
        if len(path) != len(word) or not path_is_connected(path):
            return False
        if not all(0 <= r < size and 0 <= c < size for r, c in path):
            return False
    grid = np.array(puzzle.grid, dtype="<U1").reshape(size, size)
    return puzzle_is_legal(grid, puzzle.solution, puzzle.solution_paths)
