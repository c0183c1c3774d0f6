"""Randomized backtracking placement of words onto a gravity grid.

Words are placed one at a time in solution order, and each word one letter at a
time along a path of grid-adjacent cells.  All mutations happen in-place on a
single `ConstructionState`; every placement pushes an undo record so a failed
branch can be rolled back to exactly the state it started from.
"""

import random
from dataclasses import dataclass, field
from enum import IntEnum

from gravitywords.board import Board
from gravitywords.generator.gravity import (
    CellChange,
    InvalidPlacementError,
    insert_letter,
    undo_changes,
)
from gravitywords.generator.legality import letter_is_legal, puzzle_is_legal, word_is_legal
from gravitywords.generator.utils import MOVES, Coord, shuffled


class SearchStatus(IntEnum):
    """Outcome of a search step."""

    BACKTRACK = 0
    SUCCESS = 1


@dataclass
class _Step:
    """Undo record for one placed letter."""

    word_idx: int
    changes: list[CellChange]


@dataclass
class ConstructionState:
    """Board, per-word paths and undo trail of one generation attempt."""

    board: Board
    paths: list[list[Coord]]
    trail: list[_Step] = field(default_factory=list)
    nodes_examined: int = 0
    """Number of letter placements tried."""

    @classmethod
    def empty(cls, size: int, n_words: int) -> "ConstructionState":
        return cls(board=Board(size), paths=[[] for _ in range(n_words)])

    def mark(self) -> int:
        """Position in the undo trail, for a later `rollback`."""
        return len(self.trail)

    def place(self, word_idx: int, row: int, col: int, letter: str) -> None:
        """Insert one letter of word `word_idx` and extend its path.

        Raises:
            InvalidPlacementError: If gravity insertion is impossible (nothing changes).
        """
        self.nodes_examined += 1
        changes = insert_letter(self.board, row, col, letter, word_idx + 1)
        self.trail.append(_Step(word_idx, changes))
        self.paths[word_idx].append((row, col))

    def rollback(self, mark: int) -> None:
        """Undo placements until the trail is back at `mark`."""
        while len(self.trail) > mark:
            step = self.trail.pop()
            undo_changes(self.board, step.changes)
            self.paths[step.word_idx].pop()

    def is_legal(self, solution: list[str]) -> bool:
        return self.board.is_full() and puzzle_is_legal(self.board.grid, solution, self.paths)


def gen_puzzle(
    state: ConstructionState, solution: list[str], word_idx: int, rng: random.Random
) -> SearchStatus:
    """Place `solution[word_idx:]`, backtracking over start cells of each word.

    Returns:
        SUCCESS with `state` holding a legal puzzle, or BACKTRACK with `state` unchanged.
    """
    if state.is_legal(solution):
        return SearchStatus.SUCCESS
    if word_idx >= len(solution):
        return SearchStatus.BACKTRACK

    board = state.board
    word = solution[word_idx]
    word_id = word_idx + 1

    # Words start in the bottom rows: at most len(word) rows up from the floor.
    lowest_start = max(board.size - len(word), 0)
    rows = shuffled(rng, range(board.size - 1, lowest_start - 1, -1))
    cols = shuffled(rng, board.open_columns())

    for row in rows:
        for col in cols:
            if not letter_is_legal(board.mask, word_id, row, col):
                continue
            mark = state.mark()
            try:
                state.place(word_idx, row, col, word[0])
            except InvalidPlacementError:
                continue

            if gen_word(state, word, word_idx, 1, rng) == SearchStatus.SUCCESS and word_is_legal(
                board.mask, word_id, len(word)
            ):
                if gen_puzzle(state, solution, word_idx + 1, rng) == SearchStatus.SUCCESS:
                    return SearchStatus.SUCCESS

            state.rollback(mark)

    return SearchStatus.BACKTRACK


def gen_word(
    state: ConstructionState, word: str, word_idx: int, letter_idx: int, rng: random.Random
) -> SearchStatus:
    """Place `word[letter_idx:]` next to the previously placed letter of the word.

    Returns:
        SUCCESS once the word is completely and legally placed, or BACKTRACK with
        `state` unchanged.
    """
    board = state.board
    word_id = word_idx + 1
    if word_is_legal(board.mask, word_id, len(word)):
        return SearchStatus.SUCCESS
    if letter_idx >= len(word):
        return SearchStatus.BACKTRACK

    last_row, last_col = state.paths[word_idx][-1]
    for d_row, d_col in shuffled(rng, MOVES):
        row, col = last_row + d_row, last_col + d_col
        if not letter_is_legal(board.mask, word_id, row, col):
            continue
        mark = state.mark()
        try:
            state.place(word_idx, row, col, word[letter_idx])
        except InvalidPlacementError:
            continue

        if letter_idx == len(word) - 1:
            if word_is_legal(board.mask, word_id, len(word)):
                return SearchStatus.SUCCESS
        elif gen_word(state, word, word_idx, letter_idx + 1, rng) == SearchStatus.SUCCESS:
            return SearchStatus.SUCCESS

        state.rollback(mark)

    return SearchStatus.BACKTRACK
