"""Tests for the backtracking placement search."""

import random

import numpy as np

from gravitywords.generator.legality import path_is_connected, word_is_legal
from gravitywords.generator.search import ConstructionState, SearchStatus, gen_puzzle, gen_word


def test_rollback_restores_board_and_paths() -> None:
    state = ConstructionState.empty(3, 2)
    state.place(0, 2, 0, "C")
    mark = state.mark()
    state.place(0, 1, 0, "A")
    state.place(1, 2, 1, "D")

    state.rollback(mark)

    assert state.board.rows() == ["...", "...", "C.."]
    assert state.paths == [[(2, 0)], []]
    assert state.mark() == mark


def test_gen_word_completes_a_supported_path() -> None:
    for seed in range(10):
        state = ConstructionState.empty(3, 1)
        state.place(0, 2, 0, "C")

        status = gen_word(state, "CAT", 0, 1, random.Random(seed))

        assert status == SearchStatus.SUCCESS
        assert word_is_legal(state.board.mask, 1, 3)
        path = state.paths[0]
        assert len(path) == 3
        assert path[0] == (2, 0)
        assert path_is_connected(path)
        assert "".join(state.board[cell] for cell in path) == "CAT"


def test_gen_word_backtracks_to_starting_state() -> None:
    state = ConstructionState.empty(2, 1)
    state.place(0, 1, 0, "A")
    grid_before = state.board.grid.copy()

    status = gen_word(state, "ABCDE", 0, 1, random.Random(0))

    assert status == SearchStatus.BACKTRACK
    assert np.array_equal(state.board.grid, grid_before)
    assert state.paths == [[(1, 0)]]
    assert state.mark() == 1


def test_partial_board_is_not_a_goal() -> None:
    state = ConstructionState.empty(3, 1)
    for row, letter in zip((2, 1, 0), "CAT"):
        state.place(0, row, 0, letter)

    assert not state.board.is_full()
    assert not state.is_legal(["CAT"])


def test_gen_puzzle_fills_three_by_three() -> None:
    solution = ["CAT", "DOG", "PIG"]
    for seed in range(10):
        state = ConstructionState.empty(3, len(solution))

        status = gen_puzzle(state, solution, 0, random.Random(seed))

        assert status == SearchStatus.SUCCESS
        assert state.board.is_full()
        assert state.is_legal(solution)
        for word, path in zip(solution, state.paths):
            assert len(path) == len(word)
            assert path_is_connected(path)


def test_gen_puzzle_with_repeated_words() -> None:
    solution = ["CAT", "CAT", "DOG"]
    state = ConstructionState.empty(3, len(solution))

    assert gen_puzzle(state, solution, 0, random.Random(3)) == SearchStatus.SUCCESS
    assert state.is_legal(solution)


def test_gen_puzzle_is_reproducible() -> None:
    solution = ["BEAR", "LION", "WOLF", "DEER"]
    results = []
    for _ in range(2):
        state = ConstructionState.empty(4, len(solution))
        assert gen_puzzle(state, solution, 0, random.Random(11)) == SearchStatus.SUCCESS
        results.append((state.board.rows(), state.paths))

    assert results[0] == results[1]


def test_gen_puzzle_exhaustion_leaves_state_untouched() -> None:
    state = ConstructionState.empty(2, 1)

    status = gen_puzzle(state, ["ABC"], 0, random.Random(0))

    assert status == SearchStatus.BACKTRACK
    assert state.board.rows() == ["..", ".."]
    assert state.paths == [[]]
    assert state.trail == []
    assert state.nodes_examined > 0


def test_gen_puzzle_returns_early_when_already_legal() -> None:
    solution = ["DOG", "PIG", "CAT"]
    state = ConstructionState.empty(3, len(solution))
    for word_idx, word in enumerate(solution):
        for row, letter in zip((2, 1, 0), word):
            state.place(word_idx, row, word_idx, letter)
    nodes_before = state.nodes_examined

    assert gen_puzzle(state, solution, 0, random.Random(0)) == SearchStatus.SUCCESS
    assert state.nodes_examined == nodes_before
    assert state.board.rows() == ["GGT", "OIA", "DPC"]
