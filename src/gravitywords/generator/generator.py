"""Retry loop around word selection and placement search for one grid size."""

import random
from dataclasses import dataclass, field
from time import time
from typing import Literal, TextIO

from gravitywords.generator.config import config as generator_config
from gravitywords.generator.search import ConstructionState, SearchStatus, gen_puzzle
from gravitywords.generator.selection import GenerationError, select_words
from gravitywords.generator.utils import int_comma, time_str
from gravitywords.puzzle_config import GeneratedPuzzle, PuzzleConfig
from gravitywords.wordlist import WordBuckets


@dataclass
class GenerationResult:
    """Outcome of generating a puzzle for one grid size."""

    grid_size: int
    status: Literal["success", "exhausted"]
    puzzle: GeneratedPuzzle | None
    attempts: int
    """Number of attempts used, including the successful one."""
    errors: list[str] = field(default_factory=list)
    """One message per failed attempt."""
    nodes_examined: int = 0
    """Letter placements tried over all attempts."""
    elapsed: float = 0.0
    """Wall-clock seconds spent."""


def generate_puzzle(
    config: PuzzleConfig,
    buckets: WordBuckets,
    *,
    rng: random.Random,
    max_attempts: int | None = None,
    logf: TextIO | None = None,
) -> GenerationResult:
    """Generate a legal puzzle, re-rolling the word selection after each failed attempt.

    Attempt failures (no partition, missing word length, exhausted search) are logged
    and retried.  Running out of attempts is reported by the result's status.

    Args:
        config (PuzzleConfig): Grid size and word length bounds.
        buckets (WordBuckets): Dictionary words grouped by length.
        rng (random.Random): Source of every random choice, for reproducible runs.
        max_attempts (int | None): Attempt budget.  Defaults to the configured budget.
        logf: File object to log attempt failures to (stdout if None).

    Returns:
        A GenerationResult holding the puzzle, or None if every attempt failed.
    """
    if max_attempts is None:
        max_attempts = generator_config.max_attempts

    start_time = time()
    errors: list[str] = []
    nodes_examined = 0

    for attempt in range(1, max_attempts + 1):
        try:
            solution = select_words(config, buckets, rng)
        except GenerationError as e:
            errors.append(str(e))
            print(f"{config}: attempt {attempt} failed: {e}", file=logf, flush=True)
            continue

        state = ConstructionState.empty(config.grid_size, len(solution))
        status = gen_puzzle(state, solution, 0, rng)
        nodes_examined += state.nodes_examined

        if status == SearchStatus.SUCCESS and state.is_legal(solution):
            elapsed = time() - start_time
            print(
                f"{config}: attempt {attempt} placed {len(solution)} words "
                f"({int_comma(nodes_examined)} placements, {time_str(elapsed)})",
                file=logf,
                flush=True,
            )
            return GenerationResult(
                grid_size=config.grid_size,
                status="success",
                puzzle=GeneratedPuzzle.from_board(state.board, solution, state.paths),
                attempts=attempt,
                errors=errors,
                nodes_examined=nodes_examined,
                elapsed=elapsed,
            )

        msg = f"search exhausted for {', '.join(solution)}"
        errors.append(msg)
        print(f"{config}: attempt {attempt} failed: {msg}", file=logf, flush=True)

    print(
        f"{config}: no valid puzzle after {max_attempts} attempts.",
        file=logf,
        flush=True,
    )
    return GenerationResult(
        grid_size=config.grid_size,
        status="exhausted",
        puzzle=None,
        attempts=max_attempts,
        errors=errors,
        nodes_examined=nodes_examined,
        elapsed=time() - start_time,
    )
