"""Generate one puzzle per grid size, substituting a fallback where generation fails."""

import os
import random
import traceback
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from multiprocessing import Value
from multiprocessing.sharedctypes import Synchronized
from typing import Literal, TextIO, TypedDict

from setproctitle import setproctitle

from gravitywords.generator.config import config as generator_config
from gravitywords.generator.generator import GenerationResult, generate_puzzle
from gravitywords.puzzle_config import GeneratedPuzzle, PuzzleConfig
from gravitywords.wordlist import WordBuckets, create_length_buckets, load_word_list


class SizeTask(TypedDict):
    """Payload describing one size of the daily set."""

    size: int
    """Grid size."""
    seed: int
    """Seed for this size's random source."""
    config: dict
    """`PuzzleConfig.to_dict()` for this size."""


def create_fallback_puzzle(size: int) -> GeneratedPuzzle:
    """Build a deterministic puzzle that needs no search.

    Cell (r, c) holds letter `(r + c) % 26` of the alphabet.  The single solution word
    is read along the top row from the top-left corner, so it matches the grid.
    """
    grid = tuple(tuple(chr(ord("A") + (r + c) % 26) for c in range(size)) for r in range(size))
    path = tuple((0, c) for c in range(min(size, 3)))
    word = "".join(grid[r][c] for r, c in path)
    return GeneratedPuzzle(
        grid=grid,
        solution=(word,),
        solution_paths=(path,),
        grid_size=size,
        is_fallback=True,
    )


def size_config(size: int) -> PuzzleConfig:
    """Generation parameters for one size of the daily set."""
    return PuzzleConfig(
        grid_size=size,
        min_word_length=generator_config.min_word_length,
        max_word_length=generator_config.max_word_length,
    )


def generate_daily_puzzles(
    min_size: int | None = None,
    max_size: int | None = None,
    *,
    words: set[str] | None = None,
    seed: int | None = None,
    logf: TextIO | None = None,
    max_workers: int | None = None,
) -> list[GeneratedPuzzle]:
    """Generate one puzzle for every grid size from `min_size` to `max_size`, in order.

    Sizes are independent.  Each gets its own seed, drawn up front from `seed`, so the
    output does not depend on how many worker processes are used.  A size whose attempt
    budget runs out gets `create_fallback_puzzle(size)`.

    Args:
        min_size (int | None): Smallest grid size.  Defaults to the configured value.
        max_size (int | None): Largest grid size.  Defaults to the configured value.
        words (set[str] | None): Dictionary to draw from.  Defaults to `load_word_list()`.
        seed (int | None): Master seed.  Defaults to the configured seed.
        logf: File object to log progress to (stdout if None).
        max_workers (int | None): Worker processes to use; 1 generates in-process.
            Defaults to the configured value, where None means os.cpu_count() minus one.

    Returns:
        A list with one puzzle per size.
    """
    if min_size is None:
        min_size = generator_config.min_grid_size
    if max_size is None:
        max_size = generator_config.max_grid_size
    if seed is None:
        seed = generator_config.seed
    if max_workers is None:
        max_workers = generator_config.max_workers
    if words is None:
        words = load_word_list()

    master_rng = random.Random(seed)
    tasks: list[SizeTask] = [
        {
            "size": size,
            "seed": master_rng.randrange(2**32),
            "config": size_config(size).to_dict(),
        }
        for size in range(min_size, max_size + 1)
    ]

    results: list[GenerationResult | None]
    if max_workers == 1 or len(tasks) <= 1:
        buckets = create_length_buckets(words)
        results = [_generate_size(task, buckets, logf) for task in tasks]
    else:
        results = _generate_in_pool(tasks, words, max_workers, logf)

    puzzles: list[GeneratedPuzzle] = []
    for task, result in zip(tasks, results):
        size = task["size"]
        if result is not None and result.puzzle is not None:
            print(
                f"Generated {size}x{size} puzzle with {len(result.puzzle.solution)} words",
                file=logf,
                flush=True,
            )
            puzzles.append(result.puzzle)
        else:
            print(f"Failed to generate {size}x{size} puzzle, using fallback", file=logf, flush=True)
            puzzles.append(create_fallback_puzzle(size))
    return puzzles


def _generate_size(task: SizeTask, buckets: WordBuckets, logf: TextIO | None) -> GenerationResult:
    print(f"Generating {task['size']}x{task['size']} puzzle...", file=logf, flush=True)
    return generate_puzzle(
        PuzzleConfig.from_dict(task["config"]),
        buckets,
        rng=random.Random(task["seed"]),
        logf=logf,
    )


# -----------------------------------------------------------------------------
# Process pool
# -----------------------------------------------------------------------------


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    worker_idx: int
    """Index of the worker process."""

    buckets: WordBuckets
    """Dictionary words grouped by length."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


@dataclass
class Result:
    """Wrapper for worker task results."""

    size: int
    status: Literal["success", "error"]
    result: GenerationResult | None
    err_msg: str | None = None


def init_worker_globals(worker_ctr: Synchronized, words: set[str]) -> None:
    """Initialize global variables for worker processes.

    Args:
        worker_ctr (Synchronized[int]): Shared counter for workers.
        words (set[str]): Dictionary to bucket once per worker.
    """
    global worker_state  # noqa: PLW0603
    with worker_ctr.get_lock():
        worker_idx = worker_ctr.value
        worker_ctr.value += 1

    setproctitle(f"gravitywords: worker {worker_idx}")
    worker_state = WorkerState(worker_idx=worker_idx, buckets=create_length_buckets(words))


def _worker_task(task: SizeTask) -> Result:
    """Generate one size inside a worker process, capturing any error."""
    try:
        if not worker_state:
            raise RuntimeError("Worker state not initialized. Call init_worker_globals first.")
        return Result(
            size=task["size"],
            status="success",
            result=_generate_size(task, worker_state.buckets, None),
        )
    except Exception as e:
        return Result(
            size=task["size"],
            status="error",
            result=None,
            err_msg=f"Worker encountered an error: {str(e)}\n{traceback.format_exc()}",
        )


def get_executor(*, n_workers: int | None, words: set[str]) -> ProcessPoolExecutor:
    """Get a ProcessPoolExecutor whose workers share the bucketed dictionary.

    Args:
        n_workers (int | None): Number of worker processes to create.  If None,
            defaults to number of CPU cores minus one.  Capped at the CPU count.
        words (set[str]): Dictionary to pass to workers.
    """
    worker_ctr: Synchronized = Value("i", 0)

    cpus = os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None
    if n_workers is None:
        n_workers = max(1, cpus - 1)  # Leave one core free
    n_workers = max(1, min(n_workers, cpus))
    return ProcessPoolExecutor(
        max_workers=n_workers,
        initializer=init_worker_globals,
        initargs=(worker_ctr, words),
    )


def _generate_in_pool(
    tasks: list[SizeTask], words: set[str], max_workers: int | None, logf: TextIO | None
) -> list[GenerationResult | None]:
    """Generate every size in worker processes, keeping the order of `tasks`."""
    setproctitle(f"gravitywords: main [{tasks[0]['size']}-{tasks[-1]['size']}]")
    with get_executor(n_workers=max_workers, words=words) as executor:
        outcomes = list(executor.map(_worker_task, tasks))

    results: list[GenerationResult | None] = []
    for outcome in outcomes:
        if outcome.status == "error":
            print(f"Worker for size {outcome.size} encountered an error:", file=logf, flush=True)
            print(outcome.err_msg, file=logf, flush=True)
        results.append(outcome.result)
    return results
