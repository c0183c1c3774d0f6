"""Run the daily generator with a per-run log file and optional JSON export."""

import json
import sys
from datetime import datetime
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from gravitywords.generator.config import config as generator_config
from gravitywords.generator.daily import generate_daily_puzzles
from gravitywords.generator.utils import TIMESTAMP_FMT, time_str
from gravitywords.puzzle_config import GeneratedPuzzle
from gravitywords.wordlist import load_word_list


def run(
    min_size: int | None = None,
    max_size: int | None = None,
    *,
    seed: int | None = None,
    output: str | Path | None = None,
) -> list[GeneratedPuzzle]:
    """Generate the daily puzzle set, logging to a file under the configured log directory.

    Args:
        min_size (int | None): Smallest grid size.  Defaults to the configured value.
        max_size (int | None): Largest grid size.  Defaults to the configured value.
        seed (int | None): Master seed.  Defaults to the configured seed.
        output (str | Path | None): If given, the puzzles are written there as a JSON array.

    Returns:
        The generated puzzles, one per size.
    """
    if min_size is None:
        min_size = generator_config.min_grid_size
    if max_size is None:
        max_size = generator_config.max_grid_size

    start = datetime.now().astimezone()
    logfile = Path(
        f"{generator_config.log_dir}/daily/{start:%Y%m%d-%H%M%S}-{min_size}-{max_size}.log"
    )
    print(f"Log file: {logfile}")
    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            puzzles = generate_all(min_size, max_size, seed=seed, logf=logf)
        except KeyboardInterrupt:
            print("Generator interrupted by user.", file=logf, flush=True)
            print("Generator interrupted by user.")
            sys.exit(1)

    if output is not None:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump([puzzle.to_dict() for puzzle in puzzles], f, indent=2)
        print(f"Wrote {len(puzzles)} puzzles to {output_path}")

    return puzzles


def generate_all(
    min_size: int, max_size: int, *, seed: int | None, logf: TextIO
) -> list[GeneratedPuzzle]:
    """Generate the puzzle set, writing settings and a summary to `logf`."""
    start_time = time()
    print(f"Sizes: {min_size}x{min_size} to {max_size}x{max_size}", file=logf, flush=True)
    print(
        f"Start time: {datetime.fromtimestamp(start_time).astimezone().strftime(TIMESTAMP_FMT)}",
        file=logf,
        flush=True,
    )
    print("Generator config:", file=logf, flush=True)
    pprint(generator_config.model_dump(), stream=logf, width=120)

    words = load_word_list()
    print(f"Loaded {len(words)} words.", file=logf, flush=True)
    print("", file=logf, flush=True)
    print("#" * 80, file=logf, flush=True)
    print("", file=logf, flush=True)

    puzzles = generate_daily_puzzles(min_size, max_size, words=words, seed=seed, logf=logf)

    print("", file=logf, flush=True)
    for puzzle in puzzles:
        puzzle.print(file=logf)
        print("", file=logf, flush=True)
    n_fallback = sum(1 for puzzle in puzzles if puzzle.is_fallback)
    elapsed = time() - start_time
    print(
        f"Generated {len(puzzles)} puzzles ({n_fallback} fallback) in {time_str(elapsed)}",
        file=logf,
        flush=True,
    )
    return puzzles
