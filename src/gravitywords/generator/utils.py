"""Utility functions for the puzzle generator."""

import random
from collections.abc import Iterable
from typing import TypeAlias, TypeVar

T = TypeVar("T")

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"

Coord: TypeAlias = tuple[int, int]
"""A (row, col) grid coordinate."""

MOVES: tuple[Coord, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
"""Grid-adjacent steps: down, right, up, left."""


def shuffled(rng: random.Random, items: Iterable[T]) -> list[T]:
    """Return a new list holding `items` in uniformly random order.

    All randomized enumeration in the generator goes through here so that a single
    seeded `random.Random` (Fisher-Yates via `Random.shuffle`) drives every decision.
    """
    out = list(items)
    rng.shuffle(out)
    return out


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"
