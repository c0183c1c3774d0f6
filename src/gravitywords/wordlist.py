"""Module for word list management in gravitywords."""

from collections import defaultdict
from collections.abc import Iterable
from pathlib import Path

from sortedcontainers import SortedList

from gravitywords.generator.config import config as generator_config

DEFAULT_WORD_LIST_PATH = Path(__file__).parent / "data" / "words.txt"
"""Word list shipped with the package."""

WordBuckets = dict[int, SortedList]
"""Words grouped by length.  Each bucket is sorted so seeded draws are reproducible."""


def load_word_list(
    path: str | Path | None = None, *, min_len: int = 1, max_len: int | None = None
) -> set[str]:
    """Load the word list from a dictionary file.

    Args:
        path: Path to a newline-separated word file.  Defaults to the configured
            `word_list_path`, or the bundled list if none is configured.
        min_len: Minimum word length to include.
        max_len: Optional maximum word length to include.

    Returns:
        A set of upper-case, purely alphabetic words.
    """
    if path is None:
        path = generator_config.word_list_path or DEFAULT_WORD_LIST_PATH
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        words: set[str] = set()
        for line in f:
            word = line.strip().upper()
            if not word or not word.isalpha():
                continue
            if len(word) < min_len:
                continue
            if max_len is not None and len(word) > max_len:
                continue
            words.add(word)
        return words


def create_length_buckets(words: Iterable[str]) -> WordBuckets:
    """Group words by length.

    Words are upper-cased on the way in; lengths with no words have no bucket.
    """
    buckets: defaultdict[int, SortedList] = defaultdict(SortedList)
    for word in words:
        word = word.upper()
        if word not in buckets[len(word)]:
            buckets[len(word)].add(word)
    return dict(buckets)


def is_valid_word(word: str, words: set[str]) -> bool:
    """Case-insensitive membership test against an upper-case word set."""
    return word.strip().upper() in words
