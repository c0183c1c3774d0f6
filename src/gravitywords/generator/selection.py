"""Pick the target words for one generation attempt."""

import random

from gravitywords.generator.partition import gen_partitions
from gravitywords.generator.utils import shuffled
from gravitywords.puzzle_config import PuzzleConfig
from gravitywords.wordlist import WordBuckets


class GenerationError(Exception):
    """A generation attempt failed before or during placement."""


class NoPartitionError(GenerationError):
    """The grid cannot be split into word lengths within the configured bounds."""


class MissingWordLengthError(GenerationError):
    """The dictionary has no words of a length required by the chosen partition."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"No words of length {length} available")


def select_words(config: PuzzleConfig, buckets: WordBuckets, rng: random.Random) -> list[str]:
    """Choose a random list of words whose lengths sum to the number of grid cells.

    One partition is chosen uniformly, then one word per part is drawn uniformly from
    its length bucket (draws are independent, so repeats are possible).  The result is
    shuffled so placement order is not correlated with length.

    Raises:
        NoPartitionError: If no partition of the grid exists within the length bounds.
        MissingWordLengthError: If a required length bucket is empty.
    """
    partitions = gen_partitions(config.n_letters, config.min_word_length, config.max_word_length)
    if not partitions:
        raise NoPartitionError(
            f"No valid partitions of {config.n_letters} into lengths "
            f"{config.min_word_length}-{config.max_word_length}"
        )

    word_lengths = rng.choice(partitions)
    solution: list[str] = []
    for length in word_lengths:
        words_of_length = buckets.get(length)
        if not words_of_length:
            raise MissingWordLengthError(length)
        solution.append(rng.choice(words_of_length).upper())

    return shuffled(rng, solution)
