"""Puzzle generator configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class GeneratorConfig(BaseSettings):
    """Configuration settings for the puzzle generator."""

    max_attempts: int = 100
    """Number of word-selection + placement attempts per grid size. Default: 100."""

    min_word_length: int = 3
    """Shortest word to place in a puzzle. Default: 3."""

    max_word_length: int = 6
    """Longest word to place in a puzzle, before capping at the grid size. Default: 6."""

    min_grid_size: int = 3
    """Smallest grid generated by the daily factory. Default: 3."""

    max_grid_size: int = 5
    """Largest grid generated by the daily factory. Default: 5.

    Search time grows steeply with size: a single attempt at 8x8 can take most of a minute,
    and 9x9 or larger can run for many minutes.
    """

    word_list_path: str | None = None
    """Path to a newline-separated word list. If None (default), uses the bundled list."""

    seed: int | None = None
    """Master random seed for reproducible runs. If None (default), runs are not reproducible."""

    max_workers: int | None = 1
    """Number of worker processes for the daily factory.

    1 (default) generates every size in-process.  If None, uses os.cpu_count() minus one.
    """

    log_dir: str = "logs"
    """Directory where run logs are written. Default: "logs"."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix="GRAVITYWORDS_",
        extra="forbid",
    )


config = GeneratorConfig()
