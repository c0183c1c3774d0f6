"""Generation parameters and the finished puzzle artifact."""

from dataclasses import dataclass, field
from typing import TextIO

from gravitywords.board import Board
from gravitywords.generator.utils import Coord


@dataclass
class PuzzleConfig:
    """Parameters for generating one puzzle."""

    grid_size: int
    """Height and width of the (square) grid."""

    min_word_length: int = 3
    """Shortest word allowed in the solution."""

    max_word_length: int = 6
    """Longest word allowed in the solution.  Capped at `grid_size`."""

    def __post_init__(self) -> None:
        """Validate the parameters and cap the maximum word length."""
        if self.grid_size <= 0:
            raise ValueError(f"Grid size must be positive, got {self.grid_size}.")
        if self.min_word_length <= 0:
            raise ValueError(f"Minimum word length must be positive, got {self.min_word_length}.")
        self.max_word_length = min(self.max_word_length, self.grid_size)

    @property
    def n_letters(self) -> int:
        """Total number of cells to fill."""
        return self.grid_size * self.grid_size

    def __str__(self) -> str:
        """Return a string representation of the Config."""
        return (
            f"{self.grid_size}x{self.grid_size} "
            f"(word lengths {self.min_word_length}-{self.max_word_length})"
        )

    def to_dict(self) -> dict:
        """Return a dictionary representation of the Config.

        Used to hand the config to worker processes, which requires pickleable arguments.
        """
        return {
            "grid_size": self.grid_size,
            "min_word_length": self.min_word_length,
            "max_word_length": self.max_word_length,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PuzzleConfig":
        """Create a Config instance from a dictionary representation."""
        return cls(
            grid_size=data["grid_size"],
            min_word_length=data["min_word_length"],
            max_word_length=data["max_word_length"],
        )


@dataclass(frozen=True)
class GeneratedPuzzle:
    """A finished puzzle: letters, target words in placement order, and their paths.

    `solution[i]` is traced along `solution_paths[i]`.  Words are cleared by the player
    in reverse placement order.
    """

    grid: tuple[tuple[str, ...], ...]
    solution: tuple[str, ...]
    solution_paths: tuple[tuple[Coord, ...], ...]
    grid_size: int
    is_fallback: bool = field(default=False)

    @classmethod
    def from_board(
        cls, board: Board, solution: list[str], paths: list[list[Coord]]
    ) -> "GeneratedPuzzle":
        """Freeze a finished construction."""
        return cls(
            grid=tuple(tuple(row) for row in board.grid.tolist()),
            solution=tuple(solution),
            solution_paths=tuple(tuple((int(r), int(c)) for r, c in path) for path in paths),
            grid_size=board.size,
        )

    def to_dict(self) -> dict:
        """Return the JSON-ready shape consumed by the game-state initializer."""
        return {
            "grid": [list(row) for row in self.grid],
            "solution": list(self.solution),
            "solutionPaths": [[list(coord) for coord in path] for path in self.solution_paths],
            "gridSize": self.grid_size,
            "isFallback": self.is_fallback,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratedPuzzle":
        return cls(
            grid=tuple(tuple(row) for row in data["grid"]),
            solution=tuple(data["solution"]),
            solution_paths=tuple(
                tuple((r, c) for r, c in path) for path in data["solutionPaths"]
            ),
            grid_size=data["gridSize"],
            is_fallback=data.get("isFallback", False),
        )

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.grid)

    def print(self, file: TextIO | None = None) -> None:
        """Print the grid followed by the words in placement order."""
        tag = " (fallback)" if self.is_fallback else ""
        print(f"{self.grid_size}x{self.grid_size}{tag}:", file=file)
        for row in self.grid:
            print(" ".join(row), file=file)
        print(f"Words: {', '.join(self.solution)}", file=file)
