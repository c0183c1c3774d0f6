"""Gravity word-grid puzzle generator.

Builds N x N letter grids that are completely covered by a list of target words.
Each word is traced along a path of adjacent cells, and the words can be cleared one
by one, with the letters above each cleared cell falling down its column, until the
grid is empty.  Uses randomized backtracking to place the words.
"""

import argparse

from .generator.runner import run


def main() -> None:
    """Main entry point for the puzzle generator."""
    parser = argparse.ArgumentParser(description="Generate one gravity word puzzle per grid size")
    parser.add_argument("--min-size", type=int, help="Smallest grid size (e.g. 3)")
    parser.add_argument("--max-size", type=int, help="Largest grid size (e.g. 5)")
    parser.add_argument("--seed", type=int, help="Master random seed, for reproducible output")
    parser.add_argument("--output", type=str, help="Write the puzzles to this JSON file")
    parser.add_argument("--print", action="store_true", help="Print each puzzle to stdout")
    args = parser.parse_args()

    puzzles = run(args.min_size, args.max_size, seed=args.seed, output=args.output)

    if args.print:
        for puzzle in puzzles:
            puzzle.print()
            print()
