"""
Command-line driver: solve a puzzle and print every solution.
"""

import argparse
import sys
from typing import Callable, List, Optional

from tqdm import tqdm

from .errors import SudokuError
from .solving import SolverConfig, solve
from .utils import SAMPLES, board_string, format_grid, parse_grid, sample


def load_puzzles(path: str) -> List[str]:
    """Read one puzzle per line, skipping blank lines and # comments."""
    with open(path) as f:
        return [
            line.strip() for line in f
            if line.strip() and not line.lstrip().startswith('#')
        ]


def report(
    puzzle,
    config: SolverConfig,
    formatter: Callable = format_grid,
    write: Callable[[str], None] = print,
) -> int:
    """
    Print a puzzle followed by each of its solutions.

    Args:
        puzzle: 9x9 grid
        config: Search configuration
        formatter: Grid to text conversion
        write: Line writer

    Returns:
        Number of solutions printed
    """
    write("The original grid:")
    write(formatter(puzzle))

    count = 0

    def show(solution):
        nonlocal count
        count += 1
        write("")
        write(f"Solution number {count} :")
        write(formatter(solution))

    solve(puzzle, show, config=config)

    if count == 0:
        write("")
        write("No solution found.")
    return count


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the solver."""
    parser = argparse.ArgumentParser(
        description='Enumerate all solutions of a 9x9 Sudoku puzzle by backtracking'
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '--sample',
        type=int,
        default=0,
        choices=range(len(SAMPLES)),
        help='Index of the embedded sample puzzle to solve (default: 0)'
    )
    source.add_argument(
        '--puzzle',
        type=str,
        help="Puzzle as 81 cell characters, '0' or '.' for blanks"
    )
    source.add_argument(
        '--file',
        type=str,
        help='File with one puzzle per line'
    )
    parser.add_argument(
        '--limit',
        type=int,
        default=None,
        help='Stop after this many solutions per puzzle'
    )
    parser.add_argument(
        '--pretty',
        action='store_true',
        help='Print grids in a boxed layout'
    )
    parser.add_argument(
        '--no-check',
        action='store_true',
        help='Skip the upfront check for clashing given digits'
    )

    args = parser.parse_args(argv)

    try:
        config = SolverConfig(limit=args.limit, check_consistency=not args.no_check)
    except ValueError as exc:
        parser.error(str(exc))

    formatter = board_string if args.pretty else format_grid

    try:
        if args.file:
            puzzles = load_puzzles(args.file)
            for idx, text in enumerate(tqdm(puzzles, desc="Puzzles", unit="puzzle"), start=1):
                if idx > 1:
                    tqdm.write("")
                tqdm.write(f"Puzzle {idx}")
                report(parse_grid(text), config, formatter, write=tqdm.write)
        else:
            puzzle = parse_grid(args.puzzle) if args.puzzle else sample(args.sample)
            report(puzzle, config, formatter)
    except (SudokuError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
