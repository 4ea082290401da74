"""
Error types raised for malformed or contradictory Sudoku grids.
"""

from typing import List, Tuple


class SudokuError(ValueError):
    """Base class for all grid errors."""


class GridShapeError(SudokuError):
    """Grid is not a 9x9 arrangement of integers."""


class InvalidDigitError(SudokuError):
    """A cell holds a value outside 0-9."""

    def __init__(self, row: int, col: int, value):
        self.row = row
        self.col = col
        self.value = value
        super().__init__(
            f"Invalid value {value!r} at row {row}, column {col} (expected 0-9)"
        )


class InconsistentGridError(SudokuError):
    """Pre-filled digits clash within a row, column or box."""

    def __init__(self, conflicts: List[Tuple[str, int, int]]):
        self.conflicts = conflicts
        details = ", ".join(
            f"digit {digit} repeated in {unit} {index}"
            for unit, index, digit in conflicts
        )
        super().__init__(f"Inconsistent grid: {details}")
