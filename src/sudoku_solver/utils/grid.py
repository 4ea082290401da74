"""
Grid normalisation, validation and copy utilities.

A grid is any 9x9 nested sequence (or 2-D numpy array) of digits 0-9,
where 0 marks an empty cell.
"""

import numpy as np
from typing import Iterator, List, Optional, Sequence, Tuple

from ..errors import GridShapeError, InvalidDigitError, InconsistentGridError


SIZE = 9
BOX = 3
EMPTY = 0
DIGITS = range(1, SIZE + 1)

Grid = Sequence[Sequence[int]]


def as_grid(grid) -> np.ndarray:
    """
    Normalise a grid into a (9, 9) int8 array.
    
    Args:
        grid: Nested sequence or array of cell values
        
    Returns:
        New array holding the same values
        
    Raises:
        GridShapeError: Input is ragged, not 9x9, or not made of integers
        InvalidDigitError: A cell value lies outside 0-9
    """
    try:
        array = np.asarray(grid)
    except ValueError as exc:
        raise GridShapeError(f"Grid rows have uneven lengths: {exc}") from exc
    
    if array.dtype == object or array.ndim != 2:
        raise GridShapeError(f"Grid must be a 9x9 arrangement of cells, got {_describe(grid)}")
    if array.shape != (SIZE, SIZE):
        raise GridShapeError(f"Grid must be 9x9, got {array.shape[0]}x{array.shape[1]}")
    if not np.issubdtype(array.dtype, np.integer):
        raise GridShapeError(f"Grid cells must be integers, got dtype {array.dtype}")
    
    bad = np.argwhere((array < EMPTY) | (array > SIZE))
    if bad.size:
        row, col = (int(i) for i in bad[0])
        raise InvalidDigitError(row, col, array[row, col].item())
    
    return array.astype(np.int8)


def _describe(grid) -> str:
    try:
        return f"{len(grid)} rows"
    except TypeError:
        return type(grid).__name__


def copy_grid(grid: Grid) -> List[List[int]]:
    """Deep copy a grid into independent nested lists."""
    return [[int(cell) for cell in row] for row in grid]


def snapshot(grid: Grid) -> np.ndarray:
    """Take a read-only deep copy of a grid."""
    frozen = np.array(grid, dtype=np.int8)
    frozen.flags.writeable = False
    return frozen


def first_empty_cell(grid: Grid) -> Optional[Tuple[int, int]]:
    """Find first empty cell in row-major order."""
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == EMPTY:
                return (r, c)
    return None


def _units(array: np.ndarray) -> Iterator[Tuple[str, np.ndarray]]:
    # Each unit view is 9x9 with one row per row/column/box.
    yield "row", array
    yield "column", array.T
    yield "box", array.reshape(BOX, BOX, BOX, BOX).swapaxes(1, 2).reshape(SIZE, SIZE)


def find_conflicts(grid: Grid) -> List[Tuple[str, int, int]]:
    """
    List every digit repeated among the filled cells of a unit.
    
    Args:
        grid: 9x9 grid
        
    Returns:
        List of (unit, index, digit) with unit one of "row", "column", "box"
        and boxes numbered 0-8 in row-major order
    """
    conflicts = []
    for unit, cells in _units(as_grid(grid)):
        for index, values in enumerate(cells):
            digits, counts = np.unique(values[values != EMPTY], return_counts=True)
            for digit in digits[counts > 1]:
                conflicts.append((unit, index, int(digit)))
    return conflicts


def check_consistency(grid: Grid) -> None:
    """Raise InconsistentGridError if any pre-filled digits clash."""
    conflicts = find_conflicts(grid)
    if conflicts:
        raise InconsistentGridError(conflicts)


def is_solved(grid: Grid) -> bool:
    """Check that every row, column and box is a permutation of 1-9."""
    array = np.asarray(grid)
    if array.shape != (SIZE, SIZE):
        return False
    expected = np.arange(1, SIZE + 1)
    return all(
        (np.sort(cells, axis=1) == expected).all()
        for _, cells in _units(array)
    )
