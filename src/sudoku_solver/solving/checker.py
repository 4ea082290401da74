"""
Placement validity check for backtracking search.
"""

from typing import Tuple

from ..utils.grid import BOX, SIZE, Grid


def box_origin(row: int, col: int) -> Tuple[int, int]:
    """Get top-left cell of the 3x3 box containing a cell."""
    return row - row % BOX, col - col % BOX


def box_index(row: int, col: int) -> int:
    """Get 3x3 box index for a cell."""
    return (row // BOX) * BOX + (col // BOX)


def possible(grid: Grid, row: int, col: int, digit: int) -> bool:
    """
    Check whether a digit can be placed at a cell.
    
    The grid, position and digit are trusted to be in range; the
    enumerator guarantees this by construction.
    
    Args:
        grid: 9x9 grid
        row: Row of the target cell
        col: Column of the target cell
        digit: Candidate digit (1-9)
        
    Returns:
        False if the digit already appears in the row, column or box
        of the cell, True otherwise
    """
    if digit in grid[row]:
        return False
    
    for r in range(SIZE):
        if grid[r][col] == digit:
            return False
    
    row0, col0 = box_origin(row, col)
    for r in range(row0, row0 + BOX):
        for c in range(col0, col0 + BOX):
            if grid[r][c] == digit:
                return False
    
    return True
