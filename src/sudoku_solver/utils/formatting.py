"""
Text conversion of Sudoku grids.
"""

import numpy as np

from ..errors import GridShapeError
from .grid import BOX, EMPTY, SIZE, Grid, as_grid


SEPARATORS = set(" \t\r\n|+-")
DIGIT_CHARS = set("0123456789")


def format_grid(grid: Grid) -> str:
    """
    Convert a grid into tab separated rows.
    
    Empty cells are written as 0.
    """
    return "\n".join("\t".join(str(int(cell)) for cell in row) for row in grid)


def board_string(board: Grid) -> str:
    """
    Convert Sudoku board to boxed string representation.
    
    Args:
        board: 9x9 Sudoku grid
        
    Returns:
        Formatted string representation with empty cells shown as '.'
    """
    horizontal_line = "+-------+-------+-------+"
    result = [horizontal_line]
    
    for row_idx, row in enumerate(board):
        line = "|"
        for col_idx, cell in enumerate(row):
            display_value = "." if cell == EMPTY else str(int(cell))
            line += f" {display_value}"
            if (col_idx + 1) % BOX == 0:
                line += " |"
        result.append(line)
        
        if (row_idx + 1) % BOX == 0:
            result.append(horizontal_line)
    
    return "\n".join(result)


def parse_grid(text: str) -> np.ndarray:
    """
    Read a puzzle written as 81 cell characters.
    
    Digits fill cells in row-major order; '0' or '.' mark empty cells.
    Whitespace and box-drawing characters (|, +, -) are ignored, so the
    output of board_string parses back.
    
    Raises:
        GridShapeError: Unknown character or wrong number of cells
    """
    cells = []
    for char in text:
        if char in SEPARATORS:
            continue
        if char == ".":
            cells.append(EMPTY)
        elif char in DIGIT_CHARS:
            cells.append(int(char))
        else:
            raise GridShapeError(f"Unexpected character {char!r} in puzzle text")
    
    if len(cells) != SIZE * SIZE:
        raise GridShapeError(f"Puzzle text must describe {SIZE * SIZE} cells, got {len(cells)}")
    
    return as_grid(np.array(cells).reshape(SIZE, SIZE))
