"""
Backtracking Sudoku solver
"""

__version__ = '1.0.0'

from . import solving
from . import utils
from .errors import (
    SudokuError,
    GridShapeError,
    InvalidDigitError,
    InconsistentGridError,
)
from .solving import SolverConfig, possible, solve, count_solutions

__all__ = [
    'solving',
    'utils',
    'SudokuError',
    'GridShapeError',
    'InvalidDigitError',
    'InconsistentGridError',
    'SolverConfig',
    'possible',
    'solve',
    'count_solutions',
]
