"""
Solving package initialization.
"""

from .checker import possible, box_origin, box_index
from .enumerator import SolverConfig, SolutionSink, solve, solve_rec, count_solutions

__all__ = [
    'possible',
    'box_origin',
    'box_index',
    'SolverConfig',
    'SolutionSink',
    'solve',
    'solve_rec',
    'count_solutions',
]
