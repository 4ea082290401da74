"""
Exhaustive backtracking search over all completions of a Sudoku grid.
"""

from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Union

import numpy as np

from .checker import possible
from ..utils.grid import (
    DIGITS,
    EMPTY,
    Grid,
    as_grid,
    check_consistency,
    copy_grid,
    first_empty_cell,
    snapshot,
)


# Returning True from the sink stops the search.
SolutionSink = Callable[[np.ndarray], Optional[bool]]


@dataclass
class SolverConfig:
    """Search configuration."""
    limit: Optional[int] = None
    check_consistency: bool = True
    
    def __post_init__(self):
        if self.limit is not None and self.limit < 1:
            raise ValueError(f"limit must be at least 1, got {self.limit}")


def solve_rec(grid: List[List[int]], on_solution: SolutionSink) -> bool:
    """
    Recursively enumerate completions of a working grid.
    
    Args:
        grid: Working grid, mutated in place and restored before returning
        on_solution: Called with a read-only snapshot of each completion
        
    Returns:
        True if the sink asked to stop
    """
    cell = first_empty_cell(grid)
    if cell is None:
        return bool(on_solution(snapshot(grid)))
    
    row, col = cell
    for digit in DIGITS:
        if not possible(grid, row, col, digit):
            continue
        
        grid[row][col] = digit
        stop = solve_rec(grid, on_solution)
        grid[row][col] = EMPTY
        
        if stop:
            return True
    
    return False


def solve(
    grid: Grid,
    on_solution: Optional[SolutionSink] = None,
    *,
    limit: Optional[int] = None,
    config: Optional[SolverConfig] = None,
) -> Union[List[np.ndarray], int]:
    """
    Find every completion of a puzzle.
    
    The puzzle is validated and copied first; the caller's grid is
    never modified.
    
    Args:
        grid: 9x9 puzzle, 0 for empty cells
        on_solution: Optional sink called once per solution in discovery
            order; it may return True to stop the search
        limit: Maximum number of solutions to emit (overrides config)
        config: Search configuration
        
    Returns:
        List of solutions when no sink is given, otherwise the number of
        solutions passed to the sink
        
    Raises:
        GridShapeError: Grid is not 9x9 integers
        InvalidDigitError: A cell lies outside 0-9
        InconsistentGridError: Pre-filled digits clash (when checked)
    """
    config = config or SolverConfig()
    if limit is not None:
        config = replace(config, limit=limit)
    
    puzzle = as_grid(grid)
    if config.check_consistency:
        check_consistency(puzzle)
    working = copy_grid(puzzle)
    
    solutions = []
    sink = on_solution if on_solution is not None else solutions.append
    emitted = 0
    
    def emit(solution: np.ndarray) -> bool:
        nonlocal emitted
        emitted += 1
        stop = sink(solution)
        return bool(stop) or (config.limit is not None and emitted >= config.limit)
    
    solve_rec(working, emit)
    
    if on_solution is None:
        return solutions
    return emitted


def count_solutions(grid: Grid, limit: Optional[int] = None) -> int:
    """Count solutions for a puzzle (up to limit)."""
    return solve(grid, lambda _: None, limit=limit)
