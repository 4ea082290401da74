"""
Utils package initialization.
"""

from .grid import (
    SIZE,
    BOX,
    EMPTY,
    DIGITS,
    as_grid,
    copy_grid,
    snapshot,
    first_empty_cell,
    find_conflicts,
    check_consistency,
    is_solved,
)
from .formatting import (
    format_grid,
    board_string,
    parse_grid,
)
from .samples import SAMPLES, sample

__all__ = [
    'SIZE',
    'BOX',
    'EMPTY',
    'DIGITS',
    'as_grid',
    'copy_grid',
    'snapshot',
    'first_empty_cell',
    'find_conflicts',
    'check_consistency',
    'is_solved',
    'format_grid',
    'board_string',
    'parse_grid',
    'SAMPLES',
    'sample',
]
