"""
Naked-single propagation.

Fills cells that have exactly one legal digit, restarting the row-major scan
after every assignment until the grid is full or nothing more is forced.
"""

from __future__ import annotations

from typing import NamedTuple

from .grid import Grid


class Assignment(NamedTuple):
    row: int
    col: int
    value: int


def fill_first_single(grid: Grid, trace: list[Assignment] | None = None) -> Assignment | None:
    """Assign the first empty cell with a single candidate, if any."""
    for r, c in grid.empty_cells():
        choices = grid.candidates_at(r, c)
        if choices.is_single():
            step = Assignment(r, c, choices.only())
            grid.assign(*step)
            if trace is not None:
                trace.append(step)
            return step
    return None


def propagate(grid: Grid, trace: list[Assignment] | None = None) -> bool:
    """
    Apply forced assignments in place.

    Returns:
        True if propagation alone completed the grid, False if it stalled.
    """
    while not grid.is_full():
        if fill_first_single(grid, trace) is None:
            return False
    return True
