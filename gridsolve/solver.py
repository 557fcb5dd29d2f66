"""
Backtracking Sudoku solver with naked-single propagation as a pre-pass.
"""

from __future__ import annotations

from dataclasses import dataclass

from .grid import Grid
from .propagation import Assignment, propagate


@dataclass
class SearchStats:
    nodes: int = 0
    forced: int = 0
    guesses: int = 0
    dead_ends: int = 0
    max_depth: int = 0


def search(grid: Grid, stats: SearchStats | None = None, depth: int = 0) -> Grid | None:
    """
    Return a solved copy of `grid`, or None if no solution exists.

    Every level works on its own copy, so a failed branch is dropped simply
    by returning. The first empty cell (row-major) is branched on and its
    candidates are tried in ascending order; the first success wins.
    """
    working = grid.copy()
    trace: list[Assignment] | None = [] if stats is not None else None

    solved = propagate(working, trace)
    if stats is not None:
        stats.nodes += 1
        stats.forced += len(trace)
        stats.max_depth = max(stats.max_depth, depth)
    if solved:
        return working

    empty = working.first_empty()
    if empty is None:
        return working

    r, c = empty
    choices = working.candidates_at(r, c)
    if choices.is_empty():
        if stats is not None:
            stats.dead_ends += 1
        return None

    for val in choices:
        trial = working.copy()
        trial.assign(r, c, val)
        if stats is not None:
            stats.guesses += 1
        result = search(trial, stats, depth + 1)
        if result is not None:
            return result

    return None


def solve_puzzle(grid: Grid, stats: SearchStats | None = None) -> tuple[Grid | None, str]:
    """
    Return a solved copy of the grid, or (None, reason) if unsolvable.

    Givens that repeat a digit are rejected up front instead of searching.
    """
    conflicts = grid.find_conflicts()
    if conflicts:
        return None, conflicts[0]

    if stats is None:
        stats = SearchStats()
    solution = search(grid, stats)
    if solution is None:
        return None, "No solution found"
    return solution, f"Solved with {stats.forced} forced and {stats.guesses} guessed assignments"
