"""
gridsolve - Sudoku Solver

This package contains modules for:
- Candidate sets and grid state
- Naked-single propagation
- Backtracking search
- Reading, printing and rendering puzzles
"""

from .candidates import CandidateSet
from .grid import BOX_SIZE, SUDOKU_SIZE, ContractViolation, FormatError, Grid
from .propagation import Assignment, propagate
from .solver import SearchStats, search, solve_puzzle

__version__ = "1.0.0"

__all__ = [
    "Assignment",
    "BOX_SIZE",
    "CandidateSet",
    "ContractViolation",
    "FormatError",
    "Grid",
    "SUDOKU_SIZE",
    "SearchStats",
    "propagate",
    "search",
    "solve_puzzle",
]
