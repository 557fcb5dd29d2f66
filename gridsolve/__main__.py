"""
Entry point for running gridsolve as a package.

Usage:
    python -m gridsolve path/to/puzzle.txt
"""

from .sudoku_solver import main

if __name__ == '__main__':
    main()
