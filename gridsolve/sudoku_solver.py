"""
Sudoku Solver - Main Application Module
"""

from __future__ import annotations

import argparse
import os
import sys
import time
from dataclasses import dataclass

from .board_io import format_board, format_grid, read_puzzle
from .grid import NUM_CELLS, SUDOKU_SIZE, FormatError, Grid
from .render import DEFAULT_RENDER_SIZE, render_grid, save_grid_image
from .solver import SearchStats, solve_puzzle


@dataclass
class SolveReport:
    puzzle: Grid
    solution: Grid | None
    message: str
    stats: SearchStats
    elapsed: float
    image_path: str | None = None

    @property
    def solved(self) -> bool:
        return self.solution is not None


class SudokuSolver:
    """
    Main class for the Sudoku Solver application.

    Reads a puzzle file, solves it, prints the result and optionally renders
    the solved grid to an image.
    """

    def __init__(self, pretty=False, verbose=True, render_size=DEFAULT_RENDER_SIZE):
        """
        Initialize the Sudoku Solver.

        Args:
            pretty (bool): Print grids with box separators and '.' for blanks
            verbose (bool): Print pipeline progress; otherwise only the result
            render_size (int): Size in pixels of rendered grid images
        """
        self.pretty = pretty
        self.verbose = verbose
        self.render_size = render_size

    def _log(self, message=""):
        if self.verbose:
            print(message)

    def _format(self, grid):
        return format_board(grid) if self.pretty else format_grid(grid)

    def process_file(self, puzzle_path, render_path=None):
        """
        Run the full pipeline on one puzzle file.

        Pipeline steps:
        1. Read and parse the puzzle
        2. Solve (propagation, then backtracking)
        3. Render the solved grid (only if render_path is given)

        Args:
            puzzle_path (str): Path to a text file of 81 digits
            render_path (str): Where to save an image of the solution

        Returns:
            SolveReport, or None if the puzzle could not be read or parsed

        Raises:
            OSError: the rendered image could not be written
        """
        steps = 3 if render_path else 2

        self._log(f"\n{'='*60}")
        self._log(f"Processing: {os.path.basename(puzzle_path)}")
        self._log(f"{'='*60}")

        self._log(f"\n[1/{steps}] Reading puzzle...")
        try:
            puzzle = read_puzzle(puzzle_path)
        except FormatError as e:
            print(f"Error: Could not parse {puzzle_path}: {e}")
            return None
        except OSError as e:
            print(f"Error: Could not read {puzzle_path}: {e}")
            return None

        self._log(f"      Givens: {NUM_CELLS - puzzle.num_empty}, empty cells: {puzzle.num_empty}")
        self._log("\n      Sudoku read:")
        self._log(self._format(puzzle))

        self._log(f"\n[2/{steps}] Solving...")
        stats = SearchStats()
        start = time.perf_counter()
        solution, solve_msg = solve_puzzle(puzzle, stats)
        elapsed = time.perf_counter() - start

        if solution is None:
            print(f"Could not solve: {solve_msg}")
        else:
            self._log(f"      ✓ Solved puzzle ({solve_msg}):")
            print(self._format(solution))
        self._log(f"      Search nodes: {stats.nodes}, dead ends: {stats.dead_ends}, max depth: {stats.max_depth}")
        self._log(f"      Elapsed: {elapsed * 1000:.2f} ms")

        report = SolveReport(puzzle, solution, solve_msg, stats, elapsed)

        if render_path:
            self._log(f"\n[3/{steps}] Rendering...")
            image = render_grid(solution if solution is not None else puzzle, puzzle, self.render_size)
            save_grid_image(render_path, image)
            report.image_path = str(render_path)
            self._log(f"      Saved {self.render_size}x{self.render_size} image to {render_path}")

        return report


def _render_size(value):
    size = int(value)
    if size < SUDOKU_SIZE:
        raise argparse.ArgumentTypeError(f"must be at least {SUDOKU_SIZE} pixels, got {size}")
    return size


def main(argv=None):
    """
    Main entry point for the Sudoku Solver application.

    Handles command-line arguments and solves one puzzle file.
    """
    parser = argparse.ArgumentParser(
        description='Sudoku Solver - propagation and backtracking',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Solve a puzzle:
    python -m gridsolve puzzles/easy.txt

  Solve and save an image of the solution:
    python -m gridsolve puzzles/easy.txt --render solved.png --size 600
        """
    )

    parser.add_argument('puzzle',
                        help='Path to a text file of 81 whitespace-separated digits (0 = blank)')
    parser.add_argument('--pretty', '-p', action='store_true',
                        help='Print grids with box separators')
    parser.add_argument('--render', '-r', default=None,
                        help='Save an image of the solved grid to this path')
    parser.add_argument('--size', '-s', type=_render_size, default=DEFAULT_RENDER_SIZE,
                        help=f'Rendered image size in pixels (default: {DEFAULT_RENDER_SIZE})')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Only print the solved grid')

    args = parser.parse_args(argv)

    if not os.path.exists(args.puzzle):
        print(f"Error: Puzzle file not found: {args.puzzle}")
        sys.exit(1)

    solver = SudokuSolver(
        pretty=args.pretty,
        verbose=not args.quiet,
        render_size=args.size
    )

    try:
        report = solver.process_file(args.puzzle, args.render)

        if report is None:
            sys.exit(1)

    except OSError as e:
        print(f"\nError: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"\nError during processing: {str(e)}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
