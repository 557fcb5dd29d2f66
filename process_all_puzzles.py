#!/usr/bin/env python3
"""
Solve every Sudoku puzzle file in a directory and print a summary.

Usage:
    python process_all_puzzles.py            # *.txt in the current directory
    python process_all_puzzles.py puzzles/
"""

import sys
import os
import glob

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from gridsolve.sudoku_solver import SudokuSolver


def main(argv=None):
    """Process all .txt puzzles in the given (or current) directory."""
    if argv is None:
        argv = sys.argv[1:]
    directory = argv[0] if argv else "."
    puzzle_files = sorted(glob.glob(os.path.join(directory, "*.txt")))

    if not puzzle_files:
        print(f"No .txt files found in {directory}!")
        return None

    print(f"Found {len(puzzle_files)} puzzles to process")
    print("=" * 60)

    solver = SudokuSolver(pretty=True, verbose=False)

    results = {
        'solved': [],
        'unsolved': [],
        'error': []
    }

    for i, puzzle_path in enumerate(puzzle_files, 1):
        print(f"\n[{i}/{len(puzzle_files)}] Processing {puzzle_path}...")

        try:
            report = solver.process_file(puzzle_path)
        except Exception as e:
            print(f"Error processing {puzzle_path}: {e}")
            results['error'].append(puzzle_path)
            continue

        if report is None:
            results['error'].append(puzzle_path)
        elif report.solved:
            results['solved'].append(puzzle_path)
            print(f"Solved in {report.elapsed * 1000:.2f} ms")
        else:
            results['unsolved'].append(puzzle_path)

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"✅ Solved:    {len(results['solved'])}/{len(puzzle_files)}")
    print(f"❌ Unsolved:  {len(results['unsolved'])}/{len(puzzle_files)}")
    print(f"⚠️  Errors:    {len(results['error'])}/{len(puzzle_files)}")

    if results['solved']:
        print(f"\nSolved puzzles: {', '.join(results['solved'])}")

    return results


if __name__ == '__main__':
    main()
