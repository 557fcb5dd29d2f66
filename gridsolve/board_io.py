"""
Reading puzzles from text and turning grids back into text.
"""

from __future__ import annotations

import os

from .grid import BOX_SIZE, SUDOKU_SIZE, FormatError, Grid


def parse_puzzle_text(text: str) -> Grid:
    """Parse whitespace-separated digits (row-major, 0 for blanks)."""
    return Grid.parse(text.split())


def read_puzzle(path: str | os.PathLike) -> Grid:
    """
    Load a puzzle file.

    Raises:
        OSError: the file could not be read
        FormatError: the file is not UTF-8 text or does not hold 81 digits 0-9
    """
    with open(path, encoding="utf-8") as fh:
        try:
            text = fh.read()
        except UnicodeDecodeError as e:
            raise FormatError(f"Invalid text encoding at byte {e.start}") from e
    return parse_puzzle_text(text)


def format_grid(grid: Grid) -> str:
    """Nine lines of nine space-separated digits."""
    board = grid.board
    return "\n".join(" ".join(str(int(v)) for v in row) for row in board)


def _boxed_row(row: list[int]) -> str:
    chunks = [row[i:i + BOX_SIZE] for i in range(0, SUDOKU_SIZE, BOX_SIZE)]
    return " | ".join(" ".join(str(v) if v else "." for v in chunk) for chunk in chunks)


def format_board(grid: Grid) -> str:
    """Boxes split by '|' and dashed rules, blanks shown as '.'."""
    rows = [_boxed_row(row.tolist()) for row in grid.board]
    rule = "-" * len(rows[0])
    bands = ["\n".join(rows[i:i + BOX_SIZE]) for i in range(0, SUDOKU_SIZE, BOX_SIZE)]
    return f"\n{rule}\n".join(bands)
