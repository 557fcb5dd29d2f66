"""
Grid state for a 9x9 Sudoku.

The board is a numpy uint8 matrix where 0 marks a blank cell. The grid keeps
`num_empty` in step with every assignment so fullness checks are O(1).
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .candidates import MAX_DIGIT, CandidateSet

SUDOKU_SIZE = MAX_DIGIT
BOX_SIZE = 3
NUM_CELLS = SUDOKU_SIZE * SUDOKU_SIZE


class FormatError(ValueError):
    """Raised when puzzle input does not hold exactly 81 digits 0-9."""

    def __init__(self, message: str, count: int | None = None,
                 index: int | None = None, token=None):
        super().__init__(message)
        self.count = count
        self.index = index
        self.token = token


class ContractViolation(RuntimeError):
    """Raised when the grid is used in a way that would corrupt its state."""


def _parse_token(index: int, token) -> int:
    if isinstance(token, (bool, np.bool_)):
        raise FormatError(f"Invalid number at index {index} - {token}", index=index, token=token)

    if isinstance(token, (int, np.integer)):
        value = int(token)
    else:
        text = str(token).strip()
        if not text.isdigit() or not text.isascii():
            raise FormatError(f"Invalid number at index {index} - {token}", index=index, token=token)
        value = int(text)

    if value < 0 or value > MAX_DIGIT:
        raise FormatError(f"Invalid number at index {index} - {token}", index=index, token=token)
    return value


def _check_coordinates(row: int, col: int) -> None:
    if not 0 <= row < SUDOKU_SIZE:
        raise ContractViolation(f"row - {row} out of bounds")
    if not 0 <= col < SUDOKU_SIZE:
        raise ContractViolation(f"col - {col} out of bounds")


class Grid:
    """
    A 9x9 Sudoku board plus the number of blank cells.

    Grids behave as values: `copy()` gives an independent board, and the
    solver only ever mutates copies it owns.
    """

    __slots__ = ("_board", "num_empty")

    def __init__(self, board: np.ndarray, num_empty: int | None = None):
        values = np.asarray(board)
        if values.shape != (SUDOKU_SIZE, SUDOKU_SIZE):
            raise ValueError(f"expected a {SUDOKU_SIZE}x{SUDOKU_SIZE} board, got shape {values.shape}")
        if ((values < 0) | (values > MAX_DIGIT)).any():
            raise ValueError(f"board values must be between 0 and {MAX_DIGIT}")

        # Private copy; the caller keeps its array.
        self._board = np.array(values, dtype=np.uint8)
        if num_empty is None:
            num_empty = int(np.count_nonzero(self._board == 0))
        self.num_empty = num_empty

    @classmethod
    def parse(cls, raw_numbers: Sequence) -> "Grid":
        """
        Build a grid from 81 row-major tokens.

        Args:
            raw_numbers: ints, or strings of decimal digits, each in 0..9

        Returns:
            Grid

        Raises:
            FormatError: wrong number of tokens, or a token that is not a digit
        """
        tokens = list(raw_numbers)
        if len(tokens) != NUM_CELLS:
            raise FormatError(f"Invalid length of numbers {len(tokens)}", count=len(tokens))

        board = np.zeros((SUDOKU_SIZE, SUDOKU_SIZE), dtype=np.uint8)
        num_empty = 0
        for i, token in enumerate(tokens):
            value = _parse_token(i, token)
            board[i // SUDOKU_SIZE, i % SUDOKU_SIZE] = value
            if value == 0:
                num_empty += 1

        return cls(board, num_empty)

    @classmethod
    def empty(cls) -> "Grid":
        return cls(np.zeros((SUDOKU_SIZE, SUDOKU_SIZE), dtype=np.uint8), NUM_CELLS)

    @property
    def board(self) -> np.ndarray:
        """Read-only view of the underlying matrix."""
        view = self._board.view()
        view.flags.writeable = False
        return view

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, col = position
        return int(self._board[row, col])

    def cells(self) -> list[int]:
        return [int(v) for v in self._board.ravel()]

    def copy(self) -> "Grid":
        return Grid(self._board, self.num_empty)

    def candidates_at(self, row: int, col: int) -> CandidateSet:
        """Digits not yet used in the row, column or box of (row, col)."""
        _check_coordinates(row, col)

        choices = CandidateSet()
        choices.invalidate_all(self._board[:, col])
        choices.invalidate_all(self._board[row, :])

        r0 = (row // BOX_SIZE) * BOX_SIZE
        c0 = (col // BOX_SIZE) * BOX_SIZE
        choices.invalidate_all(self._board[r0:r0 + BOX_SIZE, c0:c0 + BOX_SIZE])
        return choices

    def assign(self, row: int, col: int, value: int) -> None:
        """
        Fill an empty cell.

        The caller must pick `value` from the cell's candidate set; only
        occupancy and ranges are checked here.
        """
        _check_coordinates(row, col)
        if not 1 <= value <= MAX_DIGIT:
            raise ContractViolation(f"Assign at {row}, {col} with invalid value {value}")
        if self._board[row, col] != 0:
            raise ContractViolation(
                f"Assign at {row}, {col} with {value} but cell holds {self._board[row, col]}"
            )

        self._board[row, col] = value
        self.num_empty -= 1

    def is_full(self) -> bool:
        return self.num_empty == 0

    def empty_cells(self) -> list[tuple[int, int]]:
        return [(int(r), int(c)) for r, c in np.argwhere(self._board == 0)]

    def first_empty(self) -> tuple[int, int] | None:
        positions = np.argwhere(self._board == 0)
        if positions.size == 0:
            return None
        return int(positions[0][0]), int(positions[0][1])

    def find_conflicts(self) -> list[str]:
        """List every row, column and box that repeats a given digit."""
        notes: list[str] = []

        def check(values: np.ndarray, label: str):
            filled = values[values != 0]
            digits, counts = np.unique(filled, return_counts=True)
            for digit, count in zip(digits, counts):
                if count > 1:
                    notes.append(f"{label} has duplicate given digit {int(digit)}")

        for i in range(SUDOKU_SIZE):
            check(self._board[i, :], f"Row {i + 1}")
        for i in range(SUDOKU_SIZE):
            check(self._board[:, i], f"Column {i + 1}")
        for br in range(0, SUDOKU_SIZE, BOX_SIZE):
            for bc in range(0, SUDOKU_SIZE, BOX_SIZE):
                block = self._board[br:br + BOX_SIZE, bc:bc + BOX_SIZE].ravel()
                check(block, f"Box ({br // BOX_SIZE + 1},{bc // BOX_SIZE + 1})")

        return notes

    def is_solved(self) -> bool:
        return self.is_full() and not self.find_conflicts()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self._board, other._board))

    __hash__ = None

    def __repr__(self) -> str:
        digits = "".join(str(v) for v in self.cells())
        return f"Grid('{digits}', num_empty={self.num_empty})"
