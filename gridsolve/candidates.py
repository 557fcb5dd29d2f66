"""
Per-cell candidate sets.

A CandidateSet holds the digits 1..9 that are still legal for one cell.
Sets start full and only ever shrink.
"""

from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

MAX_DIGIT = 9


class CandidateSet:
    """Boolean flag per digit plus a running count of the valid ones."""

    __slots__ = ("_flags", "_count")

    def __init__(self):
        # Index 0 means "blank" and is never a candidate.
        self._flags = np.ones(MAX_DIGIT + 1, dtype=bool)
        self._flags[0] = False
        self._count = MAX_DIGIT

    def invalidate(self, value: int) -> None:
        """Drop `value` from the set. 0 and out-of-range values are ignored."""
        value = int(value)
        if value < 1 or value > MAX_DIGIT:
            return
        if self._flags[value]:
            self._flags[value] = False
            self._count -= 1

    def invalidate_all(self, values: Iterable[int] | np.ndarray) -> None:
        for value in np.asarray(values, dtype=np.int64).ravel():
            self.invalidate(value)

    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def is_single(self) -> bool:
        return self._count == 1

    def only(self) -> int:
        """Return the single remaining digit."""
        if self._count != 1:
            raise ValueError(f"expected exactly one candidate, have {self._count}")
        return next(iter(self))

    def __contains__(self, value) -> bool:
        value = int(value)
        return 1 <= value <= MAX_DIGIT and bool(self._flags[value])

    def __iter__(self) -> Iterator[int]:
        for digit in range(1, MAX_DIGIT + 1):
            if self._flags[digit]:
                yield digit

    def __repr__(self) -> str:
        digits = " ".join(str(d) for d in self)
        return f"CandidateSet(n={self._count}, [{digits}])"
