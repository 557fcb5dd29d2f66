import pytest

from gridsolve.grid import Grid

EASY_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

EASY_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def grid_from_string(digits: str) -> Grid:
    return Grid.parse(list(digits))


def as_text(digits: str) -> str:
    rows = [digits[i:i + 9] for i in range(0, 81, 9)]
    return "\n".join(" ".join(row) for row in rows) + "\n"


@pytest.fixture
def easy_grid():
    return grid_from_string(EASY_PUZZLE)


@pytest.fixture
def solved_grid():
    return grid_from_string(EASY_SOLUTION)


@pytest.fixture
def contradiction_grid():
    # Row 1 holds 1..8 and column 1 holds 9, so cell (0, 0) has no candidates.
    cells = [0] * 81
    cells[1:9] = list(range(1, 9))
    cells[27] = 9
    return Grid.parse(cells)


@pytest.fixture
def write_puzzle(tmp_path):
    def _write(text, name="puzzle.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
