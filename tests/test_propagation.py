from gridsolve.grid import Grid
from gridsolve.propagation import Assignment, fill_first_single, propagate

from conftest import EASY_SOLUTION


def test_fill_first_single_assigns_a_forced_cell(easy_grid):
    before = easy_grid.copy()
    step = fill_first_single(easy_grid)
    assert step is not None
    assert list(before.candidates_at(step.row, step.col)) == [step.value]
    assert easy_grid[step.row, step.col] == step.value
    assert easy_grid.num_empty == before.num_empty - 1


def test_every_forced_assignment_was_the_only_candidate(easy_grid):
    replay = easy_grid.copy()
    trace = []
    propagate(easy_grid, trace)
    assert trace

    for step in trace:
        assert replay[step.row, step.col] == 0
        assert list(replay.candidates_at(step.row, step.col)) == [step.value]
        replay.assign(step.row, step.col, step.value)
        assert replay.candidates_at(step.row, step.col).is_empty()

    assert replay == easy_grid


def test_single_empty_cell_filled_in_one_pass():
    cells = [int(ch) for ch in EASY_SOLUTION]
    cells[40] = 0
    grid = Grid.parse(cells)
    trace = []

    assert propagate(grid, trace) is True
    assert grid.is_full()
    assert trace == [Assignment(4, 4, 5)]


def test_no_progress_on_empty_grid():
    grid = Grid.empty()
    trace = []
    assert propagate(grid, trace) is False
    assert trace == []
    assert grid.num_empty == 81


def test_full_grid_needs_no_assignments(solved_grid):
    trace = []
    assert propagate(solved_grid, trace) is True
    assert trace == []


def test_stalls_without_touching_contradiction(contradiction_grid):
    assert propagate(contradiction_grid) is False
    assert contradiction_grid[0, 0] == 0
    assert contradiction_grid.candidates_at(0, 0).is_empty()
