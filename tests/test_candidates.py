import pytest

from gridsolve.candidates import CandidateSet


def test_new_set_holds_all_digits():
    choices = CandidateSet()
    assert choices.count() == 9
    assert len(choices) == 9
    assert list(choices) == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_invalidate_removes_digit_once():
    choices = CandidateSet()
    choices.invalidate(4)
    choices.invalidate(4)
    assert choices.count() == 8
    assert 4 not in choices
    assert list(choices) == [1, 2, 3, 5, 6, 7, 8, 9]


@pytest.mark.parametrize("value", [0, -1, 10, 255])
def test_invalidate_ignores_blank_and_out_of_range(value):
    choices = CandidateSet()
    choices.invalidate(value)
    assert choices.count() == 9


def test_invalidate_all_accepts_repeated_values():
    choices = CandidateSet()
    choices.invalidate_all([0, 3, 3, 7, 0, 9])
    assert list(choices) == [1, 2, 4, 5, 6, 8]
    assert choices.count() == 6


def test_count_matches_iteration():
    choices = CandidateSet()
    for digit in (2, 5, 8, 9):
        choices.invalidate(digit)
        assert choices.count() == len(list(choices))


def test_iteration_is_restartable():
    choices = CandidateSet()
    choices.invalidate_all([1, 2, 3])
    assert list(choices) == list(choices)
    assert next(iter(choices)) == 4


def test_singleton_and_empty_queries():
    choices = CandidateSet()
    choices.invalidate_all([1, 2, 3, 4, 5, 6, 8, 9])
    assert choices.is_single()
    assert not choices.is_empty()
    assert choices.only() == 7

    choices.invalidate(7)
    assert choices.is_empty()
    assert list(choices) == []
    with pytest.raises(ValueError):
        choices.only()


def test_repr_lists_digits():
    choices = CandidateSet()
    choices.invalidate_all([1, 2, 3, 5, 6, 8, 9])
    assert repr(choices) == "CandidateSet(n=2, [4 7])"
