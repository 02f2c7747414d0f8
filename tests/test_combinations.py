import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.combinations import Combinations, combinations


def test_pairs_in_order():
    assert list(combinations([1, 2, 3, 4], 2)) == [
        [1, 2],
        [1, 3],
        [1, 4],
        [2, 3],
        [2, 4],
        [3, 4],
    ]


def test_zero_length_yields_one_empty_combination():
    assert list(combinations([1, 2, 3], 0)) == [[]]
    assert list(combinations([], 0)) == [[]]


def test_too_long_yields_nothing():
    assert list(combinations([1, 2], 3)) == []


def test_stays_exhausted():
    it = combinations([1, 2], 2)
    assert next(it) == [1, 2]
    with pytest.raises(StopIteration):
        next(it)
    with pytest.raises(StopIteration):
        next(it)


def test_endless_source_is_read_lazily():
    it = combinations(itertools.count(), 2)
    assert list(itertools.islice(it, 4)) == [[0, 1], [0, 2], [0, 3], [0, 4]]


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        Combinations([1, 2], -1)


def test_count_at_start_and_after_advancing():
    it = combinations(range(5), 3)
    assert it.count() == 10
    next(it)
    next(it)
    assert it.count() == 8
    assert len(list(it)) == 8


def test_reset_shorter_and_longer():
    it = combinations([1, 2, 3, 4], 3)
    assert next(it) == [1, 2, 3]
    it.reset(2)
    assert list(it) == [[1, 2], [1, 3], [1, 4], [2, 3], [2, 4], [3, 4]]
    it.reset(4)
    assert list(it) == [[1, 2, 3, 4]]


@given(st.lists(st.integers(0, 255), max_size=8), st.integers(0, 3))
def test_matches_standard_combinations(values, k):
    expected = [list(c) for c in itertools.combinations(values, k)]
    assert list(combinations(values, k)) == expected


@given(st.lists(st.integers(0, 255), max_size=8), st.integers(0, 3))
def test_count_matches_remaining_after_each_step(values, k):
    total = len(list(combinations(values, k)))
    for advanced in range(5):
        it = combinations(values, k)
        taken = len(list(itertools.islice(it, advanced)))
        remaining = it.count()
        assert remaining == total - taken
        assert len(list(it)) == remaining