import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.coalesce import (
    coalesce,
    dedup,
    dedup_by,
    dedup_by_with_count,
    dedup_with_count,
)
from iterkit.results import Err, Ok


def _merge_equal(a, b):
    return Ok(a) if a == b else Err((a, b))


def test_coalesce_merges_equal_neighbours():
    assert list(coalesce([1, 1, 2, 2, 2, 3, 1], _merge_equal)) == [1, 2, 3, 1]


def test_coalesce_sums_runs_of_same_sign():
    def merge(a, b):
        if (a >= 0) == (b >= 0):
            return Ok(a + b)
        return Err((a, b))

    assert list(coalesce([1, 2, -3, -4, 5], merge)) == [3, -7, 5]


def test_coalesce_empty():
    assert list(coalesce([], _merge_equal)) == []


def test_coalesce_single():
    assert list(coalesce([7], _merge_equal)) == [7]


def test_coalesce_bad_return_raises():
    with pytest.raises(TypeError):
        list(coalesce([1, 2], lambda a, b: a + b))


def test_dedup_values():
    assert list(dedup([1, 1, 2, 3, 3, 3, 1])) == [1, 2, 3, 1]


def test_dedup_by_ge():
    assert list(dedup_by([5, 3, 4, 6, 2], operator.ge)) == [5, 6]


def test_dedup_with_count_values():
    assert list(dedup_with_count([1, 1, 2, 3, 3, 3, 1])) == [
        (2, 1),
        (1, 2),
        (3, 3),
        (1, 1),
    ]


def test_dedup_by_with_count_ge():
    assert list(dedup_by_with_count([5, 3, 4, 6, 2], operator.ge)) == [(3, 5), (2, 6)]


def test_dedup_with_count_empty():
    assert list(dedup_with_count([])) == []


@given(st.lists(st.integers(0, 5)))
def test_dedup_has_no_equal_neighbours(values):
    result = list(dedup(values))
    assert all(a != b for a, b in zip(result, result[1:]))
    assert set(result) == set(values)


@given(st.lists(st.integers(0, 5)))
def test_dedup_with_count_counts_add_up(values):
    runs = list(dedup_with_count(values))
    assert sum(count for count, _ in runs) == len(values)
    assert [item for _, item in runs] == list(dedup(values))


@given(st.lists(st.integers(0, 255)))
def test_dedup_by_with_count_matches_dedup_by(values):
    runs = list(dedup_by_with_count(values, operator.ge))
    assert [item for _, item in runs] == list(dedup_by(values, operator.ge))
    assert sum(count for count, _ in runs) == len(values)