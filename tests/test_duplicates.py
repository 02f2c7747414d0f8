from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.duplicates import duplicates, duplicates_by


def test_duplicates_in_order_of_second_sighting():
    assert list(duplicates([1, 2, 1, 3, 2, 1])) == [1, 2]


def test_no_duplicates():
    assert list(duplicates("abc")) == []


def test_duplicates_by_yields_repeating_item():
    assert list(duplicates_by([10, 21, 30, 11], lambda x: x % 10)) == [30, 11]


def test_duplicates_by_reports_each_key_once():
    assert list(duplicates_by([1, 11, 21, 31, 2], lambda x: x % 10)) == [11]


def test_unhashable_items_raise():
    with pytest.raises(TypeError):
        list(duplicates([[1], [1]]))


@given(st.lists(st.integers(0, 20)))
def test_duplicates_are_exactly_repeated_items(values):
    result = list(duplicates(values))
    counts = Counter(values)
    assert len(result) == len(set(result))
    assert set(result) == {value for value, count in counts.items() if count >= 2}


@given(st.lists(st.integers(0, 255)))
def test_duplicates_by_keys_are_unique_and_repeated(values):
    result = list(duplicates_by(values, lambda x: x % 10))
    keys = [value % 10 for value in result]
    key_counts = Counter(value % 10 for value in values)
    assert len(keys) == len(set(keys))
    assert set(keys) == {key for key, count in key_counts.items() if count >= 2}