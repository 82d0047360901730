from itertools import islice

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iteradapt.unique import unique, unique_by


def test_unique_keeps_first_occurrence_order():
    assert list(unique([3, 1, 3, 2, 1, 2])) == [3, 1, 2]


def test_unique_empty():
    assert list(unique([])) == []


def test_unique_by_keeps_first_per_key():
    assert list(unique_by(["a", "bb", "cc", "d", "eee"], len)) == ["a", "bb", "eee"]


def test_unique_unhashable_raises():
    with pytest.raises(TypeError):
        list(unique([[1], [1]]))


@given(st.lists(st.integers(-128, 127)), st.integers(0, 255))
def test_count_unique(values, take_first):
    it = unique(values)
    first_count = sum(1 for _ in islice(it, take_first))
    rest_count = sum(1 for _ in it)
    assert first_count + rest_count == len(set(values))


@given(st.lists(st.integers(-50, 50)))
def test_unique_matches_dict_keys(values):
    assert list(unique(values)) == list(dict.fromkeys(values))


@given(st.lists(st.integers(-1000, 1000)))
def test_unique_by_keys_are_distinct(values):
    result = list(unique_by(values, lambda x: x % 100))
    keys = [x % 100 for x in result]
    assert len(keys) == len(set(keys))
    assert set(keys) == {x % 100 for x in values}


@given(st.lists(st.integers(-100, 100)))
def test_fused_unique(values):
    it = unique(values)
    for _ in it:
        pass
    for _ in range(10):
        assert next(it, None) is None


@given(st.lists(st.integers(-100, 100)))
def test_fused_unique_by(values):
    it = unique_by(values, lambda x: x % 100)
    for _ in it:
        pass
    for _ in range(10):
        assert next(it, None) is None