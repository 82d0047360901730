import operator

from hypothesis import given
from hypothesis import strategies as st

from iteradapt.tee import tee


def _drain(it):
    """Consume ``it``, returning its items and the length hint before each step."""
    hints = [operator.length_hint(it)]
    items = []
    for item in it:
        items.append(item)
        hints.append(operator.length_hint(it))
    return items, hints


def _dedup(values):
    previous = object()
    for value in values:
        if value != previous:
            yield value
        previous = value


def test_both_halves_see_everything():
    t1, t2 = tee(iter([1, 2, 3]))
    assert list(t1) == [1, 2, 3]
    assert list(t2) == [1, 2, 3]


def test_interleaved_reads():
    t1, t2 = tee(iter(range(5)))
    assert next(t1) == 0
    assert next(t2) == 0
    assert next(t2) == 1
    assert next(t2) == 2
    assert list(t1) == [1, 2, 3, 4]
    assert list(t2) == [3, 4]


@given(st.lists(st.integers(0, 255)))
def test_size_tee(values):
    t1, t2 = tee(iter(values))
    next(t1, None)
    next(t1, None)
    next(t2, None)
    items1, hints1 = _drain(t1)
    items2, hints2 = _drain(t2)
    assert items1 == values[2:]
    assert items2 == values[1:]
    assert hints1 == list(range(len(items1), -1, -1))
    assert hints2 == list(range(len(items2), -1, -1))


@given(st.lists(st.integers(0, 255)))
def test_size_tee_2(values):
    expected = list(_dedup(values))
    t1, t2 = tee(_dedup(values))
    next(t1, None)
    next(t1, None)
    next(t2, None)
    items1, hints1 = _drain(t1)
    items2, hints2 = _drain(t2)
    assert items1 == expected[2:]
    assert items2 == expected[1:]
    for items, hints in ((items1, hints1), (items2, hints2)):
        true_remaining = list(range(len(items), -1, -1))
        assert all(hint <= true for hint, true in zip(hints, true_remaining))


@given(st.lists(st.integers()))
def test_tee_halves_equal_source(values):
    t1, t2 = tee(values)
    assert list(t1) == values
    assert list(t2) == values