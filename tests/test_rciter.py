import pytest
from hypothesis import given
from hypothesis import strategies as st

from iteradapt.rciter import rciter


def test_zip_with_itself():
    it = rciter(range(9))
    z = zip(it.clone(), it.clone())
    assert next(z) == (0, 1)
    assert next(z) == (2, 3)
    assert next(z) == (4, 5)
    assert next(it) == 6
    assert next(z) == (7, 8)
    with pytest.raises(StopIteration):
        next(z)


def test_clone_shares_position():
    it = rciter([1, 2, 3, 4])
    other = it.clone()
    assert next(it) == 1
    assert next(other) == 2
    assert list(it) == [3, 4]
    assert list(other) == []


@given(st.lists(st.integers()))
def test_handles_partition_elements(values):
    it = rciter(values)
    first = it.clone()
    second = it.clone()
    taken = []
    for a in first:
        taken.append(a)
        b = next(second, None)
        if b is None:
            break
        taken.append(b)
    assert taken == values