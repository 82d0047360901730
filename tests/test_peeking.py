import pytest

from iteradapt.peeking import Peekable, PeekingTakeWhile, peeking_take_while
from iteradapt.put_back_n import put_back_n
from iteradapt.repeatn import repeat_n


def test_peeking_take_while_peekable():
    r = Peekable(range(10))
    taken = list(peeking_take_while(r, lambda x: x <= 3))
    assert taken == [0, 1, 2, 3]
    assert next(r) == 4


def test_peeking_take_while_put_back_n():
    r = put_back_n(range(6, 10))
    for elt in reversed(range(6)):
        r.put_back(elt)
    assert list(peeking_take_while(r, lambda x: x <= 3)) == [0, 1, 2, 3]
    assert next(r) == 4
    assert list(peeking_take_while(r, lambda _: True)) == [5, 6, 7, 8, 9]
    assert next(r, "end") == "end"


def test_peeking_take_while_over_list():
    r = Peekable([1, 2, 3, 4, 5, 6])
    assert list(peeking_take_while(r, lambda x: x <= 3)) == [1, 2, 3]
    assert next(r) == 4
    assert list(peeking_take_while(r, lambda _: True)) == [5, 6]
    assert next(r, "end") == "end"


def test_peeking_take_while_reversed():
    r = Peekable(reversed([1, 2, 3, 4, 5, 6]))
    assert list(peeking_take_while(r, lambda x: x >= 3)) == [6, 5, 4, 3]
    assert next(r) == 2
    assert list(peeking_take_while(r, lambda _: True)) == [1]
    assert next(r, "end") == "end"


def test_peeking_take_while_nested():
    xs = Peekable(range(10))
    outer = peeking_take_while(xs, lambda x: x < 6)
    ys = list(peeking_take_while(outer, lambda x: x != 3))
    assert ys == [0, 1, 2]
    assert next(xs) == 3

    xs = Peekable(range(4, 10))
    outer = peeking_take_while(xs, lambda x: x != 3)
    ys = list(peeking_take_while(outer, lambda x: x < 6))
    assert ys == [4, 5]
    assert next(xs) == 6


def test_peeking_take_while_repeat_n():
    r = repeat_n(7, 3)
    assert list(peeking_take_while(r, lambda x: x > 5)) == [7, 7, 7]
    assert len(r) == 0


def test_peeking_take_while_repeat_n_rejects():
    r = repeat_n(7, 3)
    assert list(peeking_take_while(r, lambda x: x > 10)) == []
    assert len(r) == 3


def test_peeking_take_while_requires_peeking():
    with pytest.raises(TypeError):
        peeking_take_while(iter([1, 2, 3]), lambda x: True)


def test_peek_does_not_consume():
    p = Peekable([1, 2])
    assert p.peek() == 1
    assert p.peek() == 1
    assert next(p) == 1
    assert p.peek() == 2
    assert list(p) == [2]


def test_peek_default_when_empty():
    p = Peekable([])
    assert p.peek("none") == "none"
    with pytest.raises(StopIteration):
        next(p)


def test_peekable_peeking_next():
    p = Peekable([1, 2])
    with pytest.raises(StopIteration):
        p.peeking_next(lambda x: x > 1)
    assert p.peeking_next(lambda x: x == 1) == 1
    assert p.peeking_next(lambda x: x == 2) == 2
    with pytest.raises(StopIteration):
        p.peeking_next(lambda x: True)


def test_peeking_take_while_peeking_next_combines_predicates():
    p = Peekable([2, 4, 5])
    taker = PeekingTakeWhile(p, lambda x: x % 2 == 0)
    with pytest.raises(StopIteration):
        taker.peeking_next(lambda x: x > 2)
    assert taker.peeking_next(lambda x: x == 2) == 2
    assert taker.peeking_next(lambda x: x > 2) == 4
    with pytest.raises(StopIteration):
        taker.peeking_next(lambda x: True)
    assert next(p) == 5


def test_peekable_length_hint():
    import operator

    p = Peekable(range(4))
    assert operator.length_hint(p) == 4
    p.peek()
    assert operator.length_hint(p) == 4
    next(p)
    assert operator.length_hint(p) == 3