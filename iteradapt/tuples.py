"""Group elements into fixed-size tuples or sliding tuple windows."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError("tuple size must be at least 1")


class Tuples(Generic[T]):
    """Yield consecutive, non-overlapping tuples of ``size`` elements.

    Elements left over at the end, too few to fill a tuple, are kept and
    can be retrieved with :meth:`into_buffer`.
    """

    def __init__(self, iterable: Iterable[T], size: int) -> None:
        _check_size(size)
        self._iter: Iterator[T] = iter(iterable)
        self._size = size
        self._buf: list[T] = []

    def __iter__(self) -> Tuples[T]:
        return self

    def __next__(self) -> tuple[T, ...]:
        items = list(islice(self._iter, self._size))
        if len(items) == self._size:
            return tuple(items)
        self._iter = iter(())
        self._buf = items
        raise StopIteration

    def __length_hint__(self) -> int:
        return (operator.length_hint(self._iter) + len(self._buf)) // self._size

    def into_buffer(self) -> Iterator[T]:
        """Return an iterator over the elements that did not fill a tuple."""
        return iter(list(self._buf))

    def __repr__(self) -> str:
        return f"Tuples(size={self._size}, buf={self._buf!r})"


def tuples(iterable: Iterable[T], size: int) -> Tuples[T]:
    """Group the elements of ``iterable`` into tuples of ``size`` elements."""
    return Tuples(iterable, size)


def _tuple_windows(it: Iterator[T], size: int) -> Iterator[tuple[T, ...]]:
    window: deque[T] = deque(islice(it, size), maxlen=size)
    if len(window) < size:
        return
    yield tuple(window)
    for item in it:
        window.append(item)
        yield tuple(window)


def tuple_windows(iterable: Iterable[T], size: int) -> Iterator[tuple[T, ...]]:
    """Yield every contiguous window of ``size`` elements as a tuple."""
    _check_size(size)
    return _tuple_windows(iter(iterable), size)


def _circular_tuple_windows(
    iterable: Iterable[T], size: int
) -> Iterator[tuple[Any, ...]]:
    items = list(iterable)
    n = len(items)
    for start in range(n):
        yield tuple(items[(start + offset) % n] for offset in range(size))


def circular_tuple_windows(
    iterable: Iterable[T], size: int
) -> Iterator[tuple[T, ...]]:
    """Yield one window of ``size`` elements starting at each element,
    wrapping around to the front when a window runs past the end."""
    _check_size(size)
    return _circular_tuple_windows(iterable, size)