"""Pad an iterable to a minimum length with generated elements."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

_EMPTY = object()


class _PadUsing(Generic[T]):
    def __init__(
        self, iterable: Iterable[T], min_len: int, filler: Callable[[int], T]
    ) -> None:
        self._iter = iter(iterable)
        self._min = min_len
        self._pos = 0
        self._filler = filler

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        item = next(self._iter, _EMPTY)
        if item is _EMPTY:
            self._iter = iter(())
            if self._pos >= self._min:
                raise StopIteration
            item = self._filler(self._pos)
        self._pos += 1
        return item

    def __length_hint__(self) -> int:
        tail = max(self._min - self._pos, 0)
        return max(operator.length_hint(self._iter), tail)

    def __repr__(self) -> str:
        return f"PadUsing(min={self._min}, pos={self._pos})"


def pad_using(
    iterable: Iterable[T], min_len: int, filler: Callable[[int], T]
) -> Iterator[T]:
    """Yield the elements of ``iterable``, then ``filler(index)`` for each
    missing index until at least ``min_len`` elements have been yielded."""
    if min_len < 0:
        raise ValueError("minimum length must not be negative")
    return _PadUsing(iterable, min_len, filler)