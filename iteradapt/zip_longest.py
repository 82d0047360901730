"""Zip two iterables, continuing until both are exhausted."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from iteradapt.either import Both, Left, Right

A = TypeVar("A")
B = TypeVar("B")

_EMPTY = object()


class _ZipLongest(Generic[A, B]):
    def __init__(self, first: Iterable[A], second: Iterable[B]) -> None:
        self._a: Iterator[A] = iter(first)
        self._b: Iterator[B] = iter(second)
        self._a_done = False
        self._b_done = False

    def __iter__(self) -> _ZipLongest[A, B]:
        return self

    def _pull_a(self) -> Any:
        if self._a_done:
            return _EMPTY
        item = next(self._a, _EMPTY)
        if item is _EMPTY:
            self._a_done = True
        return item

    def _pull_b(self) -> Any:
        if self._b_done:
            return _EMPTY
        item = next(self._b, _EMPTY)
        if item is _EMPTY:
            self._b_done = True
        return item

    def __next__(self) -> Any:
        a = self._pull_a()
        b = self._pull_b()
        if a is _EMPTY:
            if b is _EMPTY:
                raise StopIteration
            return Right(b)
        if b is _EMPTY:
            return Left(a)
        return Both(a, b)

    def __length_hint__(self) -> int:
        a_len = 0 if self._a_done else operator.length_hint(self._a)
        b_len = 0 if self._b_done else operator.length_hint(self._b)
        return max(a_len, b_len)

    def __repr__(self) -> str:
        return f"ZipLongest(a_done={self._a_done}, b_done={self._b_done})"


def zip_longest(first: Iterable[A], second: Iterable[B]) -> Iterator[Any]:
    """Yield :class:`Both` while both iterables have elements, then
    :class:`Left` or :class:`Right` for the rest of the longer one.

    Each input stops being polled once it is exhausted.
    """
    return _ZipLongest(first, second)