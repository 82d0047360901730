"""Iterate two iterables in lock step, requiring equal lengths."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import zip_longest
from typing import TypeVar

A = TypeVar("A")
B = TypeVar("B")

_MISSING = object()


def zip_eq(first: Iterable[A], second: Iterable[B]) -> Iterator[tuple[A, B]]:
    """Yield pairs from both iterables.

    Raises :class:`ValueError` if one iterable ends before the other.
    """
    for a, b in zip_longest(first, second, fillvalue=_MISSING):
        if a is _MISSING or b is _MISSING:
            raise ValueError("zip_eq reached end of one iterator before the other")
        yield a, b