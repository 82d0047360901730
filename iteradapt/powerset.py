"""All subsets of the elements of an iterable, smallest first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import combinations
from typing import TypeVar

T = TypeVar("T")


def _powerset(it: Iterator[T]) -> Iterator[list[T]]:
    yield []
    pool: list[T] = []
    for item in it:
        pool.append(item)
        yield [item]
    for size in range(2, len(pool) + 1):
        for combo in combinations(pool, size):
            yield list(combo)


def powerset(iterable: Iterable[T]) -> Iterator[list[T]]:
    """Yield every subset of ``iterable`` as a list.

    Subsets come in order of size, and within a size in lexicographic order
    of the element positions. Elements keep their original order inside a
    subset. The source is read lazily while the one-element subsets are
    produced.
    """
    return _powerset(iter(iterable))