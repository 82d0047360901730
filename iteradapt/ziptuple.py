"""Run several iterables in lock step, yielding tuples."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence
from typing import Any


class Zip:
    """Yield tuples of one element from each input until any input ends.

    Inputs are advanced in order, so earlier inputs may have given one more
    element than later ones when iteration stops. When every input is a
    sequence and iteration has not started, the zip can be reversed; the
    longer inputs are trimmed to the shortest first.
    """

    def __init__(self, iterables: Iterable[Iterable[Any]]) -> None:
        self._sources = tuple(iterables)
        self._iters = [iter(source) for source in self._sources]
        self._started = False

    def __iter__(self) -> Zip:
        return self

    def __next__(self) -> tuple[Any, ...]:
        self._started = True
        if not self._iters:
            raise StopIteration
        return tuple([next(it) for it in self._iters])

    def __length_hint__(self) -> int:
        return min((operator.length_hint(it) for it in self._iters), default=0)

    def __reversed__(self) -> Iterator[tuple[Any, ...]]:
        if self._started:
            raise TypeError("cannot reverse a zip that has been advanced")
        if not all(isinstance(source, Sequence) for source in self._sources):
            raise TypeError("every input must be a sequence to reverse a zip")
        return self._reversed()

    def _reversed(self) -> Iterator[tuple[Any, ...]]:
        sources = self._sources
        size = min((len(source) for source in sources), default=0)
        for index in reversed(range(size)):
            yield tuple(source[index] for source in sources)

    def __repr__(self) -> str:
        return f"Zip(arity={len(self._sources)})"


def multizip(iterables: Iterable[Iterable[Any]]) -> Zip:
    """Zip a tuple of iterables into a :class:`Zip` of tuples."""
    return Zip(iterables)