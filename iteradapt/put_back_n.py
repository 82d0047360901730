"""An iterator that accepts any number of elements pushed back to its front."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class PutBackN(Generic[T]):
    """Wrap an iterable so elements can be put back in front of it.

    Put-back elements are yielded most recent first, before the rest of the
    wrapped iterator.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._top: list[T] = []
        self._iter = iter(iterable)

    def __iter__(self) -> PutBackN[T]:
        return self

    def __next__(self) -> T:
        if self._top:
            return self._top.pop()
        return next(self._iter)

    def __length_hint__(self) -> int:
        return operator.length_hint(self._iter) + len(self._top)

    def put_back(self, value: T) -> None:
        """Put ``value`` in front of the iterator."""
        self._top.append(value)

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next element if ``accept`` approves it.

        Raises :class:`StopIteration` when the iterator is exhausted or the
        element is rejected; a rejected element is put back.
        """
        value = next(self)
        if not accept(value):
            self.put_back(value)
            raise StopIteration
        return value

    def __repr__(self) -> str:
        return f"PutBackN(top={self._top!r})"


def put_back_n(iterable: Iterable[T]) -> PutBackN[T]:
    """Create a :class:`PutBackN` over ``iterable``."""
    return PutBackN(iterable)