"""Split one iterator into two that yield the same elements."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class _TeeBuffer(Generic[T]):
    def __init__(self, iterator: Iterator[T]) -> None:
        self.backlog: deque[T] = deque()
        self.iter = iterator
        # The half whose id equals ``owner`` reads from the backlog.
        self.owner = False


class Tee(Generic[T]):
    """One half of a pair of iterators sharing a single source.

    Elements drawn by one half are buffered until the other half reads them.
    """

    def __init__(self, buffer: _TeeBuffer[T], ident: bool) -> None:
        self._buffer = buffer
        self._id = ident

    def __iter__(self) -> Tee[T]:
        return self

    def __next__(self) -> T:
        buffer = self._buffer
        if buffer.owner == self._id and buffer.backlog:
            return buffer.backlog.popleft()
        item = next(buffer.iter)
        buffer.backlog.append(item)
        buffer.owner = not self._id
        return item

    def __length_hint__(self) -> int:
        buffer = self._buffer
        hint = operator.length_hint(buffer.iter)
        if buffer.owner == self._id:
            hint += len(buffer.backlog)
        return hint

    def __repr__(self) -> str:
        return f"Tee(id={self._id}, backlog={list(self._buffer.backlog)!r})"


def tee(iterable: Iterable[T]) -> tuple[Tee[T], Tee[T]]:
    """Return two iterators that each yield every element of ``iterable``."""
    buffer: _TeeBuffer[T] = _TeeBuffer(iter(iterable))
    return Tee(buffer, True), Tee(buffer, False)