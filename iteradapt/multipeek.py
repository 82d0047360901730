"""An iterator that can peek several elements ahead with a moving cursor."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_EMPTY = object()


class MultiPeek(Generic[T]):
    """Peek at successive upcoming elements without consuming them.

    Each call to :meth:`peek` looks one element further ahead. Calling
    ``next`` or :meth:`reset_peek` moves the peek cursor back to the front.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter = iter(iterable)
        self._buf: deque[T] = deque()
        self._index = 0

    def __iter__(self) -> MultiPeek[T]:
        return self

    def _pull(self) -> Any:
        item = next(self._iter, _EMPTY)
        if item is _EMPTY:
            self._iter = iter(())
        return item

    def __next__(self) -> T:
        self._index = 0
        if self._buf:
            return self._buf.popleft()
        item = self._pull()
        if item is _EMPTY:
            raise StopIteration
        return item

    def __length_hint__(self) -> int:
        return operator.length_hint(self._iter) + len(self._buf)

    def reset_peek(self) -> None:
        """Move the peek cursor back to the next element."""
        self._index = 0

    def peek(self, default: Any = None) -> Any:
        """Return the element under the cursor and advance the cursor.

        Returns ``default`` once the cursor is past the end.
        """
        if self._index < len(self._buf):
            item = self._buf[self._index]
        else:
            item = self._pull()
            if item is _EMPTY:
                return default
            self._buf.append(item)
        self._index += 1
        return item

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next element if ``accept`` approves it.

        Raises :class:`StopIteration` when the iterator is exhausted or the
        element is rejected; a rejected element is not consumed.
        """
        if not self._buf:
            item = self.peek(_EMPTY)
            if item is not _EMPTY and not accept(item):
                raise StopIteration
        elif not accept(self._buf[0]):
            raise StopIteration
        return next(self)

    def __repr__(self) -> str:
        return f"MultiPeek(buf={list(self._buf)!r}, index={self._index})"


def multipeek(iterable: Iterable[T]) -> MultiPeek[T]:
    """Create a :class:`MultiPeek` over ``iterable``."""
    return MultiPeek(iterable)