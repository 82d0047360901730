"""An iterator that can look any number of elements ahead."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_EMPTY = object()


class PeekNth(Generic[T]):
    """Peek at the ``n``-th upcoming element without consuming anything.

    Unlike :class:`~iteradapt.multipeek.MultiPeek` there is no cursor:
    repeated peeks return the same elements until ``next`` is called.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter = iter(iterable)
        self._buf: deque[T] = deque()

    def __iter__(self) -> PeekNth[T]:
        return self

    def __next__(self) -> T:
        if self._buf:
            return self._buf.popleft()
        item = next(self._iter, _EMPTY)
        if item is _EMPTY:
            self._iter = iter(())
            raise StopIteration
        return item

    def __length_hint__(self) -> int:
        return operator.length_hint(self._iter) + len(self._buf)

    def _fill(self, n: int) -> bool:
        if n < 0:
            raise IndexError("peek index must not be negative")
        while len(self._buf) <= n:
            item = next(self._iter, _EMPTY)
            if item is _EMPTY:
                self._iter = iter(())
                return False
            self._buf.append(item)
        return True

    def peek(self, default: Any = None) -> Any:
        """Return the next element without consuming it, or ``default``."""
        return self.peek_nth(0, default)

    def peek_nth(self, n: int, default: Any = None) -> Any:
        """Return the element ``n`` places ahead, or ``default`` past the end."""
        return self._buf[n] if self._fill(n) else default

    def set_nth(self, n: int, value: T) -> None:
        """Replace the element ``n`` places ahead with ``value``.

        Raises :class:`IndexError` when there is no such element.
        """
        if not self._fill(n):
            raise IndexError("peek index out of range")
        self._buf[n] = value

    def next_if(self, func: Callable[[T], bool], default: Any = None) -> Any:
        """Consume and return the next element if ``func`` approves it.

        Otherwise leave it in place and return ``default``.
        """
        item = next(self, _EMPTY)
        if item is _EMPTY:
            return default
        if func(item):
            return item
        self._buf.appendleft(item)
        return default

    def next_if_eq(self, expected: Any, default: Any = None) -> Any:
        """Consume and return the next element if it equals ``expected``."""
        return self.next_if(lambda item: item == expected, default)

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next element if ``accept`` approves it.

        Raises :class:`StopIteration` when the iterator is exhausted or the
        element is rejected; a rejected element is not consumed.
        """
        item = self.peek(_EMPTY)
        if item is _EMPTY or not accept(item):
            raise StopIteration
        return next(self)

    def __repr__(self) -> str:
        return f"PeekNth(buf={list(self._buf)!r})"


def peek_nth(iterable: Iterable[T]) -> PeekNth[T]:
    """Create a :class:`PeekNth` over ``iterable``."""
    return PeekNth(iterable)