"""Peek at the next element before deciding whether to take it."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_EMPTY = object()


class Peekable(Generic[T]):
    """Iterator that can look at its next element without consuming it."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter = iter(iterable)
        self._peeked: Any = _EMPTY

    def __iter__(self) -> Peekable[T]:
        return self

    def __next__(self) -> T:
        if self._peeked is not _EMPTY:
            item, self._peeked = self._peeked, _EMPTY
            return item
        return next(self._iter)

    def __length_hint__(self) -> int:
        extra = 0 if self._peeked is _EMPTY else 1
        return operator.length_hint(self._iter) + extra

    def _fill(self) -> bool:
        if self._peeked is _EMPTY:
            item = next(self._iter, _EMPTY)
            if item is _EMPTY:
                self._iter = iter(())
                return False
            self._peeked = item
        return True

    def peek(self, default: Any = None) -> Any:
        """Return the next element without consuming it, or ``default``."""
        return self._peeked if self._fill() else default

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next element if ``accept`` approves it.

        Raises :class:`StopIteration` when the iterator is exhausted or the
        element is rejected; a rejected element stays in place.
        """
        if not self._fill() or not accept(self._peeked):
            raise StopIteration
        return next(self)

    def __repr__(self) -> str:
        peeked = None if self._peeked is _EMPTY else self._peeked
        return f"Peekable(peeked={peeked!r})"


class PeekingTakeWhile(Generic[T]):
    """Take elements while a predicate holds, leaving the first rejected one.

    The wrapped iterator must provide ``peeking_next``; the element that
    fails the predicate is not consumed from it.
    """

    def __init__(self, iterator: Any, predicate: Callable[[T], bool]) -> None:
        self._iter = iterator
        self._predicate = predicate

    def __iter__(self) -> PeekingTakeWhile[T]:
        return self

    def __next__(self) -> T:
        return self._iter.peeking_next(self._predicate)

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next element if both the predicate and ``accept``
        approve it; otherwise raise :class:`StopIteration`."""
        predicate = self._predicate
        return self._iter.peeking_next(lambda item: predicate(item) and accept(item))

    def __repr__(self) -> str:
        return f"PeekingTakeWhile(iter={self._iter!r})"


def peeking_take_while(
    iterator: Any, predicate: Callable[[T], bool]
) -> PeekingTakeWhile[T]:
    """Create a :class:`PeekingTakeWhile` over ``iterator``.

    Raises :class:`TypeError` if ``iterator`` cannot peek.
    """
    if not callable(getattr(iterator, "peeking_next", None)):
        raise TypeError(
            f"{type(iterator).__name__!r} object does not support peeking_next"
        )
    return PeekingTakeWhile(iterator, predicate)