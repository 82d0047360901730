"""An iterator that yields one element a fixed number of times."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

_EMPTY = object()


class RepeatN(Generic[T]):
    """Yield the same element ``n`` times; its length is always exact."""

    def __init__(self, element: T, n: int) -> None:
        if n < 0:
            raise ValueError("repeat count must not be negative")
        self._n = n
        self._element = element if n > 0 else _EMPTY

    def __iter__(self) -> RepeatN[T]:
        return self

    def __reversed__(self) -> RepeatN[T]:
        return self

    def __len__(self) -> int:
        return self._n

    def __next__(self) -> T:
        if self._n > 1:
            self._n -= 1
            return self._element
        self._n = 0
        element, self._element = self._element, _EMPTY
        if element is _EMPTY:
            raise StopIteration
        return element

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next element if ``accept`` approves it.

        Raises :class:`StopIteration` when the iterator is exhausted or the
        element is rejected; a rejected element is not consumed.
        """
        if self._element is _EMPTY or not accept(self._element):
            raise StopIteration
        return next(self)

    def __repr__(self) -> str:
        element = None if self._element is _EMPTY else self._element
        return f"RepeatN(element={element!r}, n={self._n})"


def repeat_n(element: T, n: int) -> RepeatN[T]:
    """Create an iterator yielding ``element`` exactly ``n`` times."""
    return RepeatN(element, n)