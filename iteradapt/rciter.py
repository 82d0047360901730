"""Handles that share one underlying iterator."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class RcIter(Generic[T]):
    """An iterator handle; clones draw from the same underlying iterator."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter = iter(iterable)

    def __iter__(self) -> RcIter[T]:
        return self

    def __next__(self) -> T:
        return next(self._iter)

    def clone(self) -> RcIter[T]:
        """Return a new handle on the same underlying iterator."""
        return RcIter(self._iter)

    def __repr__(self) -> str:
        return f"RcIter({self._iter!r})"


def rciter(iterable: Iterable[T]) -> RcIter[T]:
    """Wrap ``iterable`` in a shareable :class:`RcIter`."""
    return RcIter(iterable)