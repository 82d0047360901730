"""Filter out elements that have already been seen."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def unique(iterable: Iterable[T]) -> Iterator[T]:
    """Yield each distinct element of ``iterable`` once, on first sight.

    Elements must be hashable.
    """
    seen: set[T] = set()
    for item in iterable:
        if item not in seen:
            seen.add(item)
            yield item


def unique_by(iterable: Iterable[T], key: Callable[[T], Hashable]) -> Iterator[T]:
    """Yield each element whose ``key`` has not been produced before.

    Of several elements sharing a key, only the first is yielded.
    """
    seen: set[Hashable] = set()
    for item in iterable:
        k = key(item)
        if k not in seen:
            seen.add(k)
            yield item