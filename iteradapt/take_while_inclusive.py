"""Take elements while a predicate holds, including the first failing one."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def take_while_inclusive(
    iterable: Iterable[T], predicate: Callable[[T], bool]
) -> Iterator[T]:
    """Yield elements while ``predicate`` is true, then the first for which
    it is false, and stop."""
    for item in iterable:
        keep_going = predicate(item)
        yield item
        if not keep_going:
            return