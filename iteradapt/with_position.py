"""Tag each element with its position: first, middle, last or only."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")

_EMPTY = object()


class Position(enum.Enum):
    """Where an element sits in the sequence."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    ONLY = "only"


def with_position(iterable: Iterable[T]) -> Iterator[tuple[Position, T]]:
    """Yield ``(position, item)`` pairs for each element of ``iterable``."""
    it = iter(iterable)
    current = next(it, _EMPTY)
    if current is _EMPTY:
        return
    following = next(it, _EMPTY)
    if following is _EMPTY:
        yield Position.ONLY, current
        return
    yield Position.FIRST, current
    current = following
    for following in it:
        yield Position.MIDDLE, current
        current = following
    yield Position.LAST, current