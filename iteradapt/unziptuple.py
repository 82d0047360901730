"""Split an iterable of tuples into one list per column."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def multiunzip(iterable: Iterable[Iterable[Any]], arity: int) -> tuple[list[Any], ...]:
    """Consume tuples of ``arity`` elements and return ``arity`` lists.

    The ``i``-th list holds the ``i``-th element of every tuple. Raises
    :class:`ValueError` if a tuple has a different length.
    """
    if arity < 0:
        raise ValueError("arity must not be negative")
    columns: tuple[list[Any], ...] = tuple([] for _ in range(arity))
    for row in iterable:
        values = tuple(row)
        if len(values) != arity:
            raise ValueError(f"expected a tuple of {arity} elements, got {len(values)}")
        for column, value in zip(columns, values):
            column.append(value)
    return columns