"""Merge two sorted iterables, optionally joining equal elements."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from iteradapt.either import Both, Left, Right

T = TypeVar("T")

_EMPTY = object()

_Step = Callable[[Any, Any], "tuple[Any, Any, Any]"]


def _identity(item: Any) -> Any:
    return item


def _merge_steps(
    left_it: Iterator[Any],
    right_it: Iterator[Any],
    step: _Step,
    wrap_left: Callable[[Any], Any],
    wrap_right: Callable[[Any], Any],
) -> Iterator[Any]:
    left_done = right_done = False
    left: Any = _EMPTY
    right: Any = _EMPTY
    while True:
        if left is _EMPTY and not left_done:
            left = next(left_it, _EMPTY)
            left_done = left is _EMPTY
        if right is _EMPTY and not right_done:
            right = next(right_it, _EMPTY)
            right_done = right is _EMPTY
        if left is _EMPTY:
            if right is _EMPTY:
                return
            value, right = right, _EMPTY
            yield wrap_right(value)
        elif right is _EMPTY:
            value, left = left, _EMPTY
            yield wrap_left(value)
        else:
            left, right, result = step(left, right)
            yield result


def _pick_by(is_first: Callable[[Any, Any], bool]) -> _Step:
    def step(left: Any, right: Any) -> tuple[Any, Any, Any]:
        if is_first(left, right):
            return _EMPTY, right, left
        return left, _EMPTY, right

    return step


def merge(first: Iterable[T], second: Iterable[T]) -> Iterator[T]:
    """Merge two iterables in ascending order.

    If both are sorted, so is the result. On ties the element from
    ``first`` comes first.
    """
    return _merge_steps(
        iter(first),
        iter(second),
        _pick_by(lambda a, b: a <= b),
        _identity,
        _identity,
    )


def merge_by(
    first: Iterable[T], second: Iterable[T], is_first: Callable[[T, T], bool]
) -> Iterator[T]:
    """Merge two iterables, taking from ``first`` whenever
    ``is_first(a, b)`` is true for the two heads ``a`` and ``b``."""
    return _merge_steps(
        iter(first), iter(second), _pick_by(is_first), _identity, _identity
    )


def _join_step(cmp_fn: Callable[[Any, Any], Any]) -> _Step:
    def step(left: Any, right: Any) -> tuple[Any, Any, Any]:
        result = cmp_fn(left, right)
        if isinstance(result, bool):
            if result:
                return _EMPTY, right, Left(left)
            return left, _EMPTY, Right(right)
        if result < 0:
            return _EMPTY, right, Left(left)
        if result > 0:
            return left, _EMPTY, Right(right)
        return _EMPTY, _EMPTY, Both(left, right)

    return step


def merge_join_by(
    left: Iterable[Any], right: Iterable[Any], cmp_fn: Callable[[Any, Any], Any]
) -> Iterator[Any]:
    """Merge-join two iterables.

    ``cmp_fn(l, r)`` returns either an ordering as a number (negative when
    ``l`` comes first, positive when ``r`` comes first, zero when they
    match) or a bool (true when ``l`` comes first). Orderings yield
    :class:`Left`, :class:`Right` or :class:`Both`; bools never yield
    :class:`Both`. Leftover elements of either side are yielded as
    :class:`Left` or :class:`Right`.
    """
    return _merge_steps(iter(left), iter(right), _join_step(cmp_fn), Left, Right)