"""Find the minimum and maximum of an iterable in one pass."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import astuple, dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")

_MISSING = object()


@dataclass(frozen=True)
class NoElements:
    """The iterable was empty."""

    def into_option(self) -> None:
        """Return ``None``: there is no minimum or maximum."""
        fields = astuple(self)
        return fields or None


@dataclass(frozen=True)
class OneElement(Generic[T]):
    """The iterable held a single element, both minimum and maximum."""

    value: T

    def into_option(self) -> tuple[T, T]:
        """Return ``(value, value)``."""
        return self.value, self.value


@dataclass(frozen=True)
class MinMax(Generic[T]):
    """The iterable held several elements; ``min`` is not larger than ``max``."""

    min: T
    max: T

    def into_option(self) -> tuple[T, T]:
        """Return ``(min, max)``."""
        return self.min, self.max


MinMaxResult = Union[NoElements, OneElement, MinMax]


def minmax_impl(
    iterable: Iterable[T],
    key_for: Callable[[T], Any],
    less_than: Callable[[T, T, Any, Any], bool],
) -> MinMaxResult:
    """Find the minimum and maximum using three comparisons per two elements.

    ``less_than(a, b, key_a, key_b)`` decides whether ``a`` orders before
    ``b``. Among equal elements the first minimum and the last maximum win.
    """
    it = iter(iterable)
    x = next(it, _MISSING)
    if x is _MISSING:
        return NoElements()
    y = next(it, _MISSING)
    if y is _MISSING:
        return OneElement(x)

    xk = key_for(x)
    yk = key_for(y)
    if not less_than(y, x, yk, xk):
        lo, hi, lo_key, hi_key = x, y, xk, yk
    else:
        lo, hi, lo_key, hi_key = y, x, yk, xk

    for first in it:
        second = next(it, _MISSING)
        if second is _MISSING:
            first_key = key_for(first)
            if less_than(first, lo, first_key, lo_key):
                lo = first
            elif not less_than(first, hi, first_key, hi_key):
                hi = first
            break
        first_key = key_for(first)
        second_key = key_for(second)
        if not less_than(second, first, second_key, first_key):
            small, small_key, big, big_key = first, first_key, second, second_key
        else:
            small, small_key, big, big_key = second, second_key, first, first_key
        if less_than(small, lo, small_key, lo_key):
            lo, lo_key = small, small_key
        if not less_than(big, hi, big_key, hi_key):
            hi, hi_key = big, big_key

    return MinMax(lo, hi)


def minmax(
    iterable: Iterable[T], key: Callable[[T], Any] | None = None
) -> MinMaxResult:
    """Return the minimum and maximum of ``iterable``, compared by ``key``."""
    key_for = key if key is not None else (lambda item: item)
    return minmax_impl(iterable, key_for, lambda _a, _b, ka, kb: ka < kb)