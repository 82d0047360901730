"""Arithmetic on ``(lower, upper)`` size hints.

A size hint is a pair ``(lower, upper)`` where ``lower`` is a lower bound on
the number of remaining items and ``upper`` is an upper bound or ``None`` when
the bound is unknown. Bounds live in the range of a 64-bit unsigned counter:
lower bounds saturate at :data:`USIZE_MAX`, upper bounds that would exceed it
become ``None``.
"""

from __future__ import annotations

USIZE_MAX = 2**64 - 1

SizeHint = tuple[int, "int | None"]


def _saturate(value: int) -> int:
    return min(max(value, 0), USIZE_MAX)


def _checked(value: int) -> int | None:
    return value if value <= USIZE_MAX else None


def add(a: SizeHint, b: SizeHint) -> SizeHint:
    """Add two size hints."""
    low = _saturate(a[0] + b[0])
    if a[1] is not None and b[1] is not None:
        high = _checked(a[1] + b[1])
    else:
        high = None
    return low, high


def add_scalar(hint: SizeHint, x: int) -> SizeHint:
    """Add ``x`` to both bounds of a size hint."""
    low, high = hint
    return _saturate(low + x), None if high is None else _checked(high + x)


def sub_scalar(hint: SizeHint, x: int) -> SizeHint:
    """Subtract ``x`` from both bounds of a size hint, stopping at zero."""
    low, high = hint
    return max(low - x, 0), None if high is None else max(high - x, 0)


def mul(a: SizeHint, b: SizeHint) -> SizeHint:
    """Multiply two size hints."""
    low = _saturate(a[0] * b[0])
    a_high, b_high = a[1], b[1]
    if a_high is not None and b_high is not None:
        high = _checked(a_high * b_high)
    elif a_high == 0 or b_high == 0:
        high = 0
    else:
        high = None
    return low, high


def mul_scalar(hint: SizeHint, x: int) -> SizeHint:
    """Multiply both bounds of a size hint by ``x``."""
    low, high = hint
    return _saturate(low * x), None if high is None else _checked(high * x)


def maximum(a: SizeHint, b: SizeHint) -> SizeHint:
    """Size hint of whichever of two sequences is longer."""
    low = max(a[0], b[0])
    if a[1] is not None and b[1] is not None:
        high = max(a[1], b[1])
    else:
        high = None
    return low, high


def minimum(a: SizeHint, b: SizeHint) -> SizeHint:
    """Size hint of whichever of two sequences is shorter."""
    low = min(a[0], b[0])
    if a[1] is not None and b[1] is not None:
        high = min(a[1], b[1])
    else:
        high = a[1] if a[1] is not None else b[1]
    return low, high