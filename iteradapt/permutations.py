"""All ``k``-permutations of the elements of an iterable, in lexicographic order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import TypeVar

T = TypeVar("T")


def _advance(indices: list[int], cycles: list[int]) -> bool:
    """Step ``indices`` to the next permutation; return True when none is left."""
    n = len(indices)
    for i in reversed(range(len(cycles))):
        if cycles[i] == 0:
            cycles[i] = n - i - 1
            indices[i:] = indices[i + 1 :] + indices[i : i + 1]
        else:
            swap_index = n - cycles[i]
            indices[i], indices[swap_index] = indices[swap_index], indices[i]
            cycles[i] -= 1
            return False
    return True


def _permutations(it: Iterator[T], k: int) -> Iterator[list[T]]:
    if k == 0:
        yield []
        return

    vals = list(islice(it, k))
    if len(vals) < k:
        return
    yield vals[:k]

    # While the source is still being read, every new element completes the
    # permutations that keep the first k - 1 elements in place.
    for item in it:
        vals.append(item)
        yield vals[: k - 1] + [item]

    n = len(vals)
    indices = list(range(n))
    cycles = list(range(n - 1, n - k - 1, -1))
    for _ in range(n - k + 1):
        if _advance(indices, cycles):
            return
    yield [vals[i] for i in indices[:k]]

    while not _advance(indices, cycles):
        yield [vals[i] for i in indices[:k]]


def permutations(iterable: Iterable[T], k: int) -> Iterator[list[T]]:
    """Yield every ``k``-permutation of ``iterable`` as a list.

    The source is read lazily, one element per permutation while it lasts,
    so the first permutations are available even from an endless iterable.
    With ``k == 0`` a single empty list is yielded; with more than the
    number of elements, nothing is.
    """
    if k < 0:
        raise ValueError("permutation length must not be negative")
    return _permutations(iter(iterable), k)