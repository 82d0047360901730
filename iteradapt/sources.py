"""Iterators that produce elements from a state rather than another iterator."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, Optional, TypeVar

S = TypeVar("S")
T = TypeVar("T")


class Unfold(Generic[S, T]):
    """Iterator driven by a state and a step function.

    ``f(state)`` returns either ``None`` to signal the end or a pair
    ``(item, next_state)``. The current state is kept in :attr:`state`.
    The iterator is not fused: every call to ``next`` calls ``f`` again.
    """

    def __init__(
        self, initial_state: S, f: Callable[[S], Optional[tuple[T, S]]]
    ) -> None:
        self.state = initial_state
        self._f = f

    def __iter__(self) -> Unfold[S, T]:
        return self

    def __next__(self) -> T:
        step = self._f(self.state)
        if step is None:
            raise StopIteration
        item, self.state = step
        return item

    def __repr__(self) -> str:
        return f"Unfold(state={self.state!r})"


def unfold(
    initial_state: S, f: Callable[[S], Optional[tuple[T, S]]]
) -> Unfold[S, T]:
    """Create an :class:`Unfold` iterator from a state and a step function."""
    return Unfold(initial_state, f)


class Iterate(Generic[S]):
    """Infinite iterator yielding ``x``, ``f(x)``, ``f(f(x))`` and so on.

    The following value is computed before the current one is returned, so
    an error in ``f`` surfaces one step early.
    """

    def __init__(self, initial_value: S, f: Callable[[S], S]) -> None:
        self._state = initial_value
        self._f = f

    def __iter__(self) -> Iterator[S]:
        return self

    def __next__(self) -> S:
        next_state = self._f(self._state)
        current, self._state = self._state, next_state
        return current

    def __repr__(self) -> str:
        return f"Iterate(state={self._state!r})"


def iterate(initial_value: S, f: Callable[[S], S]) -> Iterate[S]:
    """Create an :class:`Iterate` iterator that repeatedly applies ``f``."""
    return Iterate(initial_value, f)