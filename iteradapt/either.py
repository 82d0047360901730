"""Values tagged as coming from the left side, the right side, or both."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True)
class Left(Generic[L]):
    """A value that came from the left side only."""

    value: L

    def into_inner(self) -> L:
        """Return the wrapped value."""
        return self.value


@dataclass(frozen=True)
class Right(Generic[R]):
    """A value that came from the right side only."""

    value: R

    def into_inner(self) -> R:
        """Return the wrapped value."""
        return self.value


@dataclass(frozen=True)
class Both(Generic[L, R]):
    """A pair of values, one from each side."""

    left: L
    right: R


Either = Union[Left, Right]
EitherOrBoth = Union[Left, Right, Both]