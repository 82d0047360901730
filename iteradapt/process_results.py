"""Run a function over the successful values of an iterable of results.

An item that is an :class:`Exception` instance counts as a failure; any other
item is a successful value.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class ProcessResults(Generic[T]):
    """Yield values until the first exception instance, which is recorded.

    The recorded exception is kept in :attr:`error`.
    """

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter = iter(iterable)
        self.error: Optional[Exception] = None

    def __iter__(self) -> ProcessResults[T]:
        return self

    def __next__(self) -> T:
        item = next(self._iter)
        if isinstance(item, Exception):
            self.error = item
            raise StopIteration
        return item

    def __repr__(self) -> str:
        return f"ProcessResults(error={self.error!r})"


def process_results(
    iterable: Iterable[Any], processor: Callable[[ProcessResults[T]], R]
) -> R:
    """Call ``processor`` with the values of ``iterable``.

    The processor sees values up to the first exception instance. If one was
    met, it is raised once the processor returns; otherwise the processor's
    result is returned.
    """
    values: ProcessResults[T] = ProcessResults(iterable)
    result = processor(values)
    if values.error is not None:
        raise values.error
    return result