"""Fallible mapping over iterables.

``try_map`` is the eager entry point: it visits elements in order and stops at
the first failure. ``try_map_iter`` is the lazy building block it is made of,
for callers who want to consume per-element results themselves.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fallible_map._contracts import check_transform, reject_non_result, trace
from fallible_map.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from fallible_map.result import Result

__all__ = ["FallibleMapIterator", "collect", "try_map", "try_map_iter"]

log = logging.getLogger(__name__)


class FallibleMapIterator[T, U, E]:
    """Lazy iterator yielding ``f(item)`` for each item of a source iterable.

    Nothing is evaluated until the iterator is advanced, and each step pulls
    exactly one item from the source.
    """

    __slots__ = ("_f", "_it")

    def __init__(self, iterable: Iterable[T], f: Callable[[T], Result[U, E]]):
        """Wrap ``iterable`` so each item is passed through ``f`` on demand."""
        self._it = iter(iterable)
        self._f = f

    def __iter__(self) -> FallibleMapIterator[T, U, E]:
        return self

    def __next__(self) -> Result[U, E]:
        return self._f(next(self._it))

    def collect(self) -> Result[list[U], E]:
        """Collapse the remaining items into a single result."""
        return collect(self)


def try_map_iter[T, U, E](
    iterable: Iterable[T], f: Callable[[T], Result[U, E]]
) -> FallibleMapIterator[T, U, E]:
    """Return a lazy iterator of per-element results."""
    check_transform(f, operation="try_map_iter")
    return FallibleMapIterator(iterable, f)


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of results, short-circuiting on the first failure.

    No further items are pulled from ``results`` once a failure is seen.

    Returns:
        ``Success`` with the values in order, or the first ``Failure``.
    """
    out: list[T] = []
    for index, result in enumerate(results):
        match result:
            case Success(value=value):
                out.append(value)
            case Failure():
                trace(log, "collect short-circuited at index %d", index)
                return result
            case _:
                raise reject_non_result(result, operation="collect")
    return Success(out)


def try_map[T, U, E](
    iterable: Iterable[T], f: Callable[[T], Result[U, E]]
) -> Result[list[U], E]:
    """Apply a fallible function to every element, in iteration order.

    Args:
        iterable: A finite iterable. Ordered inputs keep their order; for
            unordered collections the order is whatever iteration yields.
        f: Transformation applied to each element.

    Returns:
        ``Success`` with a list the same length as the input, or the first
        ``Failure``. Elements after a failure are never passed to ``f``.
    """
    check_transform(f, operation="try_map")
    return collect(FallibleMapIterator(iterable, f))
