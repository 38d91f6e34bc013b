"""Fallible combinators over optional values.

Each combinator takes an optional container and a transformation that
returns a ``Result``. Absence is never an error: it short-circuits to a
successful empty result without calling the transformation.

Example:
    def parse_port(raw: str) -> Result[int, str]:
        return Success(int(raw)) if raw.isdigit() else Failure(f"bad port {raw!r}")

    try_map(os.environ.get("PORT"), parse_port)
    # Success(None) when unset, Success(8080) or Failure("bad port ...") otherwise
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fallible_map._contracts import (
    check_factory,
    check_transform,
    ensure_result,
    reject_non_result,
    trace,
)
from fallible_map.extraction import extract
from fallible_map.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable

    from fallible_map.extraction import ExtractOption
    from fallible_map.result import Result

__all__ = ["try_and_then", "try_map", "try_unwrap_or", "try_unwrap_or_else"]

log = logging.getLogger(__name__)


def try_map[T, U, E](
    container: ExtractOption[T] | T | None,
    f: Callable[[T], Result[U, E]],
) -> Result[U | None, E]:
    """Map a fallible function over an optional value.

    Args:
        container: The optional value.
        f: Transformation invoked once with the value, if there is one.

    Returns:
        ``Success(None)`` when absent, ``Success(u)`` when ``f`` succeeds, or
        the ``Failure`` returned by ``f``.
    """
    check_transform(f, operation="try_map")
    value = extract(container)
    if value is None:
        return Success(None)

    match f(value):
        case Success(value=mapped):
            return Success(mapped)
        case Failure() as failure:
            return failure
        case other:
            raise reject_non_result(other, operation="try_map")


def try_unwrap_or[T, U, E](
    container: ExtractOption[T] | T | None,
    f: Callable[[T], Result[U, E]],
    default: U,
) -> U:
    """Map a fallible function over an optional value, falling back to ``default``.

    Both absence and failure resolve to ``default``; the error from ``f`` is
    discarded. Use ``try_map`` when the error matters.
    """
    check_transform(f, operation="try_unwrap_or")
    value = extract(container)
    if value is None:
        return default

    match f(value):
        case Success(value=mapped):
            return mapped
        case Failure(error=err):
            trace(log, "try_unwrap_or absorbed failure %r, using default", err)
            return default
        case other:
            raise reject_non_result(other, operation="try_unwrap_or")


def try_unwrap_or_else[T, E](
    container: ExtractOption[T] | T | None,
    fallback: Callable[[], Result[T, E]],
) -> Result[T, E]:
    """Return the contained value, or compute a fallible fallback.

    ``fallback`` is only called when the container is empty, and its result
    is returned as-is, failures included.
    """
    check_factory(fallback, operation="try_unwrap_or_else")
    value = extract(container)
    if value is not None:
        return Success(value)
    return ensure_result(fallback(), operation="try_unwrap_or_else")


def try_and_then[T, U, E](
    container: ExtractOption[T] | T | None,
    f: Callable[[T], Result[U | None, E]],
) -> Result[U | None, E]:
    """Chain a fallible computation that may itself produce no value.

    The optional returned inside ``f``'s result is passed through directly, so
    the output is never nested: ``Success(None)`` from ``f`` stays
    ``Success(None)``.
    """
    check_transform(f, operation="try_and_then")
    value = extract(container)
    if value is None:
        return Success(None)
    return ensure_result(f(value), operation="try_and_then")
