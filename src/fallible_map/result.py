"""Success and failure values returned by fallible transformations.

A ``Result`` is either a ``Success`` carrying a value or a ``Failure``
carrying an error. The error type is whatever the caller chooses; the
library never inspects it.
"""

from __future__ import annotations

import dataclasses
import typing

from fallible_map.errors import UnwrapError

if typing.TYPE_CHECKING:
    from typing import TypeGuard

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure")


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess]:
    """A successful result."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TFailure]:
    """A failed result, containing the error."""

    error: TFailure


Result = Success[TSuccess] | Failure[TFailure]


def is_success[T, E](result: Result[T, E]) -> TypeGuard[Success[T]]:
    """Return True if ``result`` is a ``Success``."""
    return isinstance(result, Success)


def is_failure[T, E](result: Result[T, E]) -> TypeGuard[Failure[E]]:
    """Return True if ``result`` is a ``Failure``."""
    return isinstance(result, Failure)


def unwrap[T, E](result: Result[T, E]) -> T:
    """Return the success value.

    Raises:
        UnwrapError: If ``result`` is a ``Failure``.
    """
    if isinstance(result, Success):
        return result.value
    raise UnwrapError(f"Cannot unwrap value from failure: {result.error!r}")


def unwrap_failure[T, E](result: Result[T, E]) -> E:
    """Return the failure error.

    Raises:
        UnwrapError: If ``result`` is a ``Success``.
    """
    if isinstance(result, Failure):
        return result.error
    raise UnwrapError(f"Cannot unwrap error from success: {result.value!r}")
