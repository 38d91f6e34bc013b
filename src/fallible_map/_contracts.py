"""Internal contract checks shared by the combinators.

These helpers centralize how caller-supplied callables and their return
values are validated so error messages stay consistent across modules.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any

from fallible_map.config import current_config
from fallible_map.errors import HINTS, ContractViolationError
from fallible_map.result import Failure, Success


def _require(*, condition: bool, message: str, operation: str, hint: str) -> None:
    if not condition:
        raise ContractViolationError(message, operation=operation, hint=hint)


def check_transform(func: Any, *, operation: str) -> None:
    """Validate a one-argument transformation when validation is enabled."""
    if not current_config().validate_results:
        return
    _require(
        condition=callable(func),
        message=f"transformation must be callable, got {type(func).__name__}",
        operation=operation,
        hint=HINTS["callable"],
    )


def check_factory(func: Any, *, operation: str) -> None:
    """Validate a zero-argument factory when validation is enabled."""
    if not current_config().validate_results:
        return
    _require(
        condition=callable(func),
        message=f"fallback must be callable, got {type(func).__name__}",
        operation=operation,
        hint=HINTS["callable"],
    )

    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins have no introspectable signature
        return
    required = [
        p.name
        for p in sig.parameters.values()
        if p.default is p.empty
        and p.kind not in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
    ]
    if required:
        raise ContractViolationError(
            f"fallback must take no arguments, requires {', '.join(required)}",
            operation=operation,
            hint=HINTS["zero_arg"],
        )


def reject_non_result(value: object, *, operation: str) -> ContractViolationError:
    """Build the error for a callable that returned a non-result value."""
    return ContractViolationError(
        f"expected Success or Failure, got {type(value).__name__}: {value!r}",
        operation=operation,
        hint=HINTS["return_result"],
    )


def ensure_result[T, E](
    value: Success[T] | Failure[E], *, operation: str
) -> Success[T] | Failure[E]:
    """Return ``value`` unchanged if it is a result, otherwise raise."""
    if isinstance(value, (Success, Failure)):
        return value
    raise reject_non_result(value, operation=operation)


def trace(logger: logging.Logger, msg: str, *args: object) -> None:
    """Emit a DEBUG record for a combinator decision when ``debug`` is on."""
    if current_config().debug:
        logger.debug(msg, *args)
