"""Exception hierarchy for fallible-map.

Caller errors travel through ``Failure`` values and are never raised. The
exceptions here only signal misuse of the library itself.
"""

from __future__ import annotations


class FallibleMapError(Exception):
    """Base exception for all fallible-map errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when one is attached."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class ConfigurationError(FallibleMapError):
    """Configuration validation or resolution failed."""


class UnwrapError(FallibleMapError):
    """A result was unwrapped as the wrong variant."""


class ContractViolationError(FallibleMapError):
    """A caller-supplied callable broke the combinator contract.

    Raised when a transformation returns something other than ``Success`` or
    ``Failure``, or (with ``validate_results`` enabled) when a combinator is
    handed something that cannot be called the way it will be called.
    """

    def __init__(
        self, message: str, *, operation: str, hint: str | None = None
    ) -> None:
        """Create a contract violation error.

        Args:
            message: Human-readable description of the broken contract.
            operation: Name of the combinator that detected it.
            hint: Optional actionable hint for resolution.
        """
        self.operation = operation
        super().__init__(f"[{operation}] {message}", hint=hint)


HINTS = {
    "return_result": (
        "Transformations must return fallible_map.Success(...) or "
        "fallible_map.Failure(...)"
    ),
    "callable": "Pass a function or lambda, not a precomputed value",
    "zero_arg": "Fallback factories are called with no arguments; wrap in a lambda",
    "env_bool": "Use 1/0, true/false, yes/no or on/off",
}
