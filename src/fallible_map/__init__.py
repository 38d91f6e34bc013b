"""fallible-map: fallible mapping over optional values and iterables.

Public API:
    - try_map / try_unwrap_or / try_unwrap_or_else / try_and_then: combinators
      over optional values (``T | None`` or any ``ExtractOption``)
    - try_map_all / try_map_iter / collect: combinators over iterables
    - extract / extract_or / extract_or_else: plain value extraction
    - FallibleOption / FallibleIterable: method-style wrappers
    - Success / Failure / Result: the result type
"""

from __future__ import annotations

import logging

from fallible_map.adapters import FallibleIterable, FallibleOption
from fallible_map.config import FrozenConfig, config_scope, resolve_config
from fallible_map.errors import (
    ConfigurationError,
    ContractViolationError,
    FallibleMapError,
    UnwrapError,
)
from fallible_map.extraction import ExtractOption, extract, extract_or, extract_or_else
from fallible_map.iterator import FallibleMapIterator, collect, try_map_iter
from fallible_map.iterator import try_map as try_map_all
from fallible_map.option import (
    try_and_then,
    try_map,
    try_unwrap_or,
    try_unwrap_or_else,
)
from fallible_map.result import (
    Failure,
    Result,
    Success,
    is_failure,
    is_success,
    unwrap,
    unwrap_failure,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible-map")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible_map").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "ContractViolationError",
    "ExtractOption",
    "FallibleIterable",
    "FallibleMapError",
    "FallibleMapIterator",
    "FallibleOption",
    "Failure",
    "FrozenConfig",
    "Result",
    "Success",
    "UnwrapError",
    "collect",
    "config_scope",
    "extract",
    "extract_or",
    "extract_or_else",
    "is_failure",
    "is_success",
    "resolve_config",
    "try_and_then",
    "try_map",
    "try_map_all",
    "try_map_iter",
    "try_unwrap_or",
    "try_unwrap_or_else",
    "unwrap",
    "unwrap_failure",
]
