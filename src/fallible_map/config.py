"""Configuration schema and resolution for fallible-map.

Two layers, mirroring how the settings flow at runtime:
- ``Settings`` is the Pydantic wall: field types, defaults and coercion.
- ``FrozenConfig`` is the immutable payload the combinators read.

Resolution precedence is ``defaults < .env < env < overrides``. Only
``FALLIBLE_MAP_*`` keys are read, and a ``.env`` file is only consulted by an
explicit ``resolve_config()`` or ``config_scope()`` call. The implicit lookup
the combinators use never touches the filesystem and never raises.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from fallible_map.errors import HINTS, ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)

ENV_PREFIX = "FALLIBLE_MAP_"

# --- Schema (Pydantic wall) ---


class Settings(BaseModel):
    """Pydantic schema for configuration validation and defaults."""

    validate_results: bool = False
    debug: bool = False

    model_config = {"extra": "ignore"}


@cache
def _default_settings() -> dict[str, Any]:
    return Settings().model_dump()


# --- Immutable runtime payload ---


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable configuration read by the combinators.

    Attributes:
        validate_results: Check transformation and factory arguments up front.
        debug: Emit DEBUG log records for short-circuits and absorbed errors.
    """

    validate_results: bool = False
    debug: bool = False


# --- Loading ---


def _select_fields(source: Mapping[str, str | None]) -> dict[str, str]:
    """Pick known ``FALLIBLE_MAP_*`` keys, keyed by lowercase field name.

    Values stay as strings; coercion is left to ``Settings``.
    """
    known = set(Settings.model_fields)
    config: dict[str, str] = {}
    for key, value in source.items():
        if value is None or not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        if field_name in known:
            config[field_name] = value.strip()
    return config


def load_env() -> dict[str, str]:
    """Return config values from ``FALLIBLE_MAP_*`` environment variables."""
    return _select_fields(os.environ)


def load_dotenv_file() -> dict[str, str]:
    """Return config values from a ``.env`` file found from the working directory.

    The file is parsed, not loaded: ``os.environ`` is left untouched and keys
    outside the ``FALLIBLE_MAP_`` prefix are ignored.
    """
    from dotenv import dotenv_values, find_dotenv

    path = find_dotenv(usecwd=True)
    if not path:
        return {}
    return _select_fields(dotenv_values(path))


# --- Public resolution API ---


def resolve_config(
    overrides: Mapping[str, Any] | None = None, *, dotenv: bool = True
) -> FrozenConfig:
    """Resolve configuration from defaults, ``.env``, environment and overrides.

    Args:
        overrides: Programmatic values; they win over the environment.
        dotenv: Whether to read a ``.env`` file from the working directory.

    Returns:
        A validated ``FrozenConfig``.

    Raises:
        ConfigurationError: If a value fails schema validation.
    """
    file_values = load_dotenv_file() if dotenv else {}
    merged = {
        **_default_settings(),
        **file_values,
        **load_env(),
        **(overrides or {}),
    }
    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        hint = HINTS["env_bool"] if err.get("type", "").startswith("bool") else None
        raise ConfigurationError(
            f"Configuration validation failed for {field!r}: {err.get('msg')}",
            hint=hint,
        ) from e

    return FrozenConfig(
        validate_results=settings.validate_results,
        debug=settings.debug,
    )


@cache
def _env_config() -> FrozenConfig:
    try:
        return resolve_config(dotenv=False)
    except ConfigurationError as e:
        log.warning("Ignoring invalid fallible-map environment config: %s", e)
        return FrozenConfig()


def clear_config_cache() -> None:
    """Forget the cached environment configuration."""
    _env_config.cache_clear()


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "fallible_map_config", default=None
)


def current_config() -> FrozenConfig:
    """Return the ambient config, or the cached environment config.

    Invalid environment values fall back to defaults with a warning, so this
    never raises.
    """
    cfg = _AMBIENT.get()
    return cfg if cfg is not None else _env_config()


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | FrozenConfig | None = None,
    **overrides: object,
) -> Generator[FrozenConfig]:
    """Run a block with a specific configuration.

    The scope is held in a ``ContextVar``, so it is local to the current
    thread or task and restored on exit.

    Example:
        with config_scope(debug=True):
            try_map(values, parse)
    """
    if isinstance(cfg_or_overrides, FrozenConfig):
        cfg = cfg_or_overrides
    else:
        cfg = resolve_config({**(cfg_or_overrides or {}), **overrides})

    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)
