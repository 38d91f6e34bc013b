"""Pytest configuration and fixtures.

Provides environment isolation, config cache resets and small test doubles
for observing how combinators invoke caller-supplied callables.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import logging
import os
from typing import Any

import pytest

from fallible_map.config import clear_config_cache
from fallible_map.result import Failure, Success

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class RecordingTransform:
    """Transformation test double that logs every argument it receives.

    Fails on values listed in ``fail_on`` and doubles everything else, so the
    invocation log shows exactly where a combinator stopped.
    """

    fail_on: tuple[Any, ...] = ()
    calls: list[Any] = field(default_factory=list)

    def __call__(self, value: Any) -> Success[Any] | Failure[str]:
        self.calls.append(value)
        if value in self.fail_on:
            return Failure(f"fail:{value}")
        return Success(value * 2)

    @property
    def call_count(self) -> int:
        return len(self.calls)


@dataclass
class CountingFactory:
    """Zero-argument factory test double that counts its invocations."""

    result: Any = None
    calls: int = 0

    def __call__(self) -> Any:
        self.calls += 1
        return self.result


@pytest.fixture
def recording_transform() -> RecordingTransform:
    return RecordingTransform()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.dotenv_values", lambda *_args, **_kwargs: {}, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_env(request, monkeypatch):
    """Clear FALLIBLE_MAP_* variables and the cached config for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith("FALLIBLE_MAP_"):
                monkeypatch.delenv(key, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_library_logging():
    """Keep library DEBUG records out of test output unless a test asks."""
    logging.getLogger("fallible_map").setLevel(logging.WARNING)
