"""Extraction of values from optional containers.

An optional container is either a plain ``T | None`` or an instance of
``ExtractOption``. Only explicit subclasses and registered types count as
containers; any other value is the contained value itself, even if it happens
to define an ``extract`` method of its own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["ExtractOption", "extract", "extract_or", "extract_or_else"]


class ExtractOption[T](ABC):
    """Base class for containers that may hold a single value.

    Subclass it, or call ``ExtractOption.register(cls)`` for a third-party
    type whose ``extract()`` takes no arguments and returns ``T | None``.
    """

    __slots__ = ()

    @abstractmethod
    def extract(self) -> T | None:
        """Return the contained value, or None when empty."""


def extract[T](container: ExtractOption[T] | T | None) -> T | None:
    """Return the inner value of ``container`` as a plain optional."""
    if isinstance(container, ExtractOption):
        return container.extract()
    return container


def extract_or[T](container: ExtractOption[T] | T | None, fallback: T) -> T:
    """Return the contained value, or ``fallback`` when absent."""
    value = extract(container)
    return fallback if value is None else value


def extract_or_else[T](
    container: ExtractOption[T] | T | None, fallback: Callable[[], T]
) -> T:
    """Return the contained value, or call ``fallback`` when absent.

    ``fallback`` is invoked at most once and only when there is no value.
    """
    value = extract(container)
    return fallback() if value is None else value
