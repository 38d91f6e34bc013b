"""Method-style wrappers around the free-function combinators.

``FallibleOption`` and ``FallibleIterable`` hold a container and expose the
combinators as methods, for call sites that read better as a chain:

    FallibleIterable(lines).try_map(parse).collect()
    FallibleOption(user.nickname).try_map(validate_nickname)

Every method delegates to the module-level function of the same name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fallible_map import extraction as _extraction
from fallible_map import iterator as _iterator
from fallible_map import option as _option
from fallible_map.extraction import ExtractOption

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from fallible_map.iterator import FallibleMapIterator
    from fallible_map.result import Result

__all__ = ["FallibleIterable", "FallibleOption"]


@dataclass(frozen=True, slots=True)
class FallibleOption[T](ExtractOption[T]):
    """An optional value with fallible combinators attached."""

    value: T | None = None

    def extract(self) -> T | None:
        """Return the wrapped value as a plain optional."""
        return self.value

    def is_some(self) -> bool:
        return self.value is not None

    def is_none(self) -> bool:
        return self.value is None

    def extract_or(self, fallback: T) -> T:
        return _extraction.extract_or(self, fallback)

    def extract_or_else(self, fallback: Callable[[], T]) -> T:
        return _extraction.extract_or_else(self, fallback)

    def try_map[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U | None, E]:
        return _option.try_map(self, f)

    def try_unwrap_or[U, E](self, f: Callable[[T], Result[U, E]], default: U) -> U:
        return _option.try_unwrap_or(self, f, default)

    def try_unwrap_or_else[E](
        self, fallback: Callable[[], Result[T, E]]
    ) -> Result[T, E]:
        return _option.try_unwrap_or_else(self, fallback)

    def try_and_then[U, E](
        self, f: Callable[[T], Result[U | None, E]]
    ) -> Result[U | None, E]:
        return _option.try_and_then(self, f)


class FallibleIterable[T]:
    """An iterable with fallible mapping attached."""

    __slots__ = ("_iterable",)

    def __init__(self, iterable: Iterable[T]):
        """Wrap ``iterable``; it is not consumed until a mapping runs."""
        self._iterable = iterable

    def __iter__(self) -> Iterator[T]:
        return iter(self._iterable)

    def try_map[U, E](
        self, f: Callable[[T], Result[U, E]]
    ) -> FallibleMapIterator[T, U, E]:
        """Return a lazy iterator of per-element results; see ``collect()``."""
        return _iterator.try_map_iter(self._iterable, f)

    def try_collect[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
        """Map ``f`` over every element, stopping at the first failure."""
        return _iterator.try_map(self._iterable, f)
