"""Contract tests: the method-style wrappers match the free functions."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st
import pytest

from fallible_map import iterator, option
from fallible_map.adapters import FallibleIterable, FallibleOption
from fallible_map.extraction import ExtractOption
from fallible_map.iterator import FallibleMapIterator
from fallible_map.result import Failure, Success
from tests.conftest import CountingFactory, RecordingTransform

pytestmark = [pytest.mark.unit, pytest.mark.contract]

optionals = st.one_of(st.none(), st.integers())


def _halve_even(x: int) -> Success[int] | Failure[str]:
    return Success(x // 2) if x % 2 == 0 else Failure(f"odd:{x}")


def _maybe_halve(x: int) -> Success[int | None] | Failure[str]:
    if x < 0:
        return Failure("negative")
    return Success(x // 2) if x % 2 == 0 else Success(None)


class TestFallibleOption:
    def test_is_an_extract_option(self) -> None:
        assert isinstance(FallibleOption(1), ExtractOption)
        assert FallibleOption(1).extract() == 1
        assert FallibleOption().extract() is None

    def test_presence_predicates(self) -> None:
        assert FallibleOption(0).is_some()
        assert not FallibleOption(0).is_none()
        assert FallibleOption(None).is_none()

    def test_is_immutable(self) -> None:
        opt = FallibleOption(1)
        with pytest.raises(AttributeError):
            opt.value = 2  # type: ignore[misc]

    @given(optionals)
    def test_try_map_matches_free_function(self, v: int | None) -> None:
        assert FallibleOption(v).try_map(_halve_even) == option.try_map(v, _halve_even)

    @given(optionals)
    def test_try_and_then_matches_free_function(self, v: int | None) -> None:
        assert FallibleOption(v).try_and_then(_maybe_halve) == option.try_and_then(
            v, _maybe_halve
        )

    @given(optionals, st.integers())
    def test_try_unwrap_or_matches_free_function(
        self, v: int | None, default: int
    ) -> None:
        assert FallibleOption(v).try_unwrap_or(
            _halve_even, default
        ) == option.try_unwrap_or(v, _halve_even, default)

    def test_try_unwrap_or_else(self) -> None:
        fallback = CountingFactory(result=Success(42))

        assert FallibleOption(2).try_unwrap_or_else(fallback) == Success(2)
        assert FallibleOption().try_unwrap_or_else(fallback) == Success(42)
        assert fallback.calls == 1

    def test_extract_helpers(self) -> None:
        fallback = CountingFactory(result=7)

        assert FallibleOption(1).extract_or(9) == 1
        assert FallibleOption().extract_or(9) == 9
        assert FallibleOption(1).extract_or_else(fallback) == 1
        assert FallibleOption().extract_or_else(fallback) == 7
        assert fallback.calls == 1

    def test_free_functions_accept_the_wrapper(self) -> None:
        assert option.try_map(FallibleOption(4), _halve_even) == Success(2)
        assert option.try_map(FallibleOption(), _halve_even) == Success(None)


class TestFallibleIterable:
    def test_try_map_is_lazy(self) -> None:
        f = RecordingTransform()

        it = FallibleIterable([1, 2]).try_map(f)

        assert isinstance(it, FallibleMapIterator)
        assert f.call_count == 0
        assert it.collect() == Success([2, 4])

    def test_try_map_collect_short_circuits(self) -> None:
        f = RecordingTransform(fail_on=(3,))

        result = FallibleIterable([1, 2, 3, 4, 5]).try_map(f).collect()

        assert result == Failure("fail:3")
        assert f.calls == [1, 2, 3]

    @given(st.lists(st.integers()))
    def test_try_collect_matches_free_function(self, xs: list[int]) -> None:
        assert FallibleIterable(xs).try_collect(_halve_even) == iterator.try_map(
            xs, _halve_even
        )

    def test_iterates_underlying_values(self) -> None:
        assert list(FallibleIterable((1, 2, 3))) == [1, 2, 3]
