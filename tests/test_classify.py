"""Tests for the shape classifier."""

from __future__ import annotations

import pytest
from hypothesis import given
from returns.io import IOFailure, IOSuccess
from returns.maybe import Nothing, Some
from returns.result import Failure, Success

from assertify import (
    Nullish,
    OptionalAbsent,
    OptionalPresent,
    Plain,
    ResultFailure,
    ResultSuccess,
    ReturnsMaybe,
    ReturnsResult,
    RustStyleOption,
    RustStyleResult,
    classify,
    create_assertion,
)
from tests.containers import Empty, Err, Just, Ok
from tests.strategies import absent_outputs, present_outputs, source_outputs, values


class HybridContainer:
    """Object satisfying both the result and the optional method sets."""

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise AssertionError

    def unwrap_err(self):
        return 'hybrid error'

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False


class TestClassify:
    """Each input kind maps to exactly one shape."""

    @pytest.mark.parametrize(
        ('value', 'expected'),
        [
            (None, Nullish()),
            (0, Plain(0)),
            ('', Plain('')),
            (False, Plain(False)),
            ({'foo': 'bar'}, Plain({'foo': 'bar'})),
            (Some(1), OptionalPresent(1)),
            (Some(None), OptionalPresent(None)),
            (Nothing, OptionalAbsent()),
            (Success(1), ResultSuccess(1)),
            (Success(None), ResultSuccess(None)),
            (Failure('boom'), ResultFailure('boom')),
            (Ok(1), ResultSuccess(1)),
            (Err('boom'), ResultFailure('boom')),
            (Just(1), OptionalPresent(1)),
            (Empty(), OptionalAbsent()),
            (IOSuccess(1), ResultSuccess(1)),
            (IOFailure('boom'), ResultFailure('boom')),
            (Ok, Plain(Ok)),
            (Just, Plain(Just)),
            (HybridContainer, Plain(HybridContainer)),
        ],
    )
    def test_shapes(self, value, expected):
        assert classify(value) == expected

    def test_result_checked_before_optional(self):
        assert classify(HybridContainer()) == ResultFailure('hybrid error')

    def test_container_classes_are_plain(self):
        assert not RustStyleResult().matches(Ok)
        assert not RustStyleOption().matches(Just)
        assert RustStyleResult().matches(Ok(1))

    def test_unregistered_family_is_plain(self):
        shape = classify(Ok(1), results=(ReturnsResult(),), optionals=(ReturnsMaybe(),))
        assert shape == Plain(Ok(1))

    def test_family_order_respected(self):
        shape = classify(Just(2), results=(), optionals=(RustStyleOption(),))
        assert shape == OptionalPresent(2)

    def test_explicit_families_skip_config(self):
        shape = classify(Success(3), results=(RustStyleResult(),), optionals=())
        assert shape == Plain(Success(3))


class TestClassifyProperties:
    """Presence verdicts agree across every input kind."""

    @given(present_outputs)
    def test_present_outputs_have_value(self, output):
        assert classify(output).has_value

    @given(absent_outputs)
    def test_absent_outputs_have_no_value(self, output):
        assert not classify(output).has_value

    @given(values)
    def test_every_wrapper_unwraps_to_same_value(self, value):
        for wrapped in (value, Some(value), Success(value), Ok(value), Just(value)):
            shape = classify(wrapped)
            assert shape.value == value

    @given(source_outputs)
    def test_reclassifying_converted_shapes_is_stable(self, output):
        verdict = classify(output).has_value
        check = create_assertion(lambda: output)
        assert classify(check.optional()).has_value == verdict
        assert classify(check.result()).has_value == verdict
