"""Tests for container capability adapters."""

from __future__ import annotations

import pytest
from returns.io import IO, IOFailure, IOSuccess
from returns.maybe import Nothing, Some
from returns.result import Failure, Success

from assertify import (
    AssertionConfig,
    ReturnsIOResult,
    ReturnsMaybe,
    ReturnsResult,
    RustStyleOption,
    RustStyleResult,
    create_assertion,
)
from assertify.capabilities import SupportsOkErr, SupportsSomeNone
from tests.containers import Empty, Err, Just, Ok


class TestReturnsResult:
    def test_matches(self):
        family = ReturnsResult()
        assert family.matches(Success(1))
        assert family.matches(Failure(1))
        assert not family.matches(Some(1))
        assert not family.matches(Ok(1))

    def test_inspect(self):
        family = ReturnsResult()
        assert family.is_success(Success(1))
        assert not family.is_success(Failure('e'))
        assert family.value(Success(1)) == 1
        assert family.error(Failure('e')) == 'e'

    def test_build(self):
        family = ReturnsResult()
        assert family.can_construct
        assert family.success(1) == Success(1)
        assert family.failure('e') == Failure('e')


class TestReturnsIOResult:
    def test_matches(self):
        family = ReturnsIOResult()
        assert family.matches(IOSuccess(1))
        assert family.matches(IOFailure('e'))
        assert not family.matches(Success(1))
        assert not family.matches(IO(1))

    def test_inspect_unwraps_io(self):
        family = ReturnsIOResult()
        assert family.is_success(IOSuccess(1))
        assert not family.is_success(IOFailure('e'))
        assert family.value(IOSuccess(1)) == 1
        assert family.error(IOFailure('e')) == 'e'

    def test_build(self):
        family = ReturnsIOResult()
        assert family.success(1) == IOSuccess(1)
        assert family.failure('e') == IOFailure('e')

    def test_as_output_family(self):
        config = AssertionConfig(results=(ReturnsIOResult(), ReturnsResult()))
        check = create_assertion(lambda x: x, config=config)
        assert check.result(1) == IOSuccess(1)
        assert check.result(Failure('e')) == IOFailure('e')


class TestReturnsMaybe:
    def test_matches(self):
        family = ReturnsMaybe()
        assert family.matches(Some(1))
        assert family.matches(Nothing)
        assert not family.matches(Success(1))
        assert not family.matches(None)

    def test_inspect(self):
        family = ReturnsMaybe()
        assert family.is_present(Some(None))
        assert not family.is_present(Nothing)
        assert family.value(Some(2)) == 2

    def test_build(self):
        family = ReturnsMaybe()
        assert family.present(None) == Some(None)
        assert family.absent() == Nothing
        assert family.from_nullable(None) == Nothing
        assert family.from_nullable(0) == Some(0)


class TestRustStyle:
    def test_protocols(self):
        assert isinstance(Ok(1), SupportsOkErr)
        assert isinstance(Err(1), SupportsOkErr)
        assert not isinstance(Just(1), SupportsOkErr)
        assert isinstance(Just(1), SupportsSomeNone)
        assert isinstance(Empty(), SupportsSomeNone)
        assert not isinstance(Success(1), SupportsOkErr)

    def test_classify_only_by_default(self):
        results = RustStyleResult()
        options = RustStyleOption()
        assert not results.can_construct
        assert not options.can_construct
        with pytest.raises(TypeError, match='ok constructor'):
            results.success(1)
        with pytest.raises(TypeError, match='err constructor'):
            results.failure(1)
        with pytest.raises(TypeError, match='some constructor'):
            options.present(1)
        with pytest.raises(TypeError, match='none factory'):
            options.absent()

    def test_inspect(self):
        results = RustStyleResult()
        assert results.is_success(Ok(1))
        assert results.value(Ok(1)) == 1
        assert results.error(Err('e')) == 'e'
        options = RustStyleOption()
        assert options.is_present(Just(1))
        assert not options.is_present(Empty())
        assert options.value(Just(1)) == 1

    def test_as_output_family(self):
        config = AssertionConfig(
            results=(RustStyleResult(ok=Ok, err=Err), ReturnsResult()),
            optionals=(RustStyleOption(some=Just, none=Empty), ReturnsMaybe()),
        )
        check = create_assertion(lambda x: Success(x) if x else Failure('zero'), config=config)
        assert check.result(1) == Ok(1)
        assert check.result(0) == Err('zero')
        assert check.optional(1) == Just(1)
        assert check.optional(0) == Empty()
        assert check(1) == 1

    def test_from_nullable(self):
        options = RustStyleOption(some=Just, none=Empty)
        assert options.from_nullable(None) == Empty()
        assert options.from_nullable(0) == Just(0)

    def test_container_classes_not_matched(self):
        assert not RustStyleResult().matches(Ok)
        assert not RustStyleResult().matches(Err)
        assert not RustStyleOption().matches(Just)
        assert not RustStyleOption().matches(Empty)
