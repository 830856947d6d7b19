"""Assertion error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'DEFAULT_ERROR_MESSAGE',
    'AssertionFailed',
    'AssertionFailedError',
    'FailureValueError',
    'default_error_factory',
]

DEFAULT_ERROR_MESSAGE = 'Assertion failed'


class AssertionFailed(msgspec.Struct, frozen=True, gc=False):
    """Source produced no value - struct variant for Result[T, AssertionFailed]."""

    message: str = DEFAULT_ERROR_MESSAGE

    def to_exception(self) -> AssertionFailedError:
        """Convert to exception for raise-based code."""
        return AssertionFailedError(self.message)


class AssertionFailedError(AssertionError):
    """Source produced no value - exception variant."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGE) -> None:
        self.message = message
        super().__init__(message)

    def to_struct(self) -> AssertionFailed:
        """Convert to struct for Result-based code."""
        return AssertionFailed(self.message)


class FailureValueError(Exception):
    """Failure carried a value that is not an exception and cannot be raised.

    Attributes:
        error: The failure value, untouched.
    """

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f'Assertion failed with non-exception error: {error!r}')


def default_error_factory(*args: Any, **kwargs: Any) -> AssertionFailedError:
    """Build a fresh generic assertion error, ignoring the call arguments."""
    return AssertionFailedError()
