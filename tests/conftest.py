"""Pytest configuration and shared fixtures for assertify tests."""

from __future__ import annotations

import pytest

from assertify._config import reset
from assertify._logging import clear_log_hooks

ID_EXISTING = 1
ID_NOT_EXISTING = 2
RESULT = {'foo': 'bar'}


class CustomError(Exception):
    """Error with an extra attribute, to check errors are passed through untouched."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.extra_property = ':)'


CUSTOM_ERROR = CustomError('Failure')
VALIDATION_ERROR = CustomError('Validation error')


def error_factory(*args, **kwargs) -> CustomError:
    return CUSTOM_ERROR


@pytest.fixture
def clean_state():
    """Drop installed config and log hooks around each test."""
    reset()
    clear_log_hooks()
    yield
    reset()
    clear_log_hooks()


@pytest.fixture
def calls() -> list[tuple[tuple, dict]]:
    """Recorder shared with the recording_factory fixture."""
    return []


@pytest.fixture
def recording_factory(calls):
    """Error factory that records every call and returns a fresh error."""

    def factory(*args, **kwargs):
        calls.append((args, kwargs))
        return CustomError(f'missing {args!r}')

    return factory
