"""Assertion configuration: container families, logging level, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from assertify._logging import configure_logging
from assertify.capabilities import (
    OptionalCapability,
    ResultCapability,
    ReturnsIOResult,
    ReturnsMaybe,
    ReturnsResult,
    RustStyleOption,
    RustStyleResult,
)

__all__ = [
    'AssertionConfig',
    'get_config',
    'init',
    'reset',
]

_log = logging.getLogger(__name__)

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _default_results() -> tuple[ResultCapability, ...]:
    return (ReturnsResult(), ReturnsIOResult(), RustStyleResult())


def _default_optionals() -> tuple[OptionalCapability, ...]:
    return (ReturnsMaybe(), RustStyleOption())


@dataclass(frozen=True)
class AssertionConfig:
    """Configuration captured by every assertion at construction.

    Attributes:
        results: Result families recognised on input, in test order. The first
            one builds the values returned by the result accessor.
        optionals: Optional families recognised on input, in test order. The
            first one builds the values returned by the optional accessor.
        log_level: Logging level (e.g., "DEBUG"). None = silent.
    """

    results: tuple[ResultCapability, ...] = field(default_factory=_default_results)
    optionals: tuple[OptionalCapability, ...] = field(default_factory=_default_optionals)
    log_level: str | None = None

    def __post_init__(self) -> None:
        if not self.results or not self.results[0].can_construct:
            msg = f'First result family must be able to build values, got {self.results!r}'
            raise ValueError(msg)
        if not self.optionals or not self.optionals[0].can_construct:
            msg = f'First optional family must be able to build values, got {self.optionals!r}'
            raise ValueError(msg)

    @property
    def result_family(self) -> ResultCapability:
        """Family used to build result accessor output."""
        return self.results[0]

    @property
    def optional_family(self) -> OptionalCapability:
        """Family used to build optional accessor output."""
        return self.optionals[0]

    @property
    def logging_enabled(self) -> bool:
        return self.log_level is not None


# Process default (set by init())
_config: AssertionConfig | None = None


def _detect_log_level() -> str | None:
    """Read ASSERTIFY_LOG_LEVEL from the environment.

    Unknown values are reported and ignored.
    """
    env_level = os.environ.get('ASSERTIFY_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        _log.warning("Unknown ASSERTIFY_LOG_LEVEL value '%s', logging stays off", env_level)
        return None
    return env_level


def init(
    results: tuple[ResultCapability, ...] | None = None,
    optionals: tuple[OptionalCapability, ...] | None = None,
    log_level: str | None = None,
) -> AssertionConfig:
    """Install the process default configuration.

    Assertions created afterwards without an explicit config pick it up.
    Assertions created earlier keep the config they captured, including its
    log level: a function decorated with @assertion at import time stays
    silent after a later init(log_level="DEBUG"). Call init() before those
    imports, or pass config= explicitly.

    Args:
        results: Result families. Defaults to returns Result, returns IOResult, then Rust-style.
        optionals: Optional families. Defaults to returns, then Rust-style.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            ASSERTIFY_LOG_LEVEL if None; None there too = silent.

    Returns:
        The AssertionConfig that was set.

    Example:
        ```python
        from result import Err, Ok
        from assertify import RustStyleResult, init

        # Emit debug events for absent values
        init(log_level="DEBUG")

        # Build Ok/Err instead of Success/Failure
        init(results=(RustStyleResult(ok=Ok, err=Err),))
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    _config = AssertionConfig(
        results=results if results is not None else _default_results(),
        optionals=optionals if optionals is not None else _default_optionals(),
        log_level=resolved_level,
    )

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> AssertionConfig:
    """Get the process default configuration.

    Returns:
        The config installed by init(), or a fresh default one.
    """
    if _config is None:
        return AssertionConfig()
    return _config


def reset() -> None:
    """Drop the installed default so get_config() returns a fresh one."""
    global _config  # noqa: PLW0603
    _config = None
