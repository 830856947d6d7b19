"""Structured logging for assertify, confined to the `assertify` logger namespace.

assertify is a library, so it never touches the root logger or the global
structlog configuration of the host application:

- `get_logger` wraps a stdlib logger under `assertify.*` with a private
  structlog processor chain (`structlog.wrap_logger`), so a host's own
  `structlog.configure()` neither affects nor is affected by it.
- `configure_logging` installs one handler on the `assertify` logger, sets its
  level and decides whether records also propagate to the host's handlers.
  Calling it again replaces that handler instead of stacking another.

Log hooks see every assertify event dict regardless of level or handlers,
which is how tests and host code can observe absence events.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'LOGGER_NAME',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

LOGGER_NAME = 'assertify'

# Handler installed by configure_logging(), replaced on reconfiguration
_handler: logging.Handler | None = None


def _qualify(name: str | None) -> str:
    """Place name under the assertify namespace."""
    if not name or name == LOGGER_NAME:
        return LOGGER_NAME
    if name.startswith(f'{LOGGER_NAME}.'):
        return name
    return f'{LOGGER_NAME}.{name}'


def _event_processors() -> list[Any]:
    """Processor chain for assertify's structlog loggers."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _run_hooks,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _formatter(json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    return structlog.stdlib.ProcessorFormatter(
        # Plain stdlib records logged under assertify.*
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    propagate: bool = False,
) -> logging.Logger:
    """Send assertify events to stderr at the given level.

    Only the `assertify` logger is touched. Root handlers, the root level and
    any structlog configuration owned by the host stay as they were.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
        propagate: If True, records also reach the host's ancestor handlers.

    Returns:
        The configured `assertify` stdlib logger.
    """
    global _handler  # noqa: PLW0603

    package_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(_formatter(json_output))
    package_logger.addHandler(_handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = propagate
    return package_logger


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger under the assertify namespace.

    Args:
        name: Logger name, nested under `assertify` unless already there.

    Returns:
        A structlog BoundLogger over the stdlib logger of that name.
    """
    return structlog.wrap_logger(
        logging.getLogger(_qualify(name)),
        processors=_event_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook to be called for each assertify log entry.

    Args:
        hook: Callable that receives a copy of the log entry dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:
            pass  # Don't let hook failures break logging
    return event_dict
