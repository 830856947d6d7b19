"""Deferred threading: run a conversion inline or as a continuation on an awaitable.

Synchronous sources never get wrapped, asynchronous ones always do:

    then(3, str)            # '3'
    await then(coro(), str) # '3' once coro() resolves to 3
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, TypeGuard

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine

__all__ = ['is_deferred', 'then']


def is_deferred(value: Any) -> TypeGuard[Awaitable[Any]]:
    """Return True for coroutines, tasks, futures and any object with __await__."""
    return inspect.isawaitable(value)


def then[T, U](value: T | Awaitable[T], fn: Callable[[T], U]) -> U | Coroutine[Any, Any, U]:
    """Apply fn to value, or attach it as a continuation if value is awaitable.

    The awaitable is awaited exactly once. If fn raises, the returned coroutine
    raises the same exception when awaited.

    Args:
        value: A resolved value or an awaitable producing one.
        fn: Conversion to apply to the resolved value.

    Returns:
        fn(value) for plain values, otherwise a coroutine resolving to it.
    """
    if is_deferred(value):
        return _continue(value, fn)
    return fn(value)  # type: ignore[arg-type]


async def _continue[T, U](awaitable: Awaitable[T], fn: Callable[[T], U]) -> U:
    return fn(await awaitable)
