"""Shape classifier: assign any source output to one of the six shapes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from assertify.shapes import (
    Nullish,
    OptionalAbsent,
    OptionalPresent,
    Plain,
    ResultFailure,
    ResultSuccess,
    Shape,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from assertify.capabilities import OptionalCapability, ResultCapability

__all__ = ['classify']


def classify(
    value: Any,
    *,
    results: Iterable[ResultCapability] | None = None,
    optionals: Iterable[OptionalCapability] | None = None,
) -> Shape:
    """Classify a raw value. Total: never raises for any input.

    First match wins:

    1. a recognised result container -> ResultSuccess / ResultFailure
    2. a recognised optional container -> OptionalPresent / OptionalAbsent
    3. None -> Nullish
    4. anything else -> Plain

    Args:
        value: The raw value (already resolved if it was awaitable).
        results: Result families to test, in order. Defaults to the active config.
        optionals: Optional families to test, in order. Defaults to the active config.

    Returns:
        The matching shape.

    Example:
        ```python
        from returns.maybe import Nothing
        from returns.result import Failure

        classify(Failure('boom'))
        # ResultFailure(error='boom')

        classify(Nothing)
        # OptionalAbsent()

        classify(0)
        # Plain(value=0)
        ```
    """
    if results is None or optionals is None:
        from assertify._config import get_config

        config = get_config()
        results = config.results if results is None else results
        optionals = config.optionals if optionals is None else optionals

    for family in results:
        if family.matches(value):
            if family.is_success(value):
                return ResultSuccess(family.value(value))
            return ResultFailure(family.error(value))

    for family in optionals:
        if family.matches(value):
            if family.is_present(value):
                return OptionalPresent(family.value(value))
            return OptionalAbsent()

    if value is None:
        return Nullish()
    return Plain(value)
