"""Classification variants for source computation outputs.

Every value a source computation can return is classified into exactly one
of six shapes. Three mean "has value" and three mean "no value":

    has value:  Plain(v)   OptionalPresent(v)   ResultSuccess(v)
    no value:   Nullish()  OptionalAbsent()     ResultFailure(e)

The union is closed, so projections dispatch with `match`:

    >>> from assertify.shapes import Plain, ResultFailure
    >>> match shape:
    ...     case ResultFailure(error=e):
    ...         handle(e)
    ...     case Plain(value=v):
    ...         use(v)
"""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'Nullish',
    'OptionalAbsent',
    'OptionalPresent',
    'Plain',
    'ResultFailure',
    'ResultSuccess',
    'Shape',
]


class Nullish(msgspec.Struct, frozen=True):
    """Raw `None` returned by the source."""

    @property
    def has_value(self) -> bool:
        return False


class Plain(msgspec.Struct, frozen=True):
    """Any non-None value that is not a recognised container.

    Attributes:
        value: The raw value.
    """

    value: Any

    @property
    def has_value(self) -> bool:
        return True


class OptionalPresent(msgspec.Struct, frozen=True):
    """Optional container holding a value.

    Attributes:
        value: The unwrapped value.
    """

    value: Any

    @property
    def has_value(self) -> bool:
        return True


class OptionalAbsent(msgspec.Struct, frozen=True):
    """Empty optional container."""

    @property
    def has_value(self) -> bool:
        return False


class ResultSuccess(msgspec.Struct, frozen=True):
    """Result container on the success branch.

    Attributes:
        value: The unwrapped success value.
    """

    value: Any

    @property
    def has_value(self) -> bool:
        return True


class ResultFailure(msgspec.Struct, frozen=True):
    """Result container on the failure branch.

    Attributes:
        error: The carried error, untouched.
    """

    error: Any

    @property
    def has_value(self) -> bool:
        return False


Shape = Nullish | Plain | OptionalPresent | OptionalAbsent | ResultSuccess | ResultFailure
"""Closed union of every classification outcome."""
