"""Capability contracts for optional and result containers.

The assertion core never depends on a concrete container type. It talks to
containers through two small protocols:

- `ResultCapability`: recognise, inspect and build success/failure values.
- `OptionalCapability`: recognise, inspect and build present/absent values.

Three families ship with the package:

- `ReturnsResult` / `ReturnsMaybe` for the `returns` library. These are the
  default output families.
- `ReturnsIOResult` for `returns.io.IOResult` (`IOSuccess`/`IOFailure`). A
  `FutureResult` is awaitable and resolves to one of these, so it is covered
  once awaited. Values and errors come out of the `IO` wrapper on inspection.
- `RustStyleResult` / `RustStyleOption` for any object exposing the Rust-like
  method set (`is_ok`/`is_err`/`unwrap`/`unwrap_err` and
  `is_some`/`is_none`/`unwrap`). They classify out of the box and build
  values once given constructors.

Uses PEP 695 type parameter syntax (Python 3.12+).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from returns.io import IOFailure, IOResult, IOSuccess
from returns.maybe import Maybe, Nothing, Some
from returns.pipeline import is_successful
from returns.result import Failure, Result, Success
from returns.unsafe import unsafe_perform_io

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'OptionalCapability',
    'ResultCapability',
    'ReturnsIOResult',
    'ReturnsMaybe',
    'ReturnsResult',
    'RustStyleOption',
    'RustStyleResult',
    'SupportsOkErr',
    'SupportsSomeNone',
]


class ResultCapability(Protocol):
    """Protocol for a success/failure container family."""

    @property
    @abstractmethod
    def can_construct(self) -> bool:
        """Whether `success`/`failure` are available."""
        ...

    @abstractmethod
    def matches(self, value: Any) -> bool:
        """Return True if value belongs to this family."""
        ...

    @abstractmethod
    def is_success(self, container: Any) -> bool:
        """Return True for the success branch."""
        ...

    @abstractmethod
    def value(self, container: Any) -> Any:
        """Unwrap the success value. Only valid on the success branch."""
        ...

    @abstractmethod
    def error(self, container: Any) -> Any:
        """Unwrap the carried error. Only valid on the failure branch."""
        ...

    @abstractmethod
    def success(self, value: Any) -> Any:
        """Build a success container."""
        ...

    @abstractmethod
    def failure(self, error: Any) -> Any:
        """Build a failure container."""
        ...


class OptionalCapability(Protocol):
    """Protocol for a present/absent container family."""

    @property
    @abstractmethod
    def can_construct(self) -> bool:
        """Whether `present`/`absent`/`from_nullable` are available."""
        ...

    @abstractmethod
    def matches(self, value: Any) -> bool:
        """Return True if value belongs to this family."""
        ...

    @abstractmethod
    def is_present(self, container: Any) -> bool:
        """Return True when the container holds a value."""
        ...

    @abstractmethod
    def value(self, container: Any) -> Any:
        """Unwrap the held value. Only valid when present."""
        ...

    @abstractmethod
    def present(self, value: Any) -> Any:
        """Build a present container around value, even if it is None."""
        ...

    @abstractmethod
    def absent(self) -> Any:
        """Build an absent container."""
        ...

    @abstractmethod
    def from_nullable(self, value: Any) -> Any:
        """Build absent for None, present otherwise."""
        ...


# --- returns ---


class ReturnsResult:
    """`returns.result.Result` family: `Success(v)` / `Failure(e)`."""

    __slots__ = ()

    can_construct = True

    def matches(self, value: Any) -> bool:
        return isinstance(value, Result)

    def is_success(self, container: Result[Any, Any]) -> bool:
        return is_successful(container)

    def value(self, container: Result[Any, Any]) -> Any:
        return container.unwrap()

    def error(self, container: Result[Any, Any]) -> Any:
        return container.failure()

    def success(self, value: Any) -> Result[Any, Any]:
        return Success(value)

    def failure(self, error: Any) -> Result[Any, Any]:
        return Failure(error)

    def __repr__(self) -> str:
        return 'ReturnsResult()'


class ReturnsIOResult:
    """`returns.io.IOResult` family: `IOSuccess(v)` / `IOFailure(e)`."""

    __slots__ = ()

    can_construct = True

    def matches(self, value: Any) -> bool:
        return isinstance(value, IOResult)

    def is_success(self, container: IOResult[Any, Any]) -> bool:
        return is_successful(container)

    def value(self, container: IOResult[Any, Any]) -> Any:
        return unsafe_perform_io(container.unwrap())

    def error(self, container: IOResult[Any, Any]) -> Any:
        return unsafe_perform_io(container.failure())

    def success(self, value: Any) -> IOResult[Any, Any]:
        return IOSuccess(value)

    def failure(self, error: Any) -> IOResult[Any, Any]:
        return IOFailure(error)

    def __repr__(self) -> str:
        return 'ReturnsIOResult()'


class ReturnsMaybe:
    """`returns.maybe.Maybe` family: `Some(v)` / `Nothing`."""

    __slots__ = ()

    can_construct = True

    def matches(self, value: Any) -> bool:
        return isinstance(value, Maybe)

    def is_present(self, container: Maybe[Any]) -> bool:
        return is_successful(container)

    def value(self, container: Maybe[Any]) -> Any:
        return container.unwrap()

    def present(self, value: Any) -> Maybe[Any]:
        return Some(value)

    def absent(self) -> Maybe[Any]:
        return Nothing

    def from_nullable(self, value: Any) -> Maybe[Any]:
        return Maybe.from_optional(value)

    def __repr__(self) -> str:
        return 'ReturnsMaybe()'


# --- Rust-style duck types ---


@runtime_checkable
class SupportsOkErr(Protocol):
    """Method set shared by Rust-style Ok/Err types."""

    def is_ok(self) -> bool: ...

    def is_err(self) -> bool: ...

    def unwrap(self) -> Any: ...

    def unwrap_err(self) -> Any: ...


@runtime_checkable
class SupportsSomeNone(Protocol):
    """Method set shared by Rust-style Some/None types."""

    def is_some(self) -> bool: ...

    def is_none(self) -> bool: ...

    def unwrap(self) -> Any: ...


class RustStyleResult:
    """Any object implementing `SupportsOkErr`.

    Args:
        ok: Constructor for the success branch. Required to use as output family.
        err: Constructor for the failure branch. Required to use as output family.

    Example:
        ```python
        from result import Err, Ok

        RustStyleResult(ok=Ok, err=Err)
        ```
    """

    __slots__ = ('_err', '_ok')

    def __init__(
        self,
        ok: Callable[[Any], Any] | None = None,
        err: Callable[[Any], Any] | None = None,
    ) -> None:
        self._ok = ok
        self._err = err

    @property
    def can_construct(self) -> bool:
        return self._ok is not None and self._err is not None

    def matches(self, value: Any) -> bool:
        # Classes defining the methods also pass runtime_checkable checks
        return not isinstance(value, type) and isinstance(value, SupportsOkErr)

    def is_success(self, container: SupportsOkErr) -> bool:
        return container.is_ok()

    def value(self, container: SupportsOkErr) -> Any:
        return container.unwrap()

    def error(self, container: SupportsOkErr) -> Any:
        return container.unwrap_err()

    def success(self, value: Any) -> Any:
        if self._ok is None:
            msg = 'RustStyleResult was created without an ok constructor'
            raise TypeError(msg)
        return self._ok(value)

    def failure(self, error: Any) -> Any:
        if self._err is None:
            msg = 'RustStyleResult was created without an err constructor'
            raise TypeError(msg)
        return self._err(error)

    def __repr__(self) -> str:
        return f'RustStyleResult(ok={self._ok!r}, err={self._err!r})'


class RustStyleOption:
    """Any object implementing `SupportsSomeNone`.

    Args:
        some: Constructor for the present branch.
        none: Factory for the absent branch (called with no arguments).
    """

    __slots__ = ('_none', '_some')

    def __init__(
        self,
        some: Callable[[Any], Any] | None = None,
        none: Callable[[], Any] | None = None,
    ) -> None:
        self._some = some
        self._none = none

    @property
    def can_construct(self) -> bool:
        return self._some is not None and self._none is not None

    def matches(self, value: Any) -> bool:
        return not isinstance(value, type) and isinstance(value, SupportsSomeNone)

    def is_present(self, container: SupportsSomeNone) -> bool:
        return container.is_some()

    def value(self, container: SupportsSomeNone) -> Any:
        return container.unwrap()

    def present(self, value: Any) -> Any:
        if self._some is None:
            msg = 'RustStyleOption was created without a some constructor'
            raise TypeError(msg)
        return self._some(value)

    def absent(self) -> Any:
        if self._none is None:
            msg = 'RustStyleOption was created without a none factory'
            raise TypeError(msg)
        return self._none()

    def from_nullable(self, value: Any) -> Any:
        return self.absent() if value is None else self.present(value)

    def __repr__(self) -> str:
        return f'RustStyleOption(some={self._some!r}, none={self._none!r})'
