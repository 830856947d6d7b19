"""Assertion factory: direct, optional and result accessors over one source.

An assertion wraps a lookup/computation whose result may be missing and
exposes three uniform views of it:

- `assertion(*args)` returns the value or raises the error.
- `assertion.optional(*args)` returns `Some(value)` or `Nothing`.
- `assertion.result(*args)` returns `Success(value)` or `Failure(error)`.

The source may return a plain value, None, an optional container, a result
container, or an awaitable of any of those. Awaitable sources make every
accessor return a coroutine; synchronous sources never do.

Example:
    ```python
    from assertify import create_assertion

    users = {1: {'name': 'Ada'}}
    get_user = create_assertion(users.get, lambda uid: KeyError(uid))

    get_user(1)           # {'name': 'Ada'}
    get_user(2)           # raises KeyError(2)
    get_user.optional(2)  # Nothing
    get_user.result(2)    # Failure(KeyError(2))
    ```
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any, overload

import wrapt

from assertify._config import AssertionConfig, get_config
from assertify._logging import get_logger
from assertify.classify import classify
from assertify.deferred import then
from assertify.errors import FailureValueError, default_error_factory
from assertify.shapes import OptionalPresent, Plain, ResultFailure, ResultSuccess, Shape

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ['Assertion', 'assertion', 'create_assertion']

logger = get_logger(__name__)


class Assertion[**P, T](wrapt.ObjectProxy):
    """Transparent proxy around a source computation with three accessors.

    Name, docstring and signature of the wrapped callable stay visible.
    Nothing is cached between calls: each access calls the source and, on
    absence, the error factory afresh with the exact call arguments.
    """

    def __init__(
        self,
        wrapped: Callable[P, T],
        error_factory: Callable[..., Any] | None = None,
        *,
        config: AssertionConfig | None = None,
    ) -> None:
        super().__init__(wrapped)
        self._self_error_factory = error_factory if error_factory is not None else default_error_factory
        self._self_config = config if config is not None else get_config()

    @property
    def error_factory(self) -> Callable[..., Any]:
        return self._self_error_factory

    @property
    def config(self) -> AssertionConfig:
        return self._self_config

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        bound = self.__wrapped__.__get__(instance, owner)
        return type(self)(bound, self._self_error_factory, config=self._self_config)

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> Any:
        """Direct accessor: the success value, or raise the failure error.

        Exception errors are raised as-is. Any other error value is raised
        inside FailureValueError.
        """
        convert = partial(self._unwrap_raw, args=args, kwargs=kwargs)
        return then(self.__wrapped__(*args, **kwargs), convert)

    def result(self, *args: P.args, **kwargs: P.kwargs) -> Any:
        """Result accessor: never raises for absence.

        Carried errors pass through untouched; every other kind of absence
        gets a fresh error from the error factory.
        """
        convert = partial(self._to_result, args=args, kwargs=kwargs)
        return then(self.__wrapped__(*args, **kwargs), convert)

    def optional(self, *args: P.args, **kwargs: P.kwargs) -> Any:
        """Optional accessor: never raises and never calls the error factory."""
        return then(self.__wrapped__(*args, **kwargs), self._to_optional)

    maybe = optional
    either = result

    # --- projections ---

    def _classify(self, raw: Any) -> Shape:
        config = self._self_config
        return classify(raw, results=config.results, optionals=config.optionals)

    def _to_result(self, raw: Any, *, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        family = self._self_config.result_family
        shape = self._classify(raw)
        match shape:
            case ResultSuccess(value=v) | OptionalPresent(value=v) | Plain(value=v):
                return family.success(v)
            case ResultFailure(error=e):
                self._log_absent(shape, 'result')
                return family.failure(e)
            case _:
                self._log_absent(shape, 'result')
                return family.failure(self._self_error_factory(*args, **kwargs))

    def _to_optional(self, raw: Any) -> Any:
        family = self._self_config.optional_family
        shape = self._classify(raw)
        match shape:
            case ResultSuccess(value=v):
                return family.from_nullable(v)
            case OptionalPresent(value=v) | Plain(value=v):
                return family.present(v)
            case ResultFailure(error=e):
                if self._self_config.logging_enabled:
                    logger.debug(
                        'assertion.error_discarded',
                        function=self._source_name(),
                        error=repr(e),
                    )
                self._log_absent(shape, 'optional')
                return family.absent()
            case _:
                self._log_absent(shape, 'optional')
                return family.absent()

    def _unwrap_raw(self, raw: Any, *, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        family = self._self_config.result_family
        container = self._to_result(raw, args=args, kwargs=kwargs)
        if family.is_success(container):
            return family.value(container)
        error = family.error(container)
        if isinstance(error, BaseException):
            raise error
        raise FailureValueError(error)

    # --- logging ---

    def _source_name(self) -> str:
        return getattr(self.__wrapped__, '__qualname__', None) or repr(self.__wrapped__)

    def _log_absent(self, shape: Shape, accessor: str) -> None:
        if self._self_config.logging_enabled:
            logger.debug(
                'assertion.absent',
                function=self._source_name(),
                accessor=accessor,
                shape=type(shape).__name__,
            )


def create_assertion[**P, T](
    func: Callable[P, T],
    error_factory: Callable[P, Any] | None = None,
    *,
    config: AssertionConfig | None = None,
) -> Assertion[P, T]:
    """Build an Assertion around func.

    Args:
        func: The source computation. May be sync or async.
        error_factory: Called with the original arguments to build the error
            for absence that carries none. Defaults to AssertionFailedError.
        config: Container families and logging. Defaults to the process config.

    Returns:
        The Assertion proxy.
    """
    return Assertion(func, error_factory, config=config)


@overload
def assertion[**P, T](func: Callable[P, T], /) -> Assertion[P, T]: ...


@overload
def assertion[**P, T](
    func: None = None,
    /,
    *,
    error_factory: Callable[..., Any] | None = None,
    config: AssertionConfig | None = None,
) -> Callable[[Callable[P, T]], Assertion[P, T]]: ...


def assertion(
    func: Callable[..., Any] | None = None,
    /,
    *,
    error_factory: Callable[..., Any] | None = None,
    config: AssertionConfig | None = None,
) -> Any:
    """Decorator form of create_assertion.

    Can be used with or without arguments:
        @assertion
        def find(): ...

        @assertion(error_factory=lambda key: KeyError(key))
        def lookup(key): ...
    """

    def decorate(f: Callable[..., Any]) -> Assertion[..., Any]:
        return create_assertion(f, error_factory, config=config)

    if func is not None:
        return decorate(func)
    return decorate
