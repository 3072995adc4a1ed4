"""@safe and @safe_async decorators: turn raised exceptions into Err."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from optres._logging import get_logger
from optres.types.propagate import Propagate
from optres.types.result import Err, Ok

__all__ = ['safe', 'safe_async']

logger = get_logger(__name__)

_DEFAULT_CATCH: tuple[type[Exception], ...] = (Exception,)


def _captured(function: str, exc: BaseException) -> Err[BaseException]:
    logger.debug('exception_captured', function=function, error_type=type(exc).__name__)
    return Err(exc)


def _bailed(function: str, p: Propagate) -> Any:
    logger.debug('propagate_caught', function=function)
    return p.value


def _sync_guard(catch: tuple[type[BaseException], ...]) -> Any:
    @wrapt.decorator
    def guard(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        try:
            value = wrapped(*args, **kwargs)
        except Propagate as p:
            return _bailed(wrapped.__qualname__, p)
        except catch as e:
            return _captured(wrapped.__qualname__, e)
        return Ok(value)

    return guard


def _async_guard(catch: tuple[type[BaseException], ...]) -> Any:
    @wrapt.decorator
    async def guard(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        try:
            value = await wrapped(*args, **kwargs)
        except Propagate as p:
            return _bailed(wrapped.__qualname__, p)
        except catch as e:
            return _captured(wrapped.__qualname__, e)
        return Ok(value)

    return guard


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Wrap a function so it returns Ok(value) or Err(exception).

    Exceptions listed in ``exceptions`` (default ``(Exception,)``) become
    Err; anything else propagates. A ``.bail()`` inside the body returns
    the bailed Err or Nothing as-is, the same as under @result. Coroutine
    functions are detected and awaited.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)  # Ok(value=5.0)
        divide(10, 0)  # Err(error=ZeroDivisionError('division by zero'))

        @safe(exceptions=(KeyError,))
        def lookup(table: dict[str, int], key: str) -> int:
            return table[key]
        ```
    """
    catch = exceptions if exceptions is not None else _DEFAULT_CATCH

    def decorate(f: Callable[..., Any]) -> Any:
        if inspect.iscoroutinefunction(f):
            return _async_guard(catch)(f)
        return _sync_guard(catch)(f)

    if func is not None:
        return decorate(func)
    return decorate


@overload
def safe_async[**P, T](func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_async[**P, T, E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Ok[T] | Err[E]]]]: ...


def safe_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async-only form of @safe.

    Raises:
        TypeError: If the decorated callable is not a coroutine function.
    """
    catch = exceptions if exceptions is not None else _DEFAULT_CATCH

    def decorate(f: Callable[..., Awaitable[Any]]) -> Any:
        if not inspect.iscoroutinefunction(f):
            raise TypeError(f'safe_async() requires a coroutine function, got {f!r}')
        return _async_guard(catch)(f)

    if func is not None:
        return decorate(func)
    return decorate
