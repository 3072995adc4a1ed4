"""@result decorator for catching Propagate exceptions."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar

import wrapt

from optres._logging import get_logger
from optres.types.propagate import Propagate

__all__ = ['result']

P = ParamSpec('P')
R = TypeVar('R')

logger = get_logger(__name__)


def result(
    func: Callable[P, R] | Callable[P, Awaitable[R]],
) -> Callable[P, R] | Callable[P, Awaitable[R]]:
    """Decorator that catches Propagate exceptions for .bail() support.

    When a function decorated with @result calls .bail() on an Err or
    Nothing, the Propagate exception is caught and that Err or Nothing is
    returned. This enables Rust-like ? operator semantics for both Result-
    and Option-returning functions.

    Automatically detects async functions and handles them appropriately.

    Args:
        func: The function to wrap. Must return a Result or an Option.

    Returns:
        A wrapped function that catches Propagate and returns the carried value.

    Example:
        ```python
        @result
        def process(x: int) -> Result[int, str]:
            value = get_value(x).bail()  # Returns Err early if get_value fails
            return Ok(value * 2)

        @result
        def first_even(xs: list[int]) -> Option[int]:
            head = from_nullable(xs[0] if xs else None).bail()
            return Some(head).filter(lambda x: x % 2 == 0)
        ```
    """
    if inspect.iscoroutinefunction(func):

        @wrapt.decorator
        async def async_wrapper(
            wrapped: Callable[P, Awaitable[R]],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> R:
            try:
                return await wrapped(*args, **kwargs)
            except Propagate as p:
                logger.debug('propagate_caught', function=wrapped.__qualname__)
                return p.value

        return async_wrapper(func)  # type: ignore[return-value]

    @wrapt.decorator
    def sync_wrapper(
        wrapped: Callable[P, R],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> R:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            logger.debug('propagate_caught', function=wrapped.__qualname__)
            return p.value

    return sync_wrapper(func)  # type: ignore[return-value]
