"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from optres.errors import UnwrapError
from optres.types.propagate import Propagate

if TYPE_CHECKING:
    from optres.types.option import NothingType, Some

__all__ = ['Err', 'Ok', 'Result', 'collect']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def __enter__(self) -> T:
        """Context manager entry - returns the contained value."""
        return self.value

    def __exit__(self, *_: object) -> None:
        """Context manager exit - no cleanup needed."""

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the contained value satisfies the predicate."""
        return pred(self.value)

    def is_err_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise an exception since this is Ok.

        Raises:
            UnwrapError: Always, since Ok has no error to unwrap.
        """
        raise UnwrapError(f'Called unwrap_err on Ok: {self.value!r}', self)

    def expect_err(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message since this is Ok."""
        raise UnwrapError(f'{msg}: {self.value!r}', self)

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def ok(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from optres.types.option import Some

        return Some(self.value)

    def err(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Ok."""
        from optres.types.option import Nothing

        return Nothing

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the contained value, ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, default: Callable[[Any], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the contained value without calling default."""
        return f(self.value)

    def map_err[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the contained value and return self unchanged."""
        f(self.value)
        return self

    def inspect_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_[U, E](self, other: Ok[U] | Err[E]) -> Ok[U] | Err[E]:
        """Return other if self is Ok, else return self (Err).

        Since this is Ok, returns other.
        """
        return other

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_[F](self, _other: Ok[T] | Err[F]) -> Ok[T]:
        """Return self if Ok, else return other.

        Since this is Ok, returns self.
        """
        return self

    def or_else[F](self, _f: Callable[[Any], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def zip[U, E](self, other: Ok[U] | Err[E]) -> Ok[tuple[T, U]] | Err[E]:
        """Combine two Ok values into a tuple.

        If both are Ok, returns Ok((self.value, other.value)).
        If either is Err, returns the first Err.
        """
        if isinstance(other, Ok):
            return Ok((self.value, other.value))
        return other

    def flatten[U, E](self: Ok[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].

        Raises:
            TypeError: If the contained value is not a Result.
        """
        inner = self.value
        if isinstance(inner, Ok | Err):
            return inner
        raise TypeError(f'flatten() requires Result[Result[T, E], E], got {self!r}')

    def transpose[U](self: Ok[Some[U] | NothingType]) -> Some[Ok[U]] | NothingType:
        """Transpose a Result of an Option into an Option of a Result.

        Ok(Some(v)) becomes Some(Ok(v)) and Ok(Nothing) becomes Nothing.

        Raises:
            TypeError: If the contained value is not an Option.
        """
        from optres.types.option import NothingType, Some

        inner = self.value
        if isinstance(inner, Some):
            return Some(Ok(inner.value))
        if isinstance(inner, NothingType):
            return inner
        raise TypeError(f'transpose() requires Result[Option[T], E], got {self!r}')

    def bail(self) -> T:
        """Return the contained value (no-op for Ok).

        This is the equivalent of Rust's ? operator. For Ok, it just
        returns the value. For Err, it would raise Propagate.
        """
        return self.value

    def unwrap_or_return(self) -> T:
        """Alias for bail(). Return the contained value."""
        return self.value


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated.

    Examples:
        >>> err = Err("something went wrong")
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def __enter__(self) -> NoReturn:
        """Context manager entry - raises Propagate for Err."""
        raise Propagate(self)

    def __exit__(self, *_: object) -> None:
        """Context manager exit - never called since __enter__ raises."""

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def is_ok_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since this is Err."""
        return False

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """Return True if the contained error satisfies the predicate."""
        return pred(self.error)

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            UnwrapError: Always, since Err has no Ok value to unwrap.
        """
        raise UnwrapError(f'Called unwrap on Err: {self.error!r}', self)

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(f'{msg}: {self.error!r}', self)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a default value from the error.

        Args:
            f: Function that takes the error and returns a fallback value.
        """
        return f(self.error)

    def ok(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Err."""
        from optres.types.option import Nothing

        return Nothing

    def err(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        from optres.types.option import Some

        return Some(self.error)

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default since there's no Ok value to map."""
        return default

    def map_or_else[T, U](self, default: Callable[[E], U], _f: Callable[[T], U]) -> U:
        """Compute the default from the error.

        Args:
            default: Function that takes the error and returns a fallback.
            _f: Ignored mapping function.
        """
        return default(self.error)

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def inspect[T](self, _f: Callable[[T], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call f with the contained error and return self unchanged."""
        f(self.error)
        return self

    def and_[U](self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_[T, F](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since this is Err."""
        return other

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def zip[U](self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def transpose(self) -> Some[Err[E]]:
        """Transpose Err(e) into Some(Err(e))."""
        from optres.types.option import Some

        return Some(self)

    def bail(self) -> NoReturn:
        """Raise Propagate to propagate this error up the call stack.

        This is the equivalent of Rust's ? operator. When used inside
        a function decorated with @result, the error will be caught
        and returned.

        Raises:
            Propagate: Always, containing this Err.
        """
        raise Propagate(self)

    def unwrap_or_return(self) -> NoReturn:
        """Alias for bail(). Raise Propagate to propagate this error."""
        raise Propagate(self)


type Result[T, E = Exception] = Ok[T] | Err[E]


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err("fail"), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
