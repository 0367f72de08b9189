"""Result type: Ok[T] | Err[E] for fallible operations."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from ferrum._internal.awaitables import completed, ensure_awaitable
from ferrum.errors import UnwrapError, safe_str
from ferrum.types._kind import RESULT_KIND
from ferrum.types.guards import assert_option, assert_result
from ferrum.types.option import Nothing, NothingType, Some, payloads_equal

if TYPE_CHECKING:
    from ferrum.types.option import Option

__all__ = ['AsyncResult', 'Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents a successful computation. Unlike ``Some``, the value may
    be ``None``: ``Ok()`` is the void success of an operation that has
    nothing to return.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(84)
        >>> Ok().unwrap() is None
        True
    """

    value: T = None  # type: ignore[assignment]

    __ferrum_kind__ = (RESULT_KIND, 'Ok')

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __str__(self) -> str:
        return f'Ok({self.value})'

    def __repr__(self) -> str:
        return f'Ok({self.value!r})'

    # --- Querying the variant ---

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return the predicate's verdict on the success value."""
        return predicate(self.value)

    def is_ok_and_async(self, predicate: Callable[[T], Awaitable[bool] | bool]) -> Awaitable[bool]:
        """Async version of is_ok_and; the predicate's awaitable is returned as is."""
        return ensure_awaitable(predicate(self.value))

    def is_err_and(self, predicate: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        """Return False without calling the predicate."""
        return False

    def is_err_and_async(self, predicate: Callable[[Any], Awaitable[bool] | bool]) -> Awaitable[bool]:  # noqa: ARG002
        """Return a completed awaitable of False."""
        return completed(False)

    # --- Extracting the success value ---

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Return the success value, ignoring the message."""
        return self.value

    def unwrap(self) -> T:
        """Return the success value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the success value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the success value without calling f."""
        return self.value

    def unwrap_or_else_async(self, f: Callable[[Any], Awaitable[T] | T]) -> Awaitable[T]:  # noqa: ARG002
        """Return a completed awaitable of the success value; f is not called."""
        return completed(self.value)

    def into_ok(self) -> T:
        """Return the success value of a Result known to be Ok."""
        return self.value

    # --- Extracting the error value ---

    def expect_err(self, msg: str) -> NoReturn:
        """Raise since this is Ok.

        Raises:
            UnwrapError: Always, with ``'{msg}: {value}'``.
        """
        raise UnwrapError(f'{msg}: {safe_str(self.value)}')

    def unwrap_err(self) -> NoReturn:
        """Raise since this is Ok.

        Raises:
            UnwrapError: Always, since Ok has no error to unwrap.
        """
        raise UnwrapError('Called `Result.unwrap_err()` on an `Ok` value')

    def into_err(self) -> NoReturn:
        """Raise since this is Ok."""
        raise UnwrapError('Called `Result.into_err()` on an `Ok` value')

    # --- Conversion to Option ---

    def ok(self) -> Option[T]:
        """Convert to Option, returning Some(value).

        A void success (``Ok(None)``) converts to Nothing.
        """
        if self.value is None:
            return Nothing
        return Some(self.value)

    def err(self) -> NothingType:
        """Return Nothing since this is Ok."""
        return Nothing

    def transpose[U](self: Ok[Option[U]]) -> Option[Result[U, Any]]:
        """Turn Ok(Some(v)) into Some(Ok(v)) and Ok(Nothing) into Nothing.

        Raises:
            NotAnOptionError: If the success value is not an Option.
        """
        inner = self.value
        assert_option(inner)
        if inner.is_some():
            return Some(Ok(inner.value))
        return Nothing

    # --- Transforming ---

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the success value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f.
        """
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since there's no error to map."""
        return self

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f applied to the success value."""
        return f(self.value)

    def map_or_else[U](self, default: Callable[[Any], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f applied to the success value; default is not called."""
        return f(self.value)

    def flatten[U, E](self: Ok[Result[U, E]]) -> Result[U, E]:
        """Remove one level of nesting: Ok(Ok(v)) becomes Ok(v).

        Raises:
            NotAResultError: If the success value is not a Result.
        """
        inner = self.value
        assert_result(inner)
        return inner

    # --- Boolean operators ---

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        """Return other since self is Ok."""
        assert_result(other)
        return other

    def and_then[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a fallible operation on the success value.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.

        Raises:
            NotAResultError: If f does not return a Result.
        """
        out = f(self.value)
        assert_result(out)
        return out

    def and_then_async[U, E](self, f: Callable[[T], Awaitable[Result[U, E]] | Result[U, E]]) -> AsyncResult[U, E]:
        """Async version of and_then.

        f is called immediately and the awaitable it returns is handed back
        unchanged.
        """
        return ensure_awaitable(f(self.value))

    def or_(self, other: Result[T, Any]) -> Ok[T]:
        """Return self since this is Ok."""
        assert_result(other)
        return self

    def or_else(self, f: Callable[[Any], Result[T, Any]]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def or_else_async(self, f: Callable[[Any], Awaitable[Result[T, Any]] | Result[T, Any]]) -> AsyncResult[T, Any]:  # noqa: ARG002
        """Return a completed awaitable of self; f is not called."""
        return completed(self)

    # --- Side effects, comparison and casts ---

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the success value and return self unchanged."""
        f(self.value)
        return self

    def inspect_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self without calling f."""
        return self

    def eq(self, other: Result[T, Any]) -> bool:
        """Return True if other is Ok with an equal value."""
        assert_result(other)
        return other.is_ok() and payloads_equal(self.value, other.value)

    def as_ok(self) -> Ok[T]:
        """Return self, viewed as Ok with any error type."""
        return self

    def as_err(self) -> NoReturn:
        """Raise since this is Ok.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('Called `Result.as_err()` on an `Ok` value')


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents a failed computation. The error can be of any type,
    exceptions included; it is carried as data and never raised.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    __ferrum_kind__ = (RESULT_KIND, 'Err')

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __str__(self) -> str:
        return f'Err({self.error})'

    def __repr__(self) -> str:
        return f'Err({self.error!r})'

    # --- Querying the variant ---

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def is_ok_and(self, predicate: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        """Return False without calling the predicate."""
        return False

    def is_ok_and_async(self, predicate: Callable[[Any], Awaitable[bool] | bool]) -> Awaitable[bool]:  # noqa: ARG002
        """Return a completed awaitable of False."""
        return completed(False)

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """Return the predicate's verdict on the error value."""
        return predicate(self.error)

    def is_err_and_async(self, predicate: Callable[[E], Awaitable[bool] | bool]) -> Awaitable[bool]:
        """Async version of is_err_and; the predicate's awaitable is returned as is."""
        return ensure_awaitable(predicate(self.error))

    # --- Extracting the success value ---

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Context for the failure.

        Raises:
            UnwrapError: Always, with ``'{msg}: {error}'``.
        """
        raise UnwrapError(f'{msg}: {safe_str(self.error)}')

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            UnwrapError: Always, since Err has no success value.
        """
        raise UnwrapError(f'Called `Result.unwrap()` on an `Err` value: {safe_str(self.error)}')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a value from the error.

        Args:
            f: Function that takes the error and returns a fallback value.

        Returns:
            The value returned by f.
        """
        return f(self.error)

    def unwrap_or_else_async[T](self, f: Callable[[E], Awaitable[T] | T]) -> Awaitable[T]:
        """Async version of unwrap_or_else; f's awaitable is returned as is."""
        return ensure_awaitable(f(self.error))

    def into_ok(self) -> NoReturn:
        """Raise since this is Err."""
        raise UnwrapError('Called `Result.into_ok()` on an `Err` value')

    # --- Extracting the error value ---

    def expect_err(self, msg: str) -> E:  # noqa: ARG002
        """Return the error value, ignoring the message."""
        return self.error

    def unwrap_err(self) -> E:
        """Return the error value."""
        return self.error

    def into_err(self) -> E:
        """Return the error value of a Result known to be Err."""
        return self.error

    # --- Conversion to Option ---

    def ok(self) -> NothingType:
        """Return Nothing since this is Err."""
        return Nothing

    def err(self) -> Option[E]:
        """Convert to Option, returning Some(error), or Nothing for ``Err(None)``."""
        if self.error is None:
            return Nothing
        return Some(self.error)

    def transpose(self) -> Some[Err[E]]:
        """Return Some(self)."""
        return Some(self)

    # --- Transforming ---

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since there's no value to map."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the error value.

        Args:
            f: Function to apply to the error.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_or[U](self, default: U, f: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Return the default since this is Err."""
        return default

    def map_or_else[U](self, default: Callable[[E], U], f: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Compute the default from the error since this is Err."""
        return default(self.error)

    def flatten(self) -> Err[E]:
        """Return self since there's nothing to flatten."""
        return self

    # --- Boolean operators ---

    def and_(self, other: Result[Any, E]) -> Err[E]:
        """Return self since this is Err."""
        assert_result(other)
        return self

    def and_then(self, f: Callable[[Any], Result[Any, E]]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since there's no value to bind."""
        return self

    def and_then_async(self, f: Callable[[Any], Awaitable[Result[Any, E]] | Result[Any, E]]) -> AsyncResult[Any, E]:  # noqa: ARG002
        """Return a completed awaitable of self; f is not called."""
        return completed(self)

    def or_[T, F](self, other: Result[T, F]) -> Result[T, F]:
        """Return other since self is Err."""
        assert_result(other)
        return other

    def or_else[T, F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.

        Raises:
            NotAResultError: If f does not return a Result.
        """
        out = f(self.error)
        assert_result(out)
        return out

    def or_else_async[T, F](self, f: Callable[[E], Awaitable[Result[T, F]] | Result[T, F]]) -> AsyncResult[T, F]:
        """Async version of or_else; f's awaitable is returned as is."""
        return ensure_awaitable(f(self.error))

    # --- Side effects, comparison and casts ---

    def inspect(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self without calling f."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call f with the error value and return self unchanged."""
        f(self.error)
        return self

    def eq(self, other: Result[Any, E]) -> bool:
        """Return True if other is Err with an equal error."""
        assert_result(other)
        return other.is_err() and payloads_equal(self.error, other.error)

    def as_ok(self) -> NoReturn:
        """Raise since this is Err.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('Called `Result.as_ok()` on an `Err` value')

    def as_err(self) -> Err[E]:
        """Return self, viewed as Err with any success type."""
        return self


type Result[T, E = Exception] = Ok[T] | Err[E]

type AsyncResult[T, E = Exception] = Awaitable[Result[T, E]]
