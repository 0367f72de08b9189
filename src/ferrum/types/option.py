"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from ferrum._internal.awaitables import completed, ensure_awaitable
from ferrum.errors import NoneValueError, UnwrapError, UnzipError
from ferrum.types._kind import OPTION_KIND
from ferrum.types.guards import assert_option, assert_result

if TYPE_CHECKING:
    from ferrum.types.result import Err, Ok, Result

__all__ = ['AsyncOption', 'Nothing', 'NothingType', 'Option', 'Some', 'option_of', 'payloads_equal']


def payloads_equal(a: object, b: object) -> bool:
    """Compare two payloads the way ``eq`` does: identity first, then ``==``.

    This is Python's shallow container rule, so ``Some([1]).eq(Some([1]))``
    holds. The outcome of ``==`` is coerced with ``bool()``.
    """
    return a is b or bool(a == b)


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or propagated through a chain of Option-returning
    operations. The value may be anything except ``None``; use ``Nothing``
    for absence.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(84)
        >>> str(Some('a'))
        'Some(a)'
    """

    value: T

    __ferrum_kind__ = (OPTION_KIND, 'Some')

    def __post_init__(self) -> None:
        if self.value is None:
            raise NoneValueError

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __str__(self) -> str:
        return f'Some({self.value})'

    def __repr__(self) -> str:
        return f'Some({self.value!r})'

    # --- Querying the variant ---

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return the predicate's verdict on the contained value."""
        return predicate(self.value)

    def is_some_and_async(self, predicate: Callable[[T], Awaitable[bool] | bool]) -> Awaitable[bool]:
        """Async version of is_some_and.

        The predicate is called immediately and its awaitable is returned
        as is; a plain boolean is wrapped in a completed awaitable.
        """
        return ensure_awaitable(predicate(self.value))

    def is_none_or(self, predicate: Callable[[T], bool]) -> bool:
        """Return the predicate's verdict on the contained value."""
        return predicate(self.value)

    def is_none_or_async(self, predicate: Callable[[T], Awaitable[bool] | bool]) -> Awaitable[bool]:
        """Async version of is_none_or."""
        return ensure_awaitable(predicate(self.value))

    # --- Extracting the contained value ---

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap(self) -> T:
        """Return the contained value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def unwrap_or_else_async(self, f: Callable[[], Awaitable[T] | T]) -> Awaitable[T]:  # noqa: ARG002
        """Return a completed awaitable of the contained value; f is not called."""
        return completed(self.value)

    # --- Conversion to Result ---

    def ok_or[E](self, error: E) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value).

        Args:
            error: Ignored error value.

        Returns:
            Ok containing the value.
        """
        from ferrum.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, f: Callable[[], E]) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value) without calling f."""
        from ferrum.types.result import Ok

        return Ok(self.value)

    def transpose[U, E](self: Some[Result[U, E]]) -> Result[Option[U], E]:
        """Turn Some(Ok(v)) into Ok(Some(v)) and Some(Err(e)) into Err(e).

        Raises:
            NotAResultError: If the contained value is not a Result.
        """
        from ferrum.types.result import Err, Ok

        inner = self.value
        assert_result(inner)
        if inner.is_ok():
            return Ok(Some(inner.value))
        return Err(inner.error)

    # --- Transforming the contained value ---

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def flatten[U](self: Some[Option[U]]) -> Option[U]:
        """Remove one level of nesting: Some(Some(v)) becomes Some(v).

        Raises:
            NotAnOptionError: If the contained value is not an Option.
        """
        inner = self.value
        assert_option(inner)
        return inner

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f applied to the contained value."""
        return f(self.value)

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f applied to the contained value; default is not called."""
        return f(self.value)

    # --- Combining two Options ---

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If other is Nothing, returns Nothing.
        """
        assert_option(other)
        if other.is_some():
            return Some((self.value, other.value))
        return Nothing

    def zip_with[U, R](self, other: Option[U], f: Callable[[T, U], R]) -> Option[R]:
        """Combine two Some values with f; Nothing if other is Nothing."""
        assert_option(other)
        if other.is_some():
            return Some(f(self.value, other.value))
        return Nothing

    def unzip[A, B](self: Some[tuple[A, B]]) -> tuple[Option[A], Option[B]]:
        """Split Some((a, b)) into (Some(a), Some(b)).

        Raises:
            UnzipError: If the contained value is not a 2-item tuple or list.
        """
        pair = self.value
        if not isinstance(pair, tuple | list) or len(pair) != 2:
            raise UnzipError(pair)
        a, b = pair
        return Some(a), Some(b)

    def reduce[U, R](self, other: Option[U], f: Callable[[T, U], R]) -> Option[T | R]:
        """Combine with f if both are Some, otherwise keep self."""
        assert_option(other)
        if other.is_some():
            return Some(f(self.value, other.value))
        return self

    # --- Boolean operators ---

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        assert_option(other)
        return other

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.

        Raises:
            NotAnOptionError: If f does not return an Option.
        """
        out = f(self.value)
        assert_option(out)
        return out

    def and_then_async[U](self, f: Callable[[T], Awaitable[Option[U]] | Option[U]]) -> AsyncOption[U]:
        """Async version of and_then.

        f is called immediately and the awaitable it returns is handed back
        unchanged, so awaiting it yields the Option produced by f.
        """
        return ensure_awaitable(f(self.value))

    def or_(self, other: Option[T]) -> Some[T]:
        """Return self since this is Some."""
        assert_option(other)
        return self

    def or_else(self, f: Callable[[], Option[T]]) -> Some[T]:  # noqa: ARG002
        """Return self unchanged since this is Some."""
        return self

    def or_else_async(self, f: Callable[[], Awaitable[Option[T]] | Option[T]]) -> AsyncOption[T]:  # noqa: ARG002
        """Return a completed awaitable of self; f is not called."""
        return completed(self)

    def xor(self, other: Option[T]) -> Option[T]:
        """Return Some if exactly one of self and other is Some.

        Since this is Some, returns self when other is Nothing and
        Nothing when other is Some too.
        """
        assert_option(other)
        if other.is_some():
            return Nothing
        return self

    # --- Side effects and comparison ---

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the contained value and return self unchanged."""
        f(self.value)
        return self

    def eq(self, other: Option[T]) -> bool:
        """Return True if other is Some with an equal value."""
        assert_option(other)
        return other.is_some() and payloads_equal(self.value, other.value)


_nothing_created = False


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Nothing represents the absence of a value. Operations on Nothing
    typically return Nothing or a default value, and never call the
    callbacks meant for a present value.

    This is a singleton: use the `Nothing` constant. Calling NothingType()
    again raises TypeError, and copying or pickling yields `Nothing` itself.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    __ferrum_kind__ = (OPTION_KIND, 'None')

    def __post_init__(self) -> None:
        if _nothing_created:
            msg = "NothingType is a singleton; use 'Nothing'"
            raise TypeError(msg)

    def __copy__(self) -> NothingType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> NothingType:
        return self

    def __reduce__(self) -> str:
        return 'Nothing'

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __str__(self) -> str:
        return 'None'

    def __repr__(self) -> str:
        return 'Nothing'

    # --- Querying the variant ---

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def is_some_and(self, predicate: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        """Return False without calling the predicate."""
        return False

    def is_some_and_async(self, predicate: Callable[[Any], Awaitable[bool] | bool]) -> Awaitable[bool]:  # noqa: ARG002
        """Return a completed awaitable of False."""
        return completed(False)

    def is_none_or(self, predicate: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        """Return True without calling the predicate."""
        return True

    def is_none_or_async(self, predicate: Callable[[Any], Awaitable[bool] | bool]) -> Awaitable[bool]:  # noqa: ARG002
        """Return a completed awaitable of True."""
        return completed(True)

    # --- Extracting the contained value ---

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message, used verbatim.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(msg)

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            UnwrapError: Always, since Nothing has no value to unwrap.
        """
        raise UnwrapError('Called `Option.unwrap()` on a `Nothing` value')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def unwrap_or_else_async[T](self, f: Callable[[], Awaitable[T] | T]) -> Awaitable[T]:
        """Async version of unwrap_or_else; f's awaitable is returned as is."""
        return ensure_awaitable(f())

    # --- Conversion to Result ---

    def ok_or[E](self, error: E) -> Err[E]:
        """Convert to Result, returning Err(error).

        Args:
            error: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from ferrum.types.result import Err

        return Err(error)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from ferrum.types.result import Err

        return Err(f())

    def transpose(self) -> Ok[NothingType]:
        """Return Ok(Nothing)."""
        from ferrum.types.result import Ok

        return Ok(Nothing)

    # --- Transforming the contained value ---

    def filter(self, predicate: Callable[[Any], bool]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to filter."""
        return Nothing

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return Nothing

    def map(self, f: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to map."""
        return Nothing

    def map_or[U](self, default: U, f: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Return the default since this is Nothing."""
        return default

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Compute the default since this is Nothing."""
        return default()

    # --- Combining two Options ---

    def zip(self, other: Option[Any]) -> NothingType:
        """Return Nothing since self is Nothing."""
        assert_option(other)
        return Nothing

    def zip_with(self, other: Option[Any], f: Callable[[Any, Any], Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing since self is Nothing."""
        assert_option(other)
        return Nothing

    def unzip(self) -> tuple[NothingType, NothingType]:
        """Return (Nothing, Nothing)."""
        return Nothing, Nothing

    def reduce[U](self, other: Option[U], f: Callable[[Any, U], Any]) -> Option[U]:  # noqa: ARG002
        """Return other if it is Some, else Nothing."""
        assert_option(other)
        if other.is_some():
            return other
        return Nothing

    # --- Boolean operators ---

    def and_(self, other: Option[Any]) -> NothingType:
        """Return Nothing since self is Nothing."""
        assert_option(other)
        return Nothing

    def and_then(self, f: Callable[[Any], Option[Any]]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to bind."""
        return Nothing

    def and_then_async(self, f: Callable[[Any], Awaitable[Option[Any]] | Option[Any]]) -> AsyncOption[Any]:  # noqa: ARG002
        """Return a completed awaitable of Nothing; f is not called."""
        return completed(Nothing)

    def or_[T](self, other: Option[T]) -> Option[T]:
        """Return other since self is Nothing."""
        assert_option(other)
        return other

    def or_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.

        Raises:
            NotAnOptionError: If f does not return an Option.
        """
        out = f()
        assert_option(out)
        return out

    def or_else_async[T](self, f: Callable[[], Awaitable[Option[T]] | Option[T]]) -> AsyncOption[T]:
        """Async version of or_else; f's awaitable is returned as is."""
        return ensure_awaitable(f())

    def xor[T](self, other: Option[T]) -> Option[T]:
        """Return other if it is Some, else Nothing."""
        assert_option(other)
        if other.is_some():
            return other
        return Nothing

    # --- Side effects and comparison ---

    def inspect(self, f: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling f."""
        return Nothing

    def eq(self, other: Option[Any]) -> bool:
        """Return True if other is Nothing too."""
        assert_option(other)
        return other.is_none()


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""

_nothing_created = True


def option_of[T](value: T | None) -> Option[T]:
    """Return Nothing for None, otherwise Some(value)."""
    return Nothing if value is None else Some(value)


type Option[T] = Some[T] | NothingType

type AsyncOption[T] = Awaitable[Option[T]]
