"""ControlFlow: tell a loop whether to stop early (Break) or go on (Continue)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

import msgspec

from ferrum.types._kind import CONTROL_FLOW_KIND
from ferrum.types.option import Nothing, Option, option_of
from ferrum.types.result import Err, Ok

__all__ = ['Break', 'Continue', 'ControlFlow']


class Break[B](msgspec.Struct, frozen=True, gc=False):
    """Exit the operation early, optionally carrying a value.

    Examples:
        >>> def find_first_negative(items):
        ...     for i, n in enumerate(items):
        ...         if n < 0:
        ...             return Break(i)
        ...     return Continue()
        >>> find_first_negative([3, -1, 2]).break_value()
        Some(1)
    """

    value: B = None  # type: ignore[assignment]

    __ferrum_kind__ = (CONTROL_FLOW_KIND, 'Break')

    def __str__(self) -> str:
        return f'Break({self.value})'

    def __repr__(self) -> str:
        return f'Break({self.value!r})'

    def is_break(self) -> TypeIs[Break[B]]:
        return True

    def is_continue(self) -> TypeIs[Continue[Any]]:
        return False

    def break_value(self) -> Option[B]:
        """Return Some(value), or Nothing for a bare Break()."""
        return option_of(self.value)

    def continue_value(self) -> Option[Any]:
        return Nothing

    def map_break[T](self, f: Callable[[B], T]) -> Break[T]:
        """Apply f to the break value."""
        return Break(f(self.value))

    def map_continue(self, f: Callable[[Any], Any]) -> Break[B]:  # noqa: ARG002
        return self

    def break_ok(self) -> Ok[B]:
        """Convert to Ok(value)."""
        return Ok(self.value)

    def continue_ok(self) -> Err[B]:
        """Convert to Err(value)."""
        return Err(self.value)

    def into_value(self) -> B:
        return self.value


class Continue[C](msgspec.Struct, frozen=True, gc=False):
    """Move on to the next step, optionally carrying a value."""

    value: C = None  # type: ignore[assignment]

    __ferrum_kind__ = (CONTROL_FLOW_KIND, 'Continue')

    def __str__(self) -> str:
        return f'Continue({self.value})'

    def __repr__(self) -> str:
        return f'Continue({self.value!r})'

    def is_break(self) -> TypeIs[Break[Any]]:
        return False

    def is_continue(self) -> TypeIs[Continue[C]]:
        return True

    def break_value(self) -> Option[Any]:
        return Nothing

    def continue_value(self) -> Option[C]:
        """Return Some(value), or Nothing for a bare Continue()."""
        return option_of(self.value)

    def map_break(self, f: Callable[[Any], Any]) -> Continue[C]:  # noqa: ARG002
        return self

    def map_continue[T](self, f: Callable[[C], T]) -> Continue[T]:
        """Apply f to the continue value."""
        return Continue(f(self.value))

    def break_ok(self) -> Err[C]:
        """Convert to Err(value)."""
        return Err(self.value)

    def continue_ok(self) -> Ok[C]:
        """Convert to Ok(value)."""
        return Ok(self.value)

    def into_value(self) -> C:
        return self.value


type ControlFlow[B, C = None] = Break[B] | Continue[C]
