"""Helpers shared by the ``*_async`` combinators."""

from __future__ import annotations

from collections.abc import Awaitable, Generator
from inspect import isawaitable
from typing import Any

__all__ = ['Completed', 'completed', 'ensure_awaitable', 'resolve']


class Completed[T]:
    """An awaitable that is already finished.

    Unlike a coroutine it can be awaited any number of times, never suspends,
    and dropping it without awaiting it is harmless.
    """

    __slots__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def __await__(self) -> Generator[Any, None, T]:
        yield from ()
        return self._value

    def __repr__(self) -> str:
        return f'Completed({self._value!r})'


def completed[T](value: T) -> Awaitable[T]:
    """Return an awaitable that finishes immediately with ``value``."""
    return Completed(value)


def ensure_awaitable[T](value: Awaitable[T] | T) -> Awaitable[T]:
    """Pass awaitables through untouched and wrap plain values with :func:`completed`."""
    if isawaitable(value):
        return value
    return Completed(value)


async def resolve[T](value: Awaitable[T] | T) -> T:
    """Await ``value`` if it is awaitable, otherwise return it as is."""
    if isawaitable(value):
        return await value
    return value
