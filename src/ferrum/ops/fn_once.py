"""FnOnce and FnOnceAsync: callables that may run only once."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from ferrum._internal.awaitables import resolve
from ferrum.errors import FnOnceConsumedError
from ferrum.types.option import Nothing, Option, option_of

__all__ = ['FnOnce', 'FnOnceAsync']


class FnOnce[R]:
    """Wrap a callable so it can be invoked at most once.

    The wrapper is marked consumed before the callable runs, so a callable
    that raises still counts as called.

    Examples:
        >>> init = FnOnce(lambda: 'ready')
        >>> init.call()
        'ready'
        >>> init.try_call()
        Nothing
    """

    __slots__ = ('_consumed', '_fn')

    def __init__(self, fn: Callable[..., R]) -> None:
        self._fn = fn
        self._consumed = False

    def __str__(self) -> str:
        return f'FnOnce({"consumed" if self._consumed else "pending"})'

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        return self.call(*args, **kwargs)

    def call(self, *args: Any, **kwargs: Any) -> R:
        """Invoke the callable.

        Raises:
            FnOnceConsumedError: If it has already been called.
        """
        if self._consumed:
            raise FnOnceConsumedError
        self._consumed = True
        return self._fn(*args, **kwargs)

    def try_call(self, *args: Any, **kwargs: Any) -> Option[R]:
        """Invoke the callable and wrap its result with option_of, or return Nothing if consumed.

        A callable that returns None yields Nothing, the same as a consumed one;
        use :meth:`is_consumed` beforehand to tell the two apart.
        """
        if self._consumed:
            return Nothing
        self._consumed = True
        return option_of(self._fn(*args, **kwargs))

    def is_consumed(self) -> bool:
        return self._consumed


class FnOnceAsync[R]:
    """Async counterpart of FnOnce for callables returning awaitables."""

    __slots__ = ('_consumed', '_fn')

    def __init__(self, fn: Callable[..., Awaitable[R] | R]) -> None:
        self._fn = fn
        self._consumed = False

    def __str__(self) -> str:
        return f'FnOnceAsync({"consumed" if self._consumed else "pending"})'

    async def call(self, *args: Any, **kwargs: Any) -> R:
        """Invoke and await the callable.

        Raises:
            FnOnceConsumedError: If it has already been called.
        """
        if self._consumed:
            raise FnOnceConsumedError('FnOnceAsync')
        self._consumed = True
        return await resolve(self._fn(*args, **kwargs))

    async def try_call(self, *args: Any, **kwargs: Any) -> Option[R]:
        """Invoke and await the callable, or return Nothing if consumed."""
        if self._consumed:
            return Nothing
        self._consumed = True
        return option_of(await resolve(self._fn(*args, **kwargs)))

    def is_consumed(self) -> bool:
        return self._consumed
