"""Mutex: async mutual exclusion around a single value."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from types import TracebackType
from typing import Self

import anyio

from ferrum._internal.awaitables import resolve
from ferrum._logging import get_logger
from ferrum.errors import GuardReleasedError
from ferrum.types.option import Nothing, Option, Some

__all__ = ['Mutex', 'MutexGuard']

_log = get_logger(__name__)


class MutexGuard[T]:
    """Exclusive access to a Mutex's value, held until :meth:`unlock`.

    Reading or writing :attr:`value` after the guard is released raises
    GuardReleasedError. Releasing twice is a no-op.

    Example:
        ```python
        async with await mutex.lock() as guard:
            guard.value += 1
        ```
    """

    __slots__ = ('_mutex', '_released')

    def __init__(self, mutex: Mutex[T]) -> None:
        self._mutex = mutex
        self._released = False

    def __str__(self) -> str:
        if self._released:
            return 'MutexGuard(<released>)'
        return f'MutexGuard({self._mutex._value})'  # noqa: SLF001

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.unlock()

    @property
    def value(self) -> T:
        """The protected value."""
        if self._released:
            raise GuardReleasedError
        return self._mutex._value  # noqa: SLF001

    @value.setter
    def value(self, new_value: T) -> None:
        if self._released:
            raise GuardReleasedError
        self._mutex._value = new_value  # noqa: SLF001

    def is_released(self) -> bool:
        """Check if the guard has been unlocked."""
        return self._released

    def unlock(self) -> None:
        """Release the lock. Does nothing if already released."""
        if self._released:
            return
        self._released = True
        self._mutex._lock.release()  # noqa: SLF001


class Mutex[T]:
    """Async mutex protecting a value.

    Built on anyio.Lock, so waiters are served in FIFO order and the mutex
    works under any anyio backend. A guard must be released by the task
    that acquired it.

    Examples:
        ```python
        counter = Mutex(0)

        async def bump() -> None:
            await counter.with_lock(lambda n: n + 1)

        async with counter as guard:
            guard.value += 1
        ```
    """

    __slots__ = ('_guards', '_lock', '_value')

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = anyio.Lock()
        self._guards: dict[int, MutexGuard[T]] = {}

    def __str__(self) -> str:
        return 'Mutex(<locked>)' if self._lock.locked() else 'Mutex(<unlocked>)'

    async def __aenter__(self) -> MutexGuard[T]:
        guard = await self.lock()
        self._guards[anyio.get_current_task().id] = guard
        return guard

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        guard = self._guards.pop(anyio.get_current_task().id, None)
        if guard is not None:
            guard.unlock()

    async def lock(self) -> MutexGuard[T]:
        """Wait for the lock and return a guard over the value."""
        if self._lock.locked():
            _log.debug('waiting for mutex')
        await self._lock.acquire()
        return MutexGuard(self)

    def try_lock(self) -> Option[MutexGuard[T]]:
        """Take the lock if it is free, without waiting.

        Returns:
            Some(guard) on success, Nothing if the mutex is held.
        """
        if self._lock.locked():
            return Nothing
        try:
            self._lock.acquire_nowait()
        except anyio.WouldBlock:
            return Nothing
        return Some(MutexGuard(self))

    def is_locked(self) -> bool:
        """Check if the mutex is currently held."""
        return self._lock.locked()

    async def with_lock[U](self, fn: Callable[[T], Awaitable[U] | U]) -> U:
        """Run fn on the value while holding the lock.

        fn may be sync or async. The lock is released even if fn raises.
        """
        guard = await self.lock()
        try:
            return await resolve(fn(guard.value))
        finally:
            guard.unlock()

    async def get(self) -> T:
        """Return the value, waiting for the lock."""
        guard = await self.lock()
        try:
            return guard.value
        finally:
            guard.unlock()

    async def set(self, value: T) -> None:
        """Replace the value, waiting for the lock."""
        guard = await self.lock()
        try:
            guard.value = value
        finally:
            guard.unlock()

    async def replace(self, value: T) -> T:
        """Replace the value and return the previous one."""
        guard = await self.lock()
        try:
            old = guard.value
            guard.value = value
            return old
        finally:
            guard.unlock()
