"""RwLock: many readers or one writer around a single value."""

from __future__ import annotations

from collections import deque
from collections.abc import Awaitable, Callable
from types import TracebackType
from typing import Self

import anyio

from ferrum._internal.awaitables import resolve
from ferrum._logging import get_logger
from ferrum.errors import GuardReleasedError
from ferrum.types.option import Nothing, Option, Some

__all__ = ['RwLock', 'RwLockReadGuard', 'RwLockWriteGuard']

_log = get_logger(__name__)


class _Guard[T]:
    __slots__ = ('_lock', '_released')

    def __init__(self, lock: RwLock[T]) -> None:
        self._lock = lock
        self._released = False

    def __str__(self) -> str:
        if self._released:
            return f'{type(self).__name__}(<released>)'
        return f'{type(self).__name__}({self._lock._value})'  # noqa: SLF001

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.unlock()

    def _check(self) -> None:
        if self._released:
            raise GuardReleasedError(type(self).__name__)

    def is_released(self) -> bool:
        """Check if the guard has been unlocked."""
        return self._released

    def unlock(self) -> None:
        """Release the lock. Does nothing if already released."""
        if self._released:
            return
        self._released = True
        self._release()

    def _release(self) -> None:
        raise NotImplementedError


class RwLockReadGuard[T](_Guard[T]):
    """Shared read access to an RwLock's value, held until :meth:`unlock`."""

    __slots__ = ()

    @property
    def value(self) -> T:
        """The protected value."""
        self._check()
        return self._lock._value  # noqa: SLF001

    def _release(self) -> None:
        self._lock._release_read()  # noqa: SLF001


class RwLockWriteGuard[T](_Guard[T]):
    """Exclusive access to an RwLock's value, held until :meth:`unlock`."""

    __slots__ = ()

    @property
    def value(self) -> T:
        """The protected value."""
        self._check()
        return self._lock._value  # noqa: SLF001

    @value.setter
    def value(self, new_value: T) -> None:
        self._check()
        self._lock._value = new_value  # noqa: SLF001

    def _release(self) -> None:
        self._lock._release_write()  # noqa: SLF001


class RwLock[T]:
    """Async reader-writer lock protecting a value.

    Any number of readers may hold the lock at once; a writer holds it
    alone. Writers take priority: once a writer is waiting, new readers
    queue behind it. Waiting writers are served in FIFO order, and a
    released writer with no writer queued behind it admits every waiting
    reader at once.

    Task-safe under any anyio backend, not thread-safe. Guards are async
    context managers, and releasing a guard twice is a no-op.

    Examples:
        ```python
        cache = RwLock({})

        async def lookup(key):
            return await cache.with_read(lambda entries: entries.get(key))

        async def store(key, value):
            async with await cache.write() as guard:
                guard.value = {**guard.value, key: value}
        ```
    """

    __slots__ = ('_read_waiters', '_readers', '_value', '_write_waiters', '_writer')

    def __init__(self, value: T) -> None:
        self._value = value
        self._readers = 0
        self._writer = False
        self._read_waiters: deque[anyio.Event] = deque()
        self._write_waiters: deque[anyio.Event] = deque()

    def __str__(self) -> str:
        if self._writer:
            return 'RwLock(<write-locked>)'
        if self._readers:
            return f'RwLock(<read-locked:{self._readers}>)'
        return 'RwLock(<unlocked>)'

    # --- State transitions ---

    def _try_acquire_read(self) -> bool:
        if self._writer or self._write_waiters:
            return False
        self._readers += 1
        return True

    def _try_acquire_write(self) -> bool:
        if self._writer or self._readers:
            return False
        self._writer = True
        return True

    def _wake_writer(self) -> bool:
        if not self._write_waiters:
            return False
        self._writer = True
        self._write_waiters.popleft().set()
        return True

    def _wake_readers(self) -> None:
        while self._read_waiters:
            self._readers += 1
            self._read_waiters.popleft().set()

    def _release_read(self) -> None:
        self._readers -= 1
        if self._readers == 0:
            self._wake_writer()

    def _release_write(self) -> None:
        self._writer = False
        if not self._wake_writer():
            self._wake_readers()

    # --- Acquiring ---

    async def read(self) -> RwLockReadGuard[T]:
        """Wait for shared access and return a read guard."""
        if self._try_acquire_read():
            return RwLockReadGuard(self)

        event = anyio.Event()
        self._read_waiters.append(event)
        try:
            await event.wait()
        except BaseException:
            if event.is_set():
                self._release_read()
            else:
                self._read_waiters.remove(event)
            raise
        return RwLockReadGuard(self)

    async def write(self) -> RwLockWriteGuard[T]:
        """Wait for exclusive access and return a write guard."""
        if self._try_acquire_write():
            return RwLockWriteGuard(self)

        _log.debug('waiting for write lock', readers=self._readers, queued_writers=len(self._write_waiters))
        event = anyio.Event()
        self._write_waiters.append(event)
        try:
            await event.wait()
        except BaseException:
            if event.is_set():
                self._release_write()
            else:
                self._write_waiters.remove(event)
                if not self._writer and not self._write_waiters:
                    self._wake_readers()
            raise
        return RwLockWriteGuard(self)

    def try_read(self) -> Option[RwLockReadGuard[T]]:
        """Take a read guard if no writer holds or awaits the lock, without waiting."""
        if self._try_acquire_read():
            return Some(RwLockReadGuard(self))
        return Nothing

    def try_write(self) -> Option[RwLockWriteGuard[T]]:
        """Take the write guard if the lock is free, without waiting."""
        if self._try_acquire_write():
            return Some(RwLockWriteGuard(self))
        return Nothing

    # --- Queries ---

    def reader_count(self) -> int:
        """Number of read guards currently held."""
        return self._readers

    def is_write_locked(self) -> bool:
        return self._writer

    # --- Scoped access ---

    async def with_read[U](self, fn: Callable[[T], Awaitable[U] | U]) -> U:
        """Run fn on the value under a read lock. fn may be sync or async."""
        guard = await self.read()
        try:
            return await resolve(fn(guard.value))
        finally:
            guard.unlock()

    async def with_write[U](self, fn: Callable[[T], Awaitable[U] | U]) -> U:
        """Run fn on the value under the write lock. fn may be sync or async."""
        guard = await self.write()
        try:
            return await resolve(fn(guard.value))
        finally:
            guard.unlock()

    async def get(self) -> T:
        """Return the value under a read lock."""
        guard = await self.read()
        try:
            return guard.value
        finally:
            guard.unlock()

    async def set(self, value: T) -> None:
        """Replace the value under the write lock."""
        guard = await self.write()
        try:
            guard.value = value
        finally:
            guard.unlock()

    async def replace(self, value: T) -> T:
        """Replace the value and return the previous one."""
        guard = await self.write()
        try:
            old = guard.value
            guard.value = value
            return old
        finally:
            guard.unlock()
