"""Once: a write-once cell that is safe across threads and tasks."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import aiologic

from ferrum._internal.awaitables import resolve
from ferrum._logging import get_logger
from ferrum.types.guards import assert_result
from ferrum.types.option import Nothing, Option, option_of
from ferrum.types.result import Err, Ok, Result

__all__ = ['Once']

_log = get_logger(__name__)


class Once[T]:
    """A cell that can be written to exactly once.

    Thread-safe and async-safe using aiologic.Lock. The value is set by
    :meth:`set` or by the first successful ``get_or_*`` initializer; later
    writers get their value handed back instead.

    The stored value lives in a one-item tuple that is swapped in and out
    as a whole, so lock-free readers never see a cleared value.

    Note:
        A stored None reads back as Nothing from :meth:`get` and :meth:`take`;
        use :meth:`is_initialized` to tell it apart from an empty cell.

        The sync methods block the calling thread while another caller holds
        the lock. Do not call them from a task on the event loop that is
        running an async initializer of the same cell.

    Examples:
        >>> cell: Once[int] = Once()
        >>> cell.get()
        Nothing
        >>> cell.set(42)
        Ok(None)
        >>> cell.set(100)
        Err(100)
        >>> cell.get()
        Some(42)
    """

    __slots__ = ('_lock', '_ready', '_slot')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._ready = aiologic.Event()
        self._slot: tuple[T] | None = None

    def __str__(self) -> str:
        slot = self._slot
        if slot is not None:
            return f'Once({slot[0]})'
        return 'Once(<uninitialized>)'

    def __repr__(self) -> str:
        slot = self._slot
        if slot is not None:
            return f'Once({slot[0]!r})'
        return 'Once(<uninitialized>)'

    def _store(self, value: T) -> T:
        self._slot = (value,)
        self._ready.set()
        _log.debug('once initialized', value_type=type(value).__name__)
        return value

    def get(self) -> Option[T]:
        """Return Some(value) if set, otherwise Nothing. Never blocks."""
        slot = self._slot
        if slot is not None:
            return option_of(slot[0])
        return Nothing

    def set(self, value: T) -> Result[None, T]:
        """Set the value if the cell is empty.

        Args:
            value: The value to store.

        Returns:
            Ok() if the value was stored, Err(value) if the cell was already set.
        """
        if self._slot is not None:
            return Err(value)

        with self._lock:
            if self._slot is not None:
                return Err(value)
            self._store(value)
            return Ok()

    def try_insert(self, value: T) -> Result[T, tuple[T, T]]:
        """Store value if the cell is empty.

        Returns:
            Ok(value) if it was stored, otherwise Err((current, value)).
        """
        slot = self._slot
        if slot is not None:
            return Err((slot[0], value))

        with self._lock:
            slot = self._slot
            if slot is not None:
                return Err((slot[0], value))
            return Ok(self._store(value))

    async def wait(self) -> T:
        """Wait until the cell holds a value and return it.

        A value set and taken again before this task wakes up is missed;
        the wait goes on until the next one.
        """
        while True:
            slot = self._slot
            if slot is not None:
                return slot[0]
            await self._ready

    def get_or_init(self, fn: Callable[[], T]) -> T:
        """Return the value, initializing it with fn if the cell is empty.

        Thread-safe: only one caller runs fn. If fn raises, the cell stays
        empty and the exception propagates.
        """
        slot = self._slot
        if slot is not None:
            return slot[0]

        with self._lock:
            slot = self._slot
            if slot is not None:
                return slot[0]
            return self._store(fn())

    async def get_or_init_async(self, fn: Callable[[], Awaitable[T] | T]) -> T:
        """Async version of get_or_init.

        Concurrent callers wait for the first initializer instead of running
        their own.
        """
        slot = self._slot
        if slot is not None:
            return slot[0]

        async with self._lock:
            slot = self._slot
            if slot is not None:
                return slot[0]
            return self._store(await resolve(fn()))

    def get_or_try_init[E](self, fn: Callable[[], Result[T, E]]) -> Result[T, E]:
        """Return Ok(value), initializing the cell from fn if it is empty.

        An Err from fn is returned as is and leaves the cell empty, so a later
        call tries again.

        Raises:
            NotAResultError: If fn does not return a Result.
        """
        slot = self._slot
        if slot is not None:
            return Ok(slot[0])

        with self._lock:
            slot = self._slot
            if slot is not None:
                return Ok(slot[0])
            out = fn()
            assert_result(out)
            if out.is_ok():
                self._store(out.value)
            return out

    async def get_or_try_init_async[E](
        self, fn: Callable[[], Awaitable[Result[T, E]] | Result[T, E]]
    ) -> Result[T, E]:
        """Async version of get_or_try_init.

        Callers that waited on a failed initializer run their own fn.
        """
        slot = self._slot
        if slot is not None:
            return Ok(slot[0])

        async with self._lock:
            slot = self._slot
            if slot is not None:
                return Ok(slot[0])
            out = await resolve(fn())
            assert_result(out)
            if out.is_ok():
                self._store(out.value)
            return out

    def take(self) -> Option[T]:
        """Empty the cell and return its previous value, if any."""
        if self._slot is None:
            return Nothing

        with self._lock:
            slot = self._slot
            if slot is None:
                return Nothing
            self._slot = None
            self._ready = aiologic.Event()
            return option_of(slot[0])

    def is_initialized(self) -> bool:
        """Check if the value has been set."""
        return self._slot is not None
