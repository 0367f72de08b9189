"""Lazy and LazyAsync: values computed on first access."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from ferrum.sync.once import Once
from ferrum.types.option import Option

__all__ = ['Lazy', 'LazyAsync']


class Lazy[T]:
    """A lazily initialized value.

    The initializer is called at most once, on first :meth:`force`.
    Thread-safe and async-safe. If the initializer raises, the value stays
    uninitialized and the next :meth:`force` tries again.

    Examples:
        >>> def expensive():
        ...     print('Computing...')
        ...     return 42
        >>>
        >>> lazy = Lazy(expensive)
        >>> lazy.force()  # Prints "Computing..."
        42
        >>> lazy.force()  # No print, returns cached value
        42
    """

    __slots__ = ('_cell', '_init')

    def __init__(self, init: Callable[[], T]) -> None:
        """Create a Lazy value.

        Args:
            init: Function to call on first access.
        """
        self._cell: Once[T] = Once()
        self._init = init

    def __str__(self) -> str:
        slot = self._cell._slot  # noqa: SLF001
        if slot is not None:
            return f'Lazy({slot[0]})'
        return 'Lazy(<uninitialized>)'

    def force(self) -> T:
        """Get the value, initializing if necessary."""
        return self._cell.get_or_init(self._init)

    def get(self) -> Option[T]:
        """Return Some(value) if initialized, otherwise Nothing. Never runs the initializer."""
        return self._cell.get()

    def is_initialized(self) -> bool:
        """Check if the value has been initialized."""
        return self._cell.is_initialized()


class LazyAsync[T]:
    """A lazily initialized value with an async initializer.

    Concurrent :meth:`force` calls share a single run of the initializer.

    Example:
        ```python
        config = LazyAsync(load_config)

        async def handler():
            cfg = await config.force()
        ```
    """

    __slots__ = ('_cell', '_init')

    def __init__(self, init: Callable[[], Awaitable[T] | T]) -> None:
        self._cell: Once[T] = Once()
        self._init = init

    def __str__(self) -> str:
        slot = self._cell._slot  # noqa: SLF001
        if slot is not None:
            return f'LazyAsync({slot[0]})'
        return 'LazyAsync(<uninitialized>)'

    async def force(self) -> T:
        """Get the value, awaiting the initializer if necessary."""
        return await self._cell.get_or_init_async(self._init)

    def get(self) -> Option[T]:
        """Return Some(value) if initialized, otherwise Nothing."""
        return self._cell.get()

    def is_initialized(self) -> bool:
        """Check if the value has been initialized."""
        return self._cell.is_initialized()
