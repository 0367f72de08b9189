"""Channel: an async FIFO queue with Option-returning receives.

Built on anyio memory object streams. Sends report delivery as a bool and
receives hand back Some(item), or Nothing once the channel is closed and
drained, so producers and consumers never need to catch stream errors.
"""

from __future__ import annotations

import math
from typing import Self

import anyio

from ferrum._logging import get_logger
from ferrum.errors import NoneValueError
from ferrum.types.option import Nothing, Option, Some

__all__ = ['Channel', 'Receiver', 'Sender']

_log = get_logger(__name__)


class _ChannelView[T]:
    """Queries shared by a channel and its sender and receiver views."""

    __slots__ = ()

    _label = 'Channel'

    def _channel(self) -> Channel[T]:
        raise NotImplementedError

    def __str__(self) -> str:
        channel = self._channel()
        if channel.is_closed():
            return f'{self._label}(<closed>)'
        capacity = '∞' if channel.capacity == math.inf else channel.capacity
        return f'{self._label}({len(channel)}/{capacity})'

    def __len__(self) -> int:
        return self._channel()._rx.statistics().current_buffer_used  # noqa: SLF001

    @property
    def capacity(self) -> int | float:
        """Maximum number of buffered items; ``math.inf`` when unbounded."""
        return self._channel()._capacity  # noqa: SLF001

    def is_closed(self) -> bool:
        return self._channel()._closed  # noqa: SLF001

    def is_empty(self) -> bool:
        return len(self) == 0

    def is_full(self) -> bool:
        """Check if the buffer is at capacity. Always true for a rendezvous channel."""
        return len(self) >= self.capacity


class Channel[T](_ChannelView[T]):
    """A multi-producer, multi-consumer async queue.

    ``capacity`` bounds the buffer: senders wait while it is full. A
    capacity of 0 makes every send wait for a receiver, and ``math.inf``
    (the default) never blocks senders. Items are received in send order.

    :meth:`close` is final. Buffered items can still be received after it;
    pending and later sends return False and receivers get Nothing once the
    buffer is drained. Channels are task-safe, not thread-safe.

    Examples:
        ```python
        jobs: Channel[str] = Channel(100)

        async def producer() -> None:
            for name in ('a', 'b'):
                await jobs.send(name)
            jobs.close()

        async def consumer() -> None:
            async for name in jobs:
                print(name)
        ```
    """

    __slots__ = ('_capacity', '_closed', '_receiver', '_rx', '_send_scopes', '_sender', '_tx')

    def __init__(self, capacity: int | float = math.inf) -> None:
        if capacity != math.inf and (isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0):
            msg = f'Channel capacity must be a non-negative integer or math.inf, got {capacity!r}'
            raise ValueError(msg)
        self._capacity = capacity
        self._tx, self._rx = anyio.create_memory_object_stream[T](max_buffer_size=capacity)
        self._closed = False
        self._send_scopes: set[anyio.CancelScope] = set()
        self._sender: Sender[T] | None = None
        self._receiver: Receiver[T] | None = None

    def _channel(self) -> Channel[T]:
        return self

    @property
    def sender(self) -> Sender[T]:
        """A send-only view of this channel. The same view is returned every time."""
        if self._sender is None:
            self._sender = Sender(self)
        return self._sender

    @property
    def receiver(self) -> Receiver[T]:
        """A receive-only view of this channel. The same view is returned every time."""
        if self._receiver is None:
            self._receiver = Receiver(self)
        return self._receiver

    # --- Sending ---

    async def send(self, item: T) -> bool:
        """Send an item, waiting while the buffer is full.

        Returns:
            True once the item is queued or handed to a receiver, False if
            the channel is closed before that happens.

        Raises:
            NoneValueError: If item is None.
        """
        _check_item(item)
        if self._closed:
            return False
        with anyio.CancelScope() as scope:
            self._send_scopes.add(scope)
            try:
                await self._tx.send(item)
            except (anyio.BrokenResourceError, anyio.ClosedResourceError):
                return False
            finally:
                self._send_scopes.discard(scope)
        return not scope.cancelled_caught

    def try_send(self, item: T) -> bool:
        """Send an item only if it can be queued without waiting.

        Raises:
            NoneValueError: If item is None.
        """
        _check_item(item)
        if self._closed:
            return False
        try:
            self._tx.send_nowait(item)
        except (anyio.WouldBlock, anyio.BrokenResourceError, anyio.ClosedResourceError):
            return False
        return True

    async def send_timeout(self, item: T, timeout: float) -> bool:
        """Send an item, giving up after ``timeout`` seconds.

        Returns:
            False if the channel is closed or the timeout expires first.
        """
        with anyio.move_on_after(timeout):
            return await self.send(item)
        return False

    # --- Receiving ---

    async def receive(self) -> Option[T]:
        """Wait for the next item.

        Returns:
            Some(item), or Nothing once the channel is closed and empty.
        """
        if self._closed and len(self) == 0:
            return Nothing
        try:
            return Some(await self._rx.receive())
        except anyio.EndOfStream:
            return Nothing

    def try_receive(self) -> Option[T]:
        """Return Some(item) if one is ready, otherwise Nothing. Never waits."""
        if self._closed and len(self) == 0:
            return Nothing
        try:
            return Some(self._rx.receive_nowait())
        except (anyio.WouldBlock, anyio.EndOfStream):
            return Nothing

    async def receive_timeout(self, timeout: float) -> Option[T]:
        """Wait up to ``timeout`` seconds for the next item, then give up with Nothing."""
        with anyio.move_on_after(timeout):
            return await self.receive()
        return Nothing

    def __aiter__(self) -> Self:
        return self

    async def __anext__(self) -> T:
        item = await self.receive()
        if item.is_none():
            raise StopAsyncIteration
        return item.unwrap()

    # --- Lifecycle ---

    def close(self) -> None:
        """Close the channel. Does nothing if it is already closed."""
        if self._closed:
            return
        self._closed = True
        self._tx.close()
        for scope in self._send_scopes:
            scope.cancel()
        _log.debug('channel closed', buffered=len(self), waiting_senders=len(self._send_scopes))
        self._send_scopes.clear()


class Sender[T](_ChannelView[T]):
    """The sending half of a :class:`Channel`. Obtain it from ``channel.sender``."""

    __slots__ = ('_owner',)

    _label = 'Sender'

    def __init__(self, channel: Channel[T]) -> None:
        self._owner = channel

    def _channel(self) -> Channel[T]:
        return self._owner

    async def send(self, item: T) -> bool:
        return await self._owner.send(item)

    def try_send(self, item: T) -> bool:
        return self._owner.try_send(item)

    async def send_timeout(self, item: T, timeout: float) -> bool:
        return await self._owner.send_timeout(item, timeout)


class Receiver[T](_ChannelView[T]):
    """The receiving half of a :class:`Channel`. Obtain it from ``channel.receiver``.

    Supports ``async for``, which stops once the channel is closed and drained.
    """

    __slots__ = ('_owner',)

    _label = 'Receiver'

    def __init__(self, channel: Channel[T]) -> None:
        self._owner = channel

    def _channel(self) -> Channel[T]:
        return self._owner

    async def receive(self) -> Option[T]:
        return await self._owner.receive()

    def try_receive(self) -> Option[T]:
        return self._owner.try_receive()

    async def receive_timeout(self, timeout: float) -> Option[T]:
        return await self._owner.receive_timeout(timeout)

    def __aiter__(self) -> Self:
        return self

    async def __anext__(self) -> T:
        return await self._owner.__anext__()


def _check_item(item: object) -> None:
    if item is None:
        msg = 'Channel items cannot be None; close() the channel to signal the end'
        raise NoneValueError(msg)
