"""Tests for Channel and its Sender and Receiver views."""

from __future__ import annotations

import math

import anyio
import pytest

from ferrum import NoneValueError, Nothing, Some
from ferrum.sync import Channel, Receiver, Sender


class TestChannelConstruction:
    """Capacity validation and rendering."""

    def test_default_is_unbounded(self):
        channel: Channel[int] = Channel()
        assert channel.capacity == math.inf
        assert str(channel) == 'Channel(0/∞)'

    @pytest.mark.parametrize('capacity', [-1, 1.5, True, '3'])
    def test_invalid_capacity(self, capacity):
        with pytest.raises(ValueError, match='non-negative integer'):
            Channel(capacity)

    def test_queries(self):
        channel: Channel[str] = Channel(2)
        assert channel.is_empty() is True
        assert channel.try_send('a') is True
        assert channel.try_send('b') is True
        assert len(channel) == 2
        assert channel.is_full() is True
        assert str(channel) == 'Channel(2/2)'
        channel.close()
        assert str(channel) == 'Channel(<closed>)'

    def test_rendezvous_is_always_full(self):
        channel: Channel[int] = Channel(0)
        assert channel.is_full() is True
        assert channel.try_send(1) is False


class TestChannelSendReceive:
    """Buffered and waiting transfers."""

    def test_try_send_and_try_receive_keep_order(self):
        channel: Channel[int] = Channel(3)
        for n in (1, 2, 3):
            assert channel.try_send(n) is True
        assert channel.try_send(4) is False
        assert [channel.try_receive() for _ in range(4)] == [Some(1), Some(2), Some(3), Nothing]

    def test_none_is_rejected(self):
        channel: Channel[None] = Channel()
        with pytest.raises(NoneValueError, match='close'):
            channel.try_send(None)

    @pytest.mark.anyio
    async def test_send_waits_for_space(self):
        channel: Channel[str] = Channel(1)
        await channel.send('first')
        sent = []

        async def producer():
            sent.append(await channel.send('second'))

        async with anyio.create_task_group() as tg:
            tg.start_soon(producer)
            await anyio.sleep(0.01)
            assert sent == []
            assert await channel.receive() == Some('first')

        assert sent == [True]
        assert channel.try_receive() == Some('second')

    @pytest.mark.anyio
    async def test_rendezvous_hands_off(self):
        channel: Channel[int] = Channel(0)
        received = []

        async def consumer():
            received.append(await channel.receive())

        async with anyio.create_task_group() as tg:
            tg.start_soon(consumer)
            await anyio.sleep(0.01)
            assert await channel.send(7) is True

        assert received == [Some(7)]

    @pytest.mark.anyio
    async def test_timeouts(self):
        channel: Channel[int] = Channel(1)
        assert await channel.receive_timeout(0.01) is Nothing
        assert await channel.send_timeout(1, 0.01) is True
        assert await channel.send_timeout(2, 0.01) is False
        assert await channel.receive_timeout(0.01) == Some(1)
        assert channel.is_empty() is True


class TestChannelClose:
    """Closing wakes every waiter and lets the buffer drain."""

    @pytest.mark.anyio
    async def test_buffer_drains_after_close(self):
        channel: Channel[int] = Channel()
        await channel.send(1)
        await channel.send(2)
        channel.close()
        channel.close()
        assert await channel.send(3) is False
        assert channel.try_send(3) is False
        assert await channel.receive() == Some(1)
        assert channel.try_receive() == Some(2)
        assert await channel.receive() is Nothing

    @pytest.mark.anyio
    async def test_close_wakes_waiting_senders(self):
        channel: Channel[int] = Channel(0)
        results = []

        async def producer(n):
            results.append(await channel.send(n))

        async with anyio.create_task_group() as tg:
            tg.start_soon(producer, 1)
            tg.start_soon(producer, 2)
            await anyio.sleep(0.01)
            channel.close()

        assert results == [False, False]
        assert channel.try_receive() is Nothing

    @pytest.mark.anyio
    async def test_close_wakes_waiting_receivers(self):
        channel: Channel[int] = Channel()
        results = []

        async def consumer():
            results.append(await channel.receive())

        async with anyio.create_task_group() as tg:
            tg.start_soon(consumer)
            tg.start_soon(consumer)
            await anyio.sleep(0.01)
            channel.close()

        assert results == [Nothing, Nothing]

    @pytest.mark.anyio
    async def test_async_iteration_stops_at_close(self):
        channel: Channel[int] = Channel(2)
        seen = []

        async def producer():
            for n in range(5):
                await channel.send(n)
            channel.close()

        async with anyio.create_task_group() as tg:
            tg.start_soon(producer)
            async for n in channel:
                seen.append(n)

        assert seen == [0, 1, 2, 3, 4]


class TestChannelViews:
    """Sender and Receiver share the channel's state."""

    def test_views_are_cached(self):
        channel: Channel[int] = Channel(4)
        assert isinstance(channel.sender, Sender)
        assert isinstance(channel.receiver, Receiver)
        assert channel.sender is channel.sender
        assert channel.receiver is channel.receiver

    def test_views_render_shared_state(self):
        channel: Channel[int] = Channel(4)
        channel.sender.try_send(1)
        assert str(channel.sender) == 'Sender(1/4)'
        assert str(channel.receiver) == 'Receiver(1/4)'
        assert len(channel.receiver) == 1
        channel.close()
        assert str(channel.sender) == 'Sender(<closed>)'
        assert channel.receiver.is_closed() is True

    @pytest.mark.anyio
    async def test_producers_and_consumer(self):
        channel: Channel[str] = Channel(1)
        sender, receiver = channel.sender, channel.receiver
        seen = []

        async def produce(name):
            for i in range(3):
                assert await sender.send(f'{name}{i}') is True

        async def consume():
            async for item in receiver:
                seen.append(item)

        async with anyio.create_task_group() as tg:
            tg.start_soon(consume)
            async with anyio.create_task_group() as producers:
                producers.start_soon(produce, 'a')
                producers.start_soon(produce, 'b')
            channel.close()

        assert sorted(seen) == ['a0', 'a1', 'a2', 'b0', 'b1', 'b2']
        assert [item for item in seen if item.startswith('a')] == ['a0', 'a1', 'a2']
