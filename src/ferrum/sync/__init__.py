"""Synchronization primitives: Once, Lazy, LazyAsync, Mutex, RwLock, Channel."""

from ferrum.sync.channel import Channel, Receiver, Sender
from ferrum.sync.lazy import Lazy, LazyAsync
from ferrum.sync.mutex import Mutex, MutexGuard
from ferrum.sync.once import Once
from ferrum.sync.rwlock import RwLock, RwLockReadGuard, RwLockWriteGuard

__all__ = [
    'Channel',
    'Lazy',
    'LazyAsync',
    'Mutex',
    'MutexGuard',
    'Once',
    'Receiver',
    'RwLock',
    'RwLockReadGuard',
    'RwLockWriteGuard',
    'Sender',
]
