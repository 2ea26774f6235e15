"""
Per-key asyncio lock.

Serializes coroutines working on the same key inside one process.
Multiple instances need a distributed lock (e.g. a Redis lease) instead.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Hashable, Tuple


class KeyedLock:
    """Map of asyncio locks keyed by an arbitrary hashable key.

    Locks are reference-counted and dropped once no coroutine holds or
    waits on them, so idle keys do not accumulate.

    Example:
        >>> lock = KeyedLock()
        >>> async with lock.acquire(("user123", date(2024, 1, 1))):
        ...     await recompute()
    """

    def __init__(self) -> None:
        # Storage: key -> (lock, holders + waiters)
        self._locks: Dict[Hashable, Tuple[asyncio.Lock, int]] = {}

    @asynccontextmanager
    async def acquire(self, key: Hashable) -> AsyncIterator[None]:
        lock, users = self._locks.get(key, (None, 0))
        if lock is None:
            lock = asyncio.Lock()
        self._locks[key] = (lock, users + 1)

        try:
            async with lock:
                yield
        finally:
            lock, users = self._locks[key]
            if users <= 1:
                del self._locks[key]
            else:
                self._locks[key] = (lock, users - 1)

    def locked(self, key: Hashable) -> bool:
        """True when some coroutine currently holds the lock for ``key``."""
        entry = self._locks.get(key)
        return entry is not None and entry[0].locked()

    def __len__(self) -> int:
        """Number of keys with a live lock (for testing)."""
        return len(self._locks)
