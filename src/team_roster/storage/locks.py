"""Per-key locks for read-modify-write cycles."""

import asyncio
from contextlib import AsyncExitStack, asynccontextmanager
from typing import AsyncIterator


class KeyLocks:
    """Registry of ``asyncio.Lock`` objects keyed by storage key.

    Only coordinates coroutines sharing this instance (one process). Keys are
    acquired in the order given, so callers must always pass the index key
    before any roster key.

    A lock lives only while some coroutine holds or waits for it; the entry is
    dropped when the last one leaves, so arbitrary keys do not accumulate.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    def is_locked(self, key: str) -> bool:
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    @asynccontextmanager
    async def _hold_one(self, key: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if not self._holders[key]:
                del self._holders[key]
                del self._locks[key]

    @asynccontextmanager
    async def hold(self, *keys: str) -> AsyncIterator[None]:
        """Hold the locks for ``keys`` for the duration of the block."""
        if not self.enabled:
            yield
            return

        async with AsyncExitStack() as stack:
            for key in dict.fromkeys(keys):
                await stack.enter_async_context(self._hold_one(key))
            yield
