"""Per-client asyncio locks that serialize score recalculation for the same client."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class ClientLockRegistry:
    """Hands out one lock per client id.

    Recalculations for different clients never contend; recalculations for
    the same client run one at a time so each ``score_change`` is computed
    against the record written immediately before it. Locks are released
    from the registry once no task holds or waits on them.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._waiters: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, client_id: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(client_id, asyncio.Lock())
        self._waiters[client_id] = self._waiters.get(client_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._waiters[client_id] -= 1
            if self._waiters[client_id] == 0:
                del self._waiters[client_id]
                del self._locks[client_id]

    def __len__(self) -> int:
        return len(self._locks)
