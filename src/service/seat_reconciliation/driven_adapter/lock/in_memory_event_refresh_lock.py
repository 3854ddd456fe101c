from contextlib import asynccontextmanager
from typing import AsyncIterator

import anyio

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.app.interface import IEventRefreshLock


class InMemoryEventRefreshLock(IEventRefreshLock):
    """One anyio.Lock per event; a second refresh of the same event waits for the first"""

    def __init__(self) -> None:
        self._locks: dict[str, anyio.Lock] = {}

    @asynccontextmanager
    async def hold(self, *, event_id: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(event_id, anyio.Lock())
        if lock.locked():
            Logger.base.info(f'⏳ [LOCK] Waiting for running refresh of event {event_id}')
        try:
            async with lock:
                yield
        finally:
            # Idle events leave no entry behind
            if (
                not lock.locked()
                and not lock.statistics().tasks_waiting
                and self._locks.get(event_id) is lock
            ):
                del self._locks[event_id]
