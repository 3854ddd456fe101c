from contextlib import asynccontextmanager
from typing import AsyncIterator

from src.platform.exception.exceptions import RefreshInProgressError
from src.platform.state.distributed_lock import DistributedLock
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.seat_reconciliation.app.interface import IEventRefreshLock
from src.service.seat_reconciliation.driven_adapter.store.key_str_generator import (
    make_refresh_lock_key,
)


class KvrocksEventRefreshLock(IEventRefreshLock):
    """
    Refresh lock shared by every worker process.

    Fails fast with RefreshInProgressError instead of waiting. The TTL bounds how long
    a crashed worker can block an event.
    """

    def __init__(self, *, ttl_seconds: int) -> None:
        self.ttl_seconds = ttl_seconds

    @asynccontextmanager
    async def hold(self, *, event_id: str) -> AsyncIterator[None]:
        lock = DistributedLock(client=kvrocks_client.get_client())
        key = make_refresh_lock_key(event_id=event_id)

        token = await lock.acquire_lock(key=key, ttl=self.ttl_seconds)
        if token is None:
            raise RefreshInProgressError(event_id)
        try:
            yield
        finally:
            await lock.release_lock(key=key, token=token)
