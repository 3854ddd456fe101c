from typing import Optional

from src.platform.state.kvrocks_client import kvrocks_client
from src.service.seat_reconciliation.driven_adapter.store.record_backend import RecordBackend


class KvrocksRecordBackend(RecordBackend):
    """Records as plain string values in Kvrocks (client must be initialized at startup)"""

    async def get(self, *, key: str) -> Optional[bytes]:
        client = kvrocks_client.get_client()
        value = await client.get(key)
        if value is None:
            return None
        return value.encode() if isinstance(value, str) else value

    async def set(self, *, key: str, value: bytes) -> None:
        client = kvrocks_client.get_client()
        await client.set(key, value)

    async def delete(self, *, key: str) -> None:
        client = kvrocks_client.get_client()
        await client.delete(key)
