from typing import Optional

from src.service.seat_reconciliation.driven_adapter.store.record_backend import RecordBackend


class InMemoryRecordBackend(RecordBackend):
    """Process-local records, lost on restart"""

    def __init__(self) -> None:
        self._records: dict[str, bytes] = {}

    async def get(self, *, key: str) -> Optional[bytes]:
        return self._records.get(key)

    async def set(self, *, key: str, value: bytes) -> None:
        self._records[key] = value

    async def delete(self, *, key: str) -> None:
        self._records.pop(key, None)
