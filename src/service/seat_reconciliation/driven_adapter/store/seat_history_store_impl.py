import orjson

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.app.interface import ISeatHistoryStore
from src.service.seat_reconciliation.domain.enum import Vendor
from src.service.seat_reconciliation.driven_adapter.store.key_str_generator import (
    make_seat_history_key,
)
from src.service.seat_reconciliation.driven_adapter.store.record_backend import RecordBackend


class SeatHistoryStoreImpl(ISeatHistoryStore):
    """History record: {"sectorName:row-seat": "vendor", ...}"""

    def __init__(self, *, backend: RecordBackend) -> None:
        self.backend = backend

    async def load(self, *, event_id: str) -> dict[str, Vendor]:
        raw = await self.backend.get(key=make_seat_history_key(event_id=event_id))
        if raw is None:
            return {}
        try:
            data = orjson.loads(raw)
            return {str(key): Vendor(vendor) for key, vendor in data.items()}
        except (orjson.JSONDecodeError, AttributeError, ValueError) as e:
            Logger.base.warning(
                f'⚠️ [STORE] Unreadable seat history for event {event_id}, starting fresh: {e}'
            )
            return {}

    async def save(self, *, event_id: str, history: dict[str, Vendor]) -> None:
        await self.backend.set(
            key=make_seat_history_key(event_id=event_id),
            value=orjson.dumps({key: str(vendor) for key, vendor in history.items()}),
        )

    async def clear(self, *, event_id: str) -> None:
        await self.backend.delete(key=make_seat_history_key(event_id=event_id))
