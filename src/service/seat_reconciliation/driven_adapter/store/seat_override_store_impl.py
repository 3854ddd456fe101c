import orjson

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.app.interface import ISeatOverrideStore
from src.service.seat_reconciliation.domain.entity.seat_overrides import SeatOverrides
from src.service.seat_reconciliation.driven_adapter.store.key_str_generator import (
    make_seat_overrides_key,
)
from src.service.seat_reconciliation.driven_adapter.store.record_backend import RecordBackend


class SeatOverrideStoreImpl(ISeatOverrideStore):
    def __init__(self, *, backend: RecordBackend) -> None:
        self.backend = backend

    async def load(self, *, event_id: str) -> SeatOverrides:
        raw = await self.backend.get(key=make_seat_overrides_key(event_id=event_id))
        if raw is None:
            return SeatOverrides.empty(event_id)
        try:
            return SeatOverrides.from_dict(orjson.loads(raw))
        except (orjson.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            Logger.base.warning(
                f'⚠️ [STORE] Unreadable overrides for event {event_id}, treating as empty: {e}'
            )
            return SeatOverrides.empty(event_id)

    async def save(self, *, overrides: SeatOverrides) -> None:
        await self.backend.set(
            key=make_seat_overrides_key(event_id=overrides.event_id),
            value=orjson.dumps(overrides.to_dict()),
        )

    async def clear(self, *, event_id: str) -> None:
        await self.backend.delete(key=make_seat_overrides_key(event_id=event_id))
