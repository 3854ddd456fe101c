from typing import Optional

import orjson

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.app.interface import IStatsSnapshotStore
from src.service.seat_reconciliation.domain.entity.stats_snapshot import StatsSnapshot
from src.service.seat_reconciliation.driven_adapter.store.key_str_generator import (
    make_stats_snapshot_key,
)
from src.service.seat_reconciliation.driven_adapter.store.record_backend import RecordBackend


class StatsSnapshotStoreImpl(IStatsSnapshotStore):
    def __init__(self, *, backend: RecordBackend) -> None:
        self.backend = backend

    async def load(self, *, event_id: str) -> Optional[StatsSnapshot]:
        raw = await self.backend.get(key=make_stats_snapshot_key(event_id=event_id))
        if raw is None:
            return None
        try:
            return StatsSnapshot.from_dict(orjson.loads(raw))
        except (orjson.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            Logger.base.warning(
                f'⚠️ [STORE] Unreadable stats snapshot for event {event_id}, ignoring: {e}'
            )
            return None

    async def save(self, *, event_id: str, snapshot: StatsSnapshot) -> None:
        await self.backend.set(
            key=make_stats_snapshot_key(event_id=event_id), value=orjson.dumps(snapshot.to_dict())
        )
