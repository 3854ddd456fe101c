from typing import Mapping

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.app.interface import IScrapeResultCache, ISeatOverrideStore
from src.service.seat_reconciliation.domain.entity.seat_overrides import SeatOverrides
from src.service.seat_reconciliation.domain.seat_map_builder import parse_overrides


class SaveSeatOverridesUseCase:
    """
    Replace the manual seat colors of an event.

    Unknown color tokens are dropped. When fresh stats are cached, their vendor taken
    counts are stored with the overrides.
    """

    def __init__(self, override_store: ISeatOverrideStore, cache: IScrapeResultCache) -> None:
        self.override_store = override_store
        self.cache = cache

    @Logger.io
    async def execute(self, *, event_id: str, overrides: Mapping[str, str]) -> SeatOverrides:
        valid = {key: color.token for key, color in parse_overrides(overrides).items()}
        cached = self.cache.get(event_id=event_id)

        record = SeatOverrides.create(
            event_id=event_id,
            overrides=valid,
            stats_snapshot=cached.taken_counts() if cached else None,
        )
        await self.override_store.save(overrides=record)

        Logger.base.info(
            f'🎨 [OVERRIDE] Saved {len(valid)} overrides for event {event_id} '
            f'({len(overrides) - len(valid)} ignored)'
        )
        return record
