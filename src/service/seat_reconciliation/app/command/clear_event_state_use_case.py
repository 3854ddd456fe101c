from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.app.interface import (
    IScrapeResultCache,
    ISeatHistoryStore,
    ISeatOverrideStore,
)


class ClearEventStateUseCase:
    """
    Reset an event: seat history and cached stats are dropped, the stats snapshot is
    kept. Overrides are dropped only on request.
    """

    def __init__(
        self,
        history_store: ISeatHistoryStore,
        override_store: ISeatOverrideStore,
        cache: IScrapeResultCache,
    ) -> None:
        self.history_store = history_store
        self.override_store = override_store
        self.cache = cache

    @Logger.io
    async def execute(self, *, event_id: str, clear_overrides: bool = False) -> None:
        self.cache.invalidate(event_id=event_id)
        await self.history_store.clear(event_id=event_id)
        if clear_overrides:
            await self.override_store.clear(event_id=event_id)

        Logger.base.info(
            f'🧹 [HISTORY] Cleared state for event {event_id} (overrides cleared={clear_overrides})'
        )
