from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.app.interface import ISeatOverrideStore
from src.service.seat_reconciliation.domain.entity.seat_overrides import SeatOverrides


class GetSeatOverridesUseCase:
    def __init__(self, override_store: ISeatOverrideStore) -> None:
        self.override_store = override_store

    @Logger.io
    async def execute(self, *, event_id: str) -> SeatOverrides:
        return await self.override_store.load(event_id=event_id)
