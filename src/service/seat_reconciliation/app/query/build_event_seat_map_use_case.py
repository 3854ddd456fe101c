from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.app.interface import ISeatOverrideStore
from src.service.seat_reconciliation.domain.entity.combined_event_stats import CombinedEventStats
from src.service.seat_reconciliation.domain.entity.seat_map import EventSeatMap
from src.service.seat_reconciliation.domain.enum import Vendor
from src.service.seat_reconciliation.domain.seat_map_builder import apply_overrides, build_seat_map


class BuildEventSeatMapUseCase:
    """Seat map of an event with its saved overrides merged in"""

    def __init__(self, override_store: ISeatOverrideStore, reference_vendor: Vendor) -> None:
        self.override_store = override_store
        self.reference_vendor = reference_vendor

    @Logger.io
    async def execute(
        self, *, stats: CombinedEventStats, with_overrides: bool = True
    ) -> EventSeatMap:
        seat_map = build_seat_map(stats, reference_vendor=self.reference_vendor)
        if not with_overrides:
            return seat_map

        record = await self.override_store.load(event_id=stats.event_id)
        return apply_overrides(seat_map, record.overrides)
