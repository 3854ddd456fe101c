"""
Refresh Event Stats Use Case

Runs one reconciliation pass for an event under its refresh lock:
1. Load seat history and the previous stats snapshot
2. Align, reconcile, infer sold seats and diff (pure pipeline)
3. Save the new history and snapshot
"""

from datetime import datetime, timezone
from typing import Mapping

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.app.dto import EventRef
from src.service.seat_reconciliation.app.interface import (
    IEventRefreshLock,
    ISeatHistoryStore,
    IStatsSnapshotStore,
)
from src.service.seat_reconciliation.domain.entity.combined_event_stats import CombinedEventStats
from src.service.seat_reconciliation.domain.enum import Vendor
from src.service.seat_reconciliation.domain.event_stats_pipeline import run_pipeline
from src.service.seat_reconciliation.domain.value_object import VendorSeatReport


class RefreshEventStatsUseCase:
    def __init__(
        self,
        history_store: ISeatHistoryStore,
        snapshot_store: IStatsSnapshotStore,
        refresh_lock: IEventRefreshLock,
        reference_vendor: Vendor,
    ) -> None:
        self.history_store = history_store
        self.snapshot_store = snapshot_store
        self.refresh_lock = refresh_lock
        self.reference_vendor = reference_vendor
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(
        self, *, event: EventRef, reports: Mapping[Vendor, VendorSeatReport]
    ) -> CombinedEventStats:
        with self.tracer.start_as_current_span(
            'use_case.refresh_event_stats',
            attributes={
                'event.id': event.event_id,
                'vendors.reported': len(reports),
            },
        ):
            async with self.refresh_lock.hold(event_id=event.event_id):
                history = await self.history_store.load(event_id=event.event_id)
                snapshot = await self.snapshot_store.load(event_id=event.event_id)

                result = run_pipeline(
                    event_id=event.event_id,
                    reports=reports,
                    previous_history=history,
                    previous_snapshot=snapshot,
                    reference_vendor=self.reference_vendor,
                    now=datetime.now(timezone.utc),
                    title=event.title,
                    date=event.date,
                )

                await self.history_store.save(event_id=event.event_id, history=result.history)
                await self.snapshot_store.save(event_id=event.event_id, snapshot=result.snapshot)

            totals = result.stats.combined_totals
            Logger.base.info(
                f'📊 [REFRESH] event={event.event_id} vendors={len(result.stats.per_source)} '
                f'total={totals.total} free={totals.free} taken={totals.taken} '
                f'inferred_sold={len(result.stats.inferred_sold)}'
            )
            return result.stats
