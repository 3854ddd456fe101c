"""
Event Stats Pipeline

One reconciliation pass for an event, free of I/O: the caller loads the previous
history and snapshot, runs the pipeline, then saves what it returns.
"""

from datetime import datetime
from typing import Mapping, Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.domain.diff_calculator import calculate_diff, next_snapshot
from src.service.seat_reconciliation.domain.entity.combined_event_stats import CombinedEventStats
from src.service.seat_reconciliation.domain.entity.source_stats import SourceStats, Totals
from src.service.seat_reconciliation.domain.entity.stats_snapshot import StatsSnapshot
from src.service.seat_reconciliation.domain.enum import VENDOR_PRIORITY, Vendor
from src.service.seat_reconciliation.domain.history_tracker import track
from src.service.seat_reconciliation.domain.source_stats_builder import (
    build_canonical_sectors,
    build_source_stats,
)
from src.service.seat_reconciliation.domain.value_object import VendorSeatReport


@attrs.define(frozen=True)
class PipelineResult:
    stats: CombinedEventStats
    history: dict[str, Vendor]
    snapshot: StatsSnapshot


def combine_totals(per_source: Mapping[Vendor, SourceStats]) -> Totals:
    combined = Totals()
    for stats in per_source.values():
        combined += stats.totals
    return combined


def run_pipeline(
    *,
    event_id: str,
    reports: Mapping[Vendor, VendorSeatReport],
    previous_history: Mapping[str, Vendor],
    previous_snapshot: Optional[StatsSnapshot],
    reference_vendor: Vendor,
    now: datetime,
    title: Optional[str] = None,
    date: Optional[str] = None,
) -> PipelineResult:
    reference_report = reports.get(reference_vendor)
    canonical_sectors = build_canonical_sectors(
        reference_report.sectors if reference_report else ()
    )

    per_source: dict[Vendor, SourceStats] = {}
    for vendor in VENDOR_PRIORITY:
        report = reports.get(vendor)
        source_stats = (
            build_source_stats(
                vendor=vendor,
                reports=report.sectors,
                canonical_sectors=canonical_sectors,
                is_reference=vendor == reference_vendor,
                final_url=report.final_url,
            )
            if report
            else None
        )
        if source_stats is None:
            Logger.base.warning(f'⚠️ [REFRESH] {vendor} returned no seat data for event {event_id}')
            continue
        per_source[vendor] = source_stats

    history_update = track(previous_history, per_source)
    Logger.base.info(
        f'📜 [HISTORY] event={event_id} entries={len(history_update.history)} '
        f'known_sectors={len(history_update.known_sectors)} '
        f'inferred_sold={len(history_update.inferred_sold)}'
    )

    current_taken = {vendor: stats.totals.taken for vendor, stats in per_source.items()}
    stats = CombinedEventStats(
        event_id=event_id,
        per_source=per_source,
        combined_totals=combine_totals(per_source),
        inferred_sold=history_update.inferred_sold,
        diff=calculate_diff(current_taken, previous_snapshot),
        title=title,
        date=date,
    )
    return PipelineResult(
        stats=stats,
        history=history_update.history,
        snapshot=next_snapshot(current_taken, previous_snapshot, now=now),
    )
