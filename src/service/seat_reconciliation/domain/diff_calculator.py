"""
Diff Calculator

Period-over-period increase of each vendor's taken count. Decreases (corrections,
released holds) are clamped to zero. A vendor missing from either side has delta
zero and keeps its previous count in the next snapshot, so a scrape failure never
turns into a spike on the following run.
"""

from datetime import datetime
from typing import Mapping, Optional

from src.service.seat_reconciliation.domain.entity.combined_event_stats import StatsDiff
from src.service.seat_reconciliation.domain.entity.stats_snapshot import StatsSnapshot
from src.service.seat_reconciliation.domain.enum import Vendor


def calculate_diff(
    current: Mapping[Vendor, int], previous: Optional[StatsSnapshot]
) -> Optional[StatsDiff]:
    if previous is None:
        return None

    taken_delta = {
        vendor: (
            max(0, current[vendor] - previous.taken[vendor])
            if vendor in current and vendor in previous.taken
            else 0
        )
        for vendor in Vendor
    }
    return StatsDiff(taken_delta=taken_delta, previous_timestamp=previous.timestamp)


def next_snapshot(
    current: Mapping[Vendor, int], previous: Optional[StatsSnapshot], *, now: datetime
) -> StatsSnapshot:
    carried = dict(previous.taken) if previous else {}
    return StatsSnapshot(taken=carried | dict(current), timestamp=now)
