from datetime import datetime
from typing import Optional

import attrs

from src.service.seat_reconciliation.domain.entity.source_stats import SourceStats, Totals
from src.service.seat_reconciliation.domain.enum import Vendor


@attrs.define(frozen=True)
class StatsDiff:
    """Non-negative increase of each vendor's taken count since the previous run"""

    taken_delta: dict[Vendor, int]
    previous_timestamp: datetime


@attrs.define(frozen=True)
class CombinedEventStats:
    """
    Result of one stats refresh for an event.

    inferred_sold maps "sectorName:row-seat" to the vendor that last showed the seat free.
    """

    event_id: str
    per_source: dict[Vendor, SourceStats]
    combined_totals: Totals
    inferred_sold: dict[str, Vendor] = attrs.field(factory=dict)
    diff: Optional[StatsDiff] = None
    title: Optional[str] = None
    date: Optional[str] = None

    def taken_counts(self) -> dict[Vendor, int]:
        return {vendor: stats.totals.taken for vendor, stats in self.per_source.items()}
