"""
History Tracker

Keeps, per event, the vendor that last showed each seat free and infers which of
those seats sold since. Inference only happens for sectors that returned seat data
in this run: a failed scrape must never read as "everything sold".
"""

from typing import Mapping

import attrs

from src.service.seat_reconciliation.domain.entity.source_stats import SourceStats
from src.service.seat_reconciliation.domain.enum import VENDOR_PRIORITY, Vendor
from src.service.seat_reconciliation.domain.value_object import normalize_seat_key


HISTORY_KEY_SEPARATOR = ':'


def build_history_key(sector_name: str, seat_key: str) -> str:
    return f'{sector_name}{HISTORY_KEY_SEPARATOR}{seat_key}'


def history_key_sector(history_key: str) -> str:
    # Sector names may contain ":", seat keys never do
    return history_key.rpartition(HISTORY_KEY_SEPARATOR)[0]


@attrs.define(frozen=True)
class HistoryUpdate:
    history: dict[str, Vendor]
    inferred_sold: dict[str, Vendor]
    known_sectors: frozenset[str]


def track(
    previous_history: Mapping[str, Vendor],
    per_source: Mapping[Vendor, SourceStats],
) -> HistoryUpdate:
    history = dict(previous_history)
    current_free: set[str] = set()
    known_sectors: set[str] = set()

    # Lowest priority first so the highest priority vendor is the last writer
    for vendor in reversed(VENDOR_PRIORITY):
        if (stats := per_source.get(vendor)) is None:
            continue
        for sector in stats.sectors:
            if not sector.has_seats:
                continue
            known_sectors.add(sector.sector_name)
            for seat in sector.free_seats:
                key = build_history_key(sector.sector_name, normalize_seat_key(seat))
                current_free.add(key)
                history[key] = vendor

    inferred_sold = {
        key: vendor
        for key, vendor in history.items()
        if key not in current_free and history_key_sector(key) in known_sectors
    }
    return HistoryUpdate(
        history=history,
        inferred_sold=inferred_sold,
        known_sectors=frozenset(known_sectors),
    )
