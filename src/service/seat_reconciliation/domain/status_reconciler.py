"""
Status Reconciler

Merges the free/taken reports of every vendor aligned to a canonical sector into one
status per seat. The canonical sector's seats are the whole universe: seats only
another vendor knows about are not tracked. A vendor not aligned to the sector
contributes None (unknown) for every seat, never "taken".
"""

from typing import Mapping, Optional

import attrs

from src.service.seat_reconciliation.domain.entity.source_stats import SectorStats
from src.service.seat_reconciliation.domain.enum import (
    VENDOR_PRIORITY,
    ColorClass,
    SeatStatus,
    Vendor,
)
from src.service.seat_reconciliation.domain.value_object import SeatColor, normalize_seat_key


@attrs.define(frozen=True)
class SeatReconciliation:
    status_per_vendor: dict[Vendor, Optional[SeatStatus]]

    @property
    def free_vendor(self) -> Optional[Vendor]:
        """First vendor in priority order showing the seat free"""
        return next(
            (
                vendor
                for vendor in VENDOR_PRIORITY
                if self.status_per_vendor.get(vendor) == SeatStatus.FREE
            ),
            None,
        )

    @property
    def status(self) -> Optional[SeatStatus]:
        """Free if any vendor has it free, taken if reported but never free, else unknown"""
        if self.free_vendor:
            return SeatStatus.FREE
        if any(status == SeatStatus.TAKEN for status in self.status_per_vendor.values()):
            return SeatStatus.TAKEN
        return None


def _seat_statuses(sector: SectorStats) -> dict[str, SeatStatus]:
    statuses = {normalize_seat_key(seat): SeatStatus.TAKEN for seat in sector.taken_seats}
    # Free wins inside one vendor's report if a seat is listed twice
    statuses |= {normalize_seat_key(seat): SeatStatus.FREE for seat in sector.free_seats}
    return statuses


def reconcile(
    canonical_sector: SectorStats,
    aligned_reports: Mapping[Vendor, SectorStats],
) -> dict[str, SeatReconciliation]:
    """
    Map every normalized seat key of the canonical sector to each vendor's status.

    aligned_reports holds, per vendor, the sector aligned to canonical_sector;
    the reference vendor passes canonical_sector itself.
    """
    universe = list(
        dict.fromkeys(
            normalize_seat_key(seat)
            for seat in (*canonical_sector.free_seats, *canonical_sector.taken_seats)
        )
    )
    vendor_statuses = {
        vendor: _seat_statuses(sector) for vendor, sector in aligned_reports.items()
    }

    return {
        seat_key: SeatReconciliation(
            status_per_vendor={
                vendor: (
                    vendor_statuses[vendor].get(seat_key) if vendor in vendor_statuses else None
                )
                for vendor in VENDOR_PRIORITY
            }
        )
        for seat_key in universe
    }


def resolve_seat_color(
    reconciliation: SeatReconciliation,
    *,
    history_key: str,
    inferred_sold: Mapping[str, Vendor],
) -> SeatColor:
    """
    Single display color of a reconciled seat.

    history_key is "sectorName:row-seat"; inferred_sold only ever holds keys of
    sectors scraped this run.
    """
    if free_vendor := reconciliation.free_vendor:
        return SeatColor(color_class=ColorClass.FREE, vendor=free_vendor)
    if sold_by := inferred_sold.get(history_key):
        return SeatColor(color_class=ColorClass.TAKEN, vendor=sold_by)
    return SeatColor.no_data()
