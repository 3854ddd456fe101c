"""
Seat Map Builder

Display statistics of an event: one color per seat, rows and seats in reading order,
and per-color counts. The reference vendor's sectors define which seats exist; when
it has no data, every vendor sector is shown on its own.
"""

import re
from typing import Iterable, Mapping, Optional

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.domain.entity.combined_event_stats import CombinedEventStats
from src.service.seat_reconciliation.domain.entity.seat_map import (
    ColorStats,
    EventSeatMap,
    SeatCell,
    SeatMapRow,
    SectorSeatMap,
    build_override_key,
)
from src.service.seat_reconciliation.domain.entity.source_stats import SectorStats
from src.service.seat_reconciliation.domain.enum import VENDOR_PRIORITY, Vendor
from src.service.seat_reconciliation.domain.history_tracker import build_history_key
from src.service.seat_reconciliation.domain.override_merger import merge_seat_color
from src.service.seat_reconciliation.domain.status_reconciler import reconcile, resolve_seat_color
from src.service.seat_reconciliation.domain.value_object import SeatColor
from src.service.seat_reconciliation.domain.value_object.seat_key import SEAT_KEY_SEPARATOR


_ASCII_NUMBER = re.compile(r'[0-9]+')
_LEADING_NUMBER = re.compile(r'^\s*([0-9]+)')


def _numeric_key(digits: str) -> tuple[int, str]:
    # Length then text orders digit strings numerically without int()
    stripped = digits.lstrip('0') or '0'
    return (len(stripped), stripped)


def row_sort_key(row: str) -> tuple[int, int, str]:
    """Numeric rows first in numeric order, then text rows alphabetically"""
    if _ASCII_NUMBER.fullmatch(row):
        return (0, *_numeric_key(row))
    return (1, 0, row.casefold())


def seat_sort_key(seat_label: str) -> tuple[int, str, str]:
    match = _LEADING_NUMBER.match(seat_label)
    if match is None:
        return (0, '', seat_label)
    return (*_numeric_key(match.group(1)), seat_label)


def _layout(
    stats: CombinedEventStats, reference_vendor: Vendor
) -> list[tuple[SectorStats, dict[Vendor, SectorStats]]]:
    """Canonical sector with the vendor sectors aligned to it, per displayed sector"""
    reference = stats.per_source.get(reference_vendor)
    if reference and reference.sectors:
        layout = []
        for canonical in reference.sectors:
            aligned: dict[Vendor, SectorStats] = {reference_vendor: canonical}
            for vendor, source in stats.per_source.items():
                if vendor == reference_vendor:
                    continue
                sector = source.sector(canonical.sector_name)
                if sector is not None and sector.aligned:
                    aligned[vendor] = sector
            layout.append((canonical, aligned))
        return layout

    Logger.base.warning(
        f'⚠️ [ALIGN] No {reference_vendor} layout for event {stats.event_id}, '
        'showing every vendor sector on its own'
    )
    return [
        (sector, {vendor: sector})
        for vendor in VENDOR_PRIORITY
        if (source := stats.per_source.get(vendor)) is not None
        for sector in source.sectors
    ]


def _sector_seat_map(
    canonical: SectorStats,
    aligned: Mapping[Vendor, SectorStats],
    *,
    inferred_sold: Mapping[str, Vendor],
    multi_sector: bool,
) -> SectorSeatMap:
    rows: dict[str, list[SeatCell]] = {}
    for seat_key, reconciliation in reconcile(canonical, aligned).items():
        row, _, seat_label = seat_key.partition(SEAT_KEY_SEPARATOR)
        color = resolve_seat_color(
            reconciliation,
            history_key=build_history_key(canonical.sector_name, seat_key),
            inferred_sold=inferred_sold,
        )
        rows.setdefault(row, []).append(
            SeatCell(
                seat_key=seat_key,
                seat_label=seat_label,
                color=color,
                override_key=build_override_key(
                    sector_name=canonical.sector_name, seat_key=seat_key, multi_sector=multi_sector
                ),
            )
        )

    return SectorSeatMap(
        sector_name=canonical.sector_name,
        rows=tuple(
            SeatMapRow(
                row=row,
                seats=tuple(sorted(rows[row], key=lambda cell: seat_sort_key(cell.seat_label))),
            )
            for row in sorted(rows, key=row_sort_key)
        ),
    )


def build_seat_map(stats: CombinedEventStats, *, reference_vendor: Vendor) -> EventSeatMap:
    layout = _layout(stats, reference_vendor)
    multi_sector = len(layout) > 1
    sectors = tuple(
        _sector_seat_map(
            canonical,
            aligned,
            inferred_sold=stats.inferred_sold,
            multi_sector=multi_sector,
        )
        for canonical, aligned in layout
    )
    return EventSeatMap(
        event_id=stats.event_id,
        multi_sector=multi_sector,
        sectors=sectors,
        color_stats=ColorStats.count(cell.color for sector in sectors for cell in sector.cells()),
    )


def parse_overrides(overrides: Mapping[str, str]) -> dict[str, SeatColor]:
    """Unknown tokens are skipped"""
    parsed: dict[str, SeatColor] = {}
    for key, token in overrides.items():
        if (color := SeatColor.parse_token(token)) is None:
            Logger.base.warning(f'⚠️ [OVERRIDE] Ignoring unknown color token {token!r} for {key}')
            continue
        parsed[key] = color
    return parsed


def _merge_rows(
    rows: Iterable[SeatMapRow], overrides: Mapping[str, SeatColor]
) -> tuple[SeatMapRow, ...]:
    return tuple(
        SeatMapRow(
            row=row.row,
            seats=tuple(
                SeatCell(
                    seat_key=cell.seat_key,
                    seat_label=cell.seat_label,
                    color=merge_seat_color(cell.color, overrides.get(cell.override_key)),
                    override_key=cell.override_key,
                )
                for cell in row.seats
            ),
        )
        for row in rows
    )


def apply_overrides(
    seat_map: EventSeatMap, overrides: Optional[Mapping[str, str]]
) -> EventSeatMap:
    if not overrides:
        return seat_map

    parsed = parse_overrides(overrides)
    sectors = tuple(
        SectorSeatMap(sector_name=sector.sector_name, rows=_merge_rows(sector.rows, parsed))
        for sector in seat_map.sectors
    )
    return EventSeatMap(
        event_id=seat_map.event_id,
        multi_sector=seat_map.multi_sector,
        sectors=sectors,
        color_stats=ColorStats.count(cell.color for sector in sectors for cell in sector.cells()),
    )
