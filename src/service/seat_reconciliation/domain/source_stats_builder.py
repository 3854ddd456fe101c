"""
Source Stats Builder

Turns one vendor's raw sector reports into SourceStats, naming every sector either
after the canonical sector it aligns to or with a synthetic "Sektor N" label.
Unaligned labels carry the vendor name so their seats never share history keys
with a canonical sector.
"""

from typing import Optional, Sequence

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.domain.entity.source_stats import (
    SectorStats,
    SourceStats,
    Totals,
)
from src.service.seat_reconciliation.domain.enum import Vendor
from src.service.seat_reconciliation.domain.sector_aligner import align
from src.service.seat_reconciliation.domain.value_object import RawSectorReport, RowStats


def synthetic_sector_name(index: int) -> str:
    """1-based index of the report within the vendor's report list"""
    return f'Sektor {index}'


def unaligned_sector_name(vendor: Vendor, index: int) -> str:
    return f'{vendor} {synthetic_sector_name(index)}'


def _to_sector_stats(report: RawSectorReport, *, sector_name: str, aligned: bool) -> SectorStats:
    return SectorStats(
        sector_name=sector_name,
        rows=dict(report.rows),
        free_seats=report.free_seats,
        taken_seats=report.taken_seats,
        totals=Totals.from_seat_lists(report.free_seats, report.taken_seats),
        aligned=aligned,
    )


def _with_seats(reports: Sequence[RawSectorReport]) -> list[RawSectorReport]:
    return [report for report in reports if report.has_seats]


def build_canonical_sectors(reference_reports: Sequence[RawSectorReport]) -> list[SectorStats]:
    """The reference vendor's sectors keep their own names"""
    return [
        _to_sector_stats(
            report, sector_name=report.sector_name or synthetic_sector_name(index), aligned=True
        )
        for index, report in enumerate(_with_seats(reference_reports), start=1)
    ]


def _resolve_sectors(
    vendor: Vendor,
    reports: list[RawSectorReport],
    canonical_sectors: Sequence[SectorStats],
) -> list[SectorStats]:
    # A single report is the whole event, nothing to disambiguate
    if len(reports) == 1:
        if len(canonical_sectors) == 1:
            return [
                _to_sector_stats(
                    reports[0], sector_name=canonical_sectors[0].sector_name, aligned=True
                )
            ]
        return [
            _to_sector_stats(
                reports[0], sector_name=unaligned_sector_name(vendor, 1), aligned=False
            )
        ]

    claimed: set[str] = set()
    sectors: list[SectorStats] = []
    for index, report in enumerate(reports, start=1):
        matched = align(report, canonical_sectors, claimed) if canonical_sectors else None
        if matched is None:
            Logger.base.warning(
                f'⚠️ [ALIGN] {vendor} sector #{index} has no canonical match, '
                f'using {unaligned_sector_name(vendor, index)}'
            )
            sectors.append(
                _to_sector_stats(
                    report, sector_name=unaligned_sector_name(vendor, index), aligned=False
                )
            )
        else:
            sectors.append(_to_sector_stats(report, sector_name=matched.sector_name, aligned=True))
    return sectors


def build_source_stats(
    *,
    vendor: Vendor,
    reports: Sequence[RawSectorReport],
    canonical_sectors: Sequence[SectorStats],
    is_reference: bool,
    final_url: Optional[str] = None,
) -> Optional[SourceStats]:
    """None when the vendor returned no seat data (vendor unavailable)"""
    usable = _with_seats(reports)
    if not usable:
        return None

    if is_reference:
        sectors = build_canonical_sectors(usable)
    else:
        sectors = _resolve_sectors(vendor, usable, canonical_sectors)

    rows: dict[str, RowStats] = {}
    free_seats: list[str] = []
    taken_seats: list[str] = []
    for sector in sectors:
        for row, row_stats in sector.rows.items():
            rows[row] = rows.get(row, RowStats()) + row_stats
        free_seats.extend(sector.free_seats)
        taken_seats.extend(sector.taken_seats)

    return SourceStats(
        vendor=vendor,
        totals=Totals.from_seat_lists(tuple(free_seats), tuple(taken_seats)),
        rows=rows,
        free_seats=tuple(free_seats),
        taken_seats=tuple(taken_seats),
        sectors=tuple(sectors),
        final_url=final_url,
    )
