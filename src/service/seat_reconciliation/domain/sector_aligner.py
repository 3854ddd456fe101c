"""
Sector Aligner

Matches a vendor's sector to one of the reference vendor's (canonical) sectors by
structure: row count, seat count and row-name overlap. Matching is greedy in report
order; a canonical sector claimed by one vendor sector cannot be claimed again.
"""

from typing import Optional, Sequence

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.domain.entity.source_stats import SectorStats
from src.service.seat_reconciliation.domain.row_name_normalizer import normalize_row_name
from src.service.seat_reconciliation.domain.value_object import RawSectorReport


MAX_ROW_COUNT_REL_DIFF = 0.3
MIN_MATCH_SCORE = 50.0

ROW_COUNT_POINTS = 30.0
SEAT_COUNT_POINTS = 30.0
ROW_NAME_POINTS = 40.0
ROW_COUNT_PENALTY = 100.0
SEAT_COUNT_PENALTY = 150.0


def _relative_diff(a: int, b: int) -> float:
    return abs(a - b) / max(a, b, 1)


def score(vendor_sector: RawSectorReport, canonical: SectorStats) -> Optional[float]:
    """
    Structural similarity in [0, 100].

    Returns None when the row counts differ by more than 30% of the larger one;
    such a pair is never a candidate.
    """
    vendor_row_count = len(vendor_sector.rows)
    canonical_row_count = len(canonical.rows)
    row_count_diff = _relative_diff(vendor_row_count, canonical_row_count)
    if row_count_diff > MAX_ROW_COUNT_REL_DIFF:
        return None

    if vendor_row_count == canonical_row_count:
        row_points = ROW_COUNT_POINTS
    else:
        row_points = max(0.0, ROW_COUNT_POINTS - row_count_diff * ROW_COUNT_PENALTY)

    vendor_seats = vendor_sector.total_seats
    canonical_seats = canonical.totals.total
    if vendor_seats == canonical_seats:
        seat_points = SEAT_COUNT_POINTS
    else:
        seat_diff = _relative_diff(vendor_seats, canonical_seats)
        seat_points = max(0.0, SEAT_COUNT_POINTS - seat_diff * SEAT_COUNT_PENALTY)

    vendor_rows = vendor_sector.normalized_row_names
    canonical_rows = {normalize_row_name(row) for row in canonical.rows}
    overlap = len(vendor_rows & canonical_rows) / max(len(vendor_rows), 1)

    return row_points + seat_points + overlap * ROW_NAME_POINTS


def align(
    vendor_sector: RawSectorReport,
    canonical_sectors: Sequence[SectorStats],
    already_claimed: set[str],
) -> Optional[SectorStats]:
    """
    Best unclaimed canonical sector scoring at least 50, or None.

    The accepted sector's name is added to already_claimed. Ties go to the
    canonical sector listed first.
    """
    best_match: Optional[SectorStats] = None
    best_score = 0.0

    for canonical in canonical_sectors:
        if canonical.sector_name in already_claimed:
            continue
        candidate_score = score(vendor_sector, canonical)
        if candidate_score is None:
            continue
        Logger.base.debug(
            f'🧩 [ALIGN] {len(vendor_sector.rows)} rows/{vendor_sector.total_seats} seats vs '
            f'{canonical.sector_name} ({len(canonical.rows)} rows/{canonical.totals.total} seats) '
            f'score={candidate_score:.1f}'
        )
        if candidate_score > best_score:
            best_score = candidate_score
            best_match = canonical

    if best_match is None or best_score < MIN_MATCH_SCORE:
        Logger.base.debug(f'🧩 [ALIGN] No match (best score={best_score:.1f})')
        return None

    already_claimed.add(best_match.sector_name)
    return best_match
