"""
Raw Sector Report Value Object

One vendor's view of one physical sector, exactly as the scraper produced it.
Seat lists hold raw "row-seat" strings; row labels are the vendor's own labels.
"""

from typing import Iterable, Optional

import attrs

from src.service.seat_reconciliation.domain.row_name_normalizer import normalize_row_name
from src.service.seat_reconciliation.domain.value_object.row_stats import RowStats
from src.service.seat_reconciliation.domain.value_object.seat_key import SEAT_KEY_SEPARATOR


@attrs.define(frozen=True)
class RawSectorReport:
    """Raw Sector Report (Value Object)"""

    sector_name: Optional[str]
    rows: dict[str, RowStats] = attrs.field(factory=dict)
    free_seats: tuple[str, ...] = attrs.field(default=(), converter=tuple)
    taken_seats: tuple[str, ...] = attrs.field(default=(), converter=tuple)

    @property
    def total_seats(self) -> int:
        """Seat count from the row table"""
        return sum(row.total for row in self.rows.values())

    @property
    def normalized_row_names(self) -> set[str]:
        return {normalize_row_name(row) for row in self.rows}

    @property
    def has_seats(self) -> bool:
        return bool(self.free_seats or self.taken_seats)

    @classmethod
    def from_seats(
        cls,
        *,
        sector_name: Optional[str],
        free_seats: Iterable[str],
        taken_seats: Iterable[str],
    ) -> 'RawSectorReport':
        """Build the row table from raw "row-seat" strings"""
        free = tuple(free_seats)
        taken = tuple(taken_seats)
        rows: dict[str, RowStats] = {}
        for seat_key in free:
            row = seat_key.partition(SEAT_KEY_SEPARATOR)[0]
            rows[row] = rows.get(row, RowStats()) + RowStats(total=1, free=1)
        for seat_key in taken:
            row = seat_key.partition(SEAT_KEY_SEPARATOR)[0]
            rows[row] = rows.get(row, RowStats()) + RowStats(total=1, taken=1)
        return cls(sector_name=sector_name, rows=rows, free_seats=free, taken_seats=taken)
