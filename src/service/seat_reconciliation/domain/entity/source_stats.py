from typing import Optional

import attrs

from src.service.seat_reconciliation.domain.enum import Vendor
from src.service.seat_reconciliation.domain.value_object import RowStats


@attrs.define(frozen=True)
class Totals:
    total: int = 0
    free: int = 0
    taken: int = 0

    @classmethod
    def from_seat_lists(cls, free_seats: tuple[str, ...], taken_seats: tuple[str, ...]) -> 'Totals':
        return cls(
            total=len(free_seats) + len(taken_seats),
            free=len(free_seats),
            taken=len(taken_seats),
        )

    def __add__(self, other: 'Totals') -> 'Totals':
        return Totals(
            total=self.total + other.total,
            free=self.free + other.free,
            taken=self.taken + other.taken,
        )


@attrs.define(frozen=True)
class SectorStats:
    """One vendor's seats in one named sector, after alignment"""

    sector_name: str
    rows: dict[str, RowStats]
    free_seats: tuple[str, ...]
    taken_seats: tuple[str, ...]
    totals: Totals
    aligned: bool = True  # False when the name is a vendor-scoped "Sektor N" fallback

    @property
    def has_seats(self) -> bool:
        return bool(self.free_seats or self.taken_seats)


@attrs.define(frozen=True)
class SourceStats:
    """Aggregated totals, row table and seat lists for one vendor"""

    vendor: Vendor
    totals: Totals
    rows: dict[str, RowStats]
    free_seats: tuple[str, ...]
    taken_seats: tuple[str, ...]
    sectors: tuple[SectorStats, ...] = ()
    final_url: Optional[str] = None

    @property
    def is_multi_sector(self) -> bool:
        return len(self.sectors) > 1

    def sector(self, sector_name: str) -> Optional[SectorStats]:
        return next((s for s in self.sectors if s.sector_name == sector_name), None)
