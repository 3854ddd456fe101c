from typing import Iterable

import attrs

from src.service.seat_reconciliation.domain.enum import ColorClass, Vendor
from src.service.seat_reconciliation.domain.value_object import SeatColor


OVERRIDE_SECTOR_SEPARATOR = '::'


def build_override_key(*, sector_name: str, seat_key: str, multi_sector: bool) -> str:
    return f'{sector_name}{OVERRIDE_SECTOR_SEPARATOR}{seat_key}' if multi_sector else seat_key


@attrs.define(frozen=True)
class SeatCell:
    seat_key: str
    seat_label: str
    color: SeatColor
    override_key: str


@attrs.define(frozen=True)
class SeatMapRow:
    row: str
    seats: tuple[SeatCell, ...]


@attrs.define(frozen=True)
class SectorSeatMap:
    sector_name: str
    rows: tuple[SeatMapRow, ...]

    def cells(self) -> Iterable[SeatCell]:
        for row in self.rows:
            yield from row.seats


@attrs.define(frozen=True)
class ColorStats:
    """Seat counts per display color"""

    free: dict[Vendor, int]
    taken: dict[Vendor, int]
    no_data: int = 0
    not_for_sale: int = 0
    other_channel: int = 0
    box_office: int = 0

    @property
    def total(self) -> int:
        return (
            sum(self.free.values())
            + sum(self.taken.values())
            + self.no_data
            + self.not_for_sale
            + self.other_channel
            + self.box_office
        )

    @classmethod
    def count(cls, colors: Iterable[SeatColor]) -> 'ColorStats':
        free = {vendor: 0 for vendor in Vendor}
        taken = {vendor: 0 for vendor in Vendor}
        special = {
            ColorClass.NO_DATA: 0,
            ColorClass.NOT_FOR_SALE: 0,
            ColorClass.OTHER_CHANNEL: 0,
            ColorClass.BOX_OFFICE: 0,
        }
        for color in colors:
            if color.color_class == ColorClass.FREE and color.vendor:
                free[color.vendor] += 1
            elif color.color_class == ColorClass.TAKEN and color.vendor:
                taken[color.vendor] += 1
            elif color.color_class in special:
                special[color.color_class] += 1
            else:
                special[ColorClass.NO_DATA] += 1
        return cls(
            free=free,
            taken=taken,
            no_data=special[ColorClass.NO_DATA],
            not_for_sale=special[ColorClass.NOT_FOR_SALE],
            other_channel=special[ColorClass.OTHER_CHANNEL],
            box_office=special[ColorClass.BOX_OFFICE],
        )


@attrs.define(frozen=True)
class EventSeatMap:
    """Display seat map of an event, one entry per sector"""

    event_id: str
    multi_sector: bool
    sectors: tuple[SectorSeatMap, ...]
    color_stats: ColorStats

    def cells(self) -> Iterable[SeatCell]:
        for sector in self.sectors:
            yield from sector.cells()
