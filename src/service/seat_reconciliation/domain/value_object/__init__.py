"""Seat Reconciliation Value Objects"""

from src.service.seat_reconciliation.domain.value_object.raw_sector_report import RawSectorReport
from src.service.seat_reconciliation.domain.value_object.row_stats import RowStats
from src.service.seat_reconciliation.domain.value_object.seat_color import SeatColor
from src.service.seat_reconciliation.domain.value_object.seat_key import (
    SeatKey,
    normalize_seat_key,
)
from src.service.seat_reconciliation.domain.value_object.vendor_seat_report import (
    VendorSeatReport,
)

__all__ = [
    'RawSectorReport',
    'RowStats',
    'SeatColor',
    'SeatKey',
    'VendorSeatReport',
    'normalize_seat_key',
]
