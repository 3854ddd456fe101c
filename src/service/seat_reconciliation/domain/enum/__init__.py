"""Seat Reconciliation Enums"""

from src.service.seat_reconciliation.domain.enum.color_class import ColorClass
from src.service.seat_reconciliation.domain.enum.seat_status import SeatStatus
from src.service.seat_reconciliation.domain.enum.vendor import VENDOR_PRIORITY, Vendor

__all__ = ['VENDOR_PRIORITY', 'ColorClass', 'SeatStatus', 'Vendor']
