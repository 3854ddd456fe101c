"""Vendor Seat Report Value Object"""

from typing import Optional

import attrs

from src.service.seat_reconciliation.domain.enum import Vendor
from src.service.seat_reconciliation.domain.value_object.raw_sector_report import RawSectorReport


@attrs.define(frozen=True)
class VendorSeatReport:
    """Everything one vendor's scraper returned for one event in one run"""

    vendor: Vendor
    sectors: tuple[RawSectorReport, ...] = attrs.field(default=(), converter=tuple)
    final_url: Optional[str] = None  # Attribution only, never reconciled

    @classmethod
    def unavailable(cls, vendor: Vendor) -> 'VendorSeatReport':
        return cls(vendor=vendor)
