"""Event Reference DTO"""

from typing import Optional

import attrs

from src.service.seat_reconciliation.domain.enum import Vendor


@attrs.define(frozen=True)
class EventRef:
    """Event as grouped across vendors, with each vendor's event page"""

    event_id: str
    title: Optional[str] = None
    date: Optional[str] = None
    vendor_urls: dict[Vendor, str] = attrs.field(factory=dict)

    def sold_by(self, vendor: Vendor) -> bool:
        return vendor in self.vendor_urls
