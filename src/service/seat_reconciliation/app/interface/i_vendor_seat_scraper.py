"""
Vendor Seat Scraper Interface

One implementation per vendor; navigation and page parsing stay behind this port.
"""

from abc import ABC, abstractmethod

from src.service.seat_reconciliation.app.dto.event_ref import EventRef
from src.service.seat_reconciliation.domain.enum import Vendor
from src.service.seat_reconciliation.domain.value_object import VendorSeatReport


class IVendorSeatScraper(ABC):
    @property
    @abstractmethod
    def vendor(self) -> Vendor:
        pass

    @abstractmethod
    async def scrape(self, *, event: EventRef) -> VendorSeatReport:
        """
        Collect the seat report of one event from this vendor.

        Returns:
            A report with no sectors when the vendor does not sell the event

        Raises:
            Anything: callers treat a failure as "vendor unavailable"
        """
        pass
