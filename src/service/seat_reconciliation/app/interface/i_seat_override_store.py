"""
Seat Override Store Interface

Manual seat colors live independently of scrape data and survive cache resets.
"""

from abc import ABC, abstractmethod

from src.service.seat_reconciliation.domain.entity.seat_overrides import SeatOverrides


class ISeatOverrideStore(ABC):
    @abstractmethod
    async def load(self, *, event_id: str) -> SeatOverrides:
        """Empty overrides when nothing was saved or the record is unreadable"""
        pass

    @abstractmethod
    async def save(self, *, overrides: SeatOverrides) -> None:
        pass

    @abstractmethod
    async def clear(self, *, event_id: str) -> None:
        pass
