"""
Seat History Store Interface

Per-event mapping "sectorName:row-seat" -> vendor that last showed the seat free.
"""

from abc import ABC, abstractmethod

from src.service.seat_reconciliation.domain.enum import Vendor


class ISeatHistoryStore(ABC):
    @abstractmethod
    async def load(self, *, event_id: str) -> dict[str, Vendor]:
        """
        Load the seat history of an event.

        Returns:
            An empty mapping when nothing was saved yet or the record is unreadable
        """
        pass

    @abstractmethod
    async def save(self, *, event_id: str, history: dict[str, Vendor]) -> None:
        """Replace the whole history record of an event"""
        pass

    @abstractmethod
    async def clear(self, *, event_id: str) -> None:
        pass
