"""Stats Snapshot Store Interface"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.seat_reconciliation.domain.entity.stats_snapshot import StatsSnapshot


class IStatsSnapshotStore(ABC):
    @abstractmethod
    async def load(self, *, event_id: str) -> Optional[StatsSnapshot]:
        """
        Load the snapshot saved by the previous refresh.

        Returns:
            None on the first refresh of an event or when the record is unreadable
        """
        pass

    @abstractmethod
    async def save(self, *, event_id: str, snapshot: StatsSnapshot) -> None:
        pass
