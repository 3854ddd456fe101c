"""Scrape Result Cache Interface"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.seat_reconciliation.domain.entity.combined_event_stats import CombinedEventStats


class IScrapeResultCache(ABC):
    @abstractmethod
    def get(self, *, event_id: str) -> Optional[CombinedEventStats]:
        """Cached stats, None when missing or older than the freshness window"""
        pass

    @abstractmethod
    def set(self, *, event_id: str, stats: CombinedEventStats) -> None:
        pass

    @abstractmethod
    def invalidate(self, *, event_id: str) -> None:
        pass
