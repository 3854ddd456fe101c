"""
Scrape Result Cache Implementation

Process-local cache of the last stats of each event with a freshness window.
"""

import time
from typing import Dict, Optional, TypedDict

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.app.interface import IScrapeResultCache
from src.service.seat_reconciliation.domain.entity.combined_event_stats import CombinedEventStats


class CacheEntry(TypedDict):
    data: CombinedEventStats
    fetched_at: float


class ScrapeResultCacheImpl(IScrapeResultCache):
    def __init__(self, *, ttl_seconds: float = 300.0) -> None:
        self._cache: Dict[str, CacheEntry] = {}
        self._ttl_seconds = ttl_seconds

    def _is_expired(self, *, entry: CacheEntry) -> bool:
        return time.time() - entry['fetched_at'] > self._ttl_seconds

    def get(self, *, event_id: str) -> Optional[CombinedEventStats]:
        entry = self._cache.get(event_id)
        if entry is None:
            return None
        if self._is_expired(entry=entry):
            Logger.base.debug(f'🗑️ [CACHE] Stats of event {event_id} expired')
            del self._cache[event_id]
            return None
        return entry['data']

    def set(self, *, event_id: str, stats: CombinedEventStats) -> None:
        self._cache[event_id] = CacheEntry(data=stats, fetched_at=time.time())

    def invalidate(self, *, event_id: str) -> None:
        self._cache.pop(event_id, None)
