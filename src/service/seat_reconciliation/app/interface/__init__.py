"""Seat Reconciliation Interfaces"""

from src.service.seat_reconciliation.app.interface.i_event_refresh_lock import IEventRefreshLock
from src.service.seat_reconciliation.app.interface.i_scrape_result_cache import (
    IScrapeResultCache,
)
from src.service.seat_reconciliation.app.interface.i_seat_history_store import ISeatHistoryStore
from src.service.seat_reconciliation.app.interface.i_seat_override_store import (
    ISeatOverrideStore,
)
from src.service.seat_reconciliation.app.interface.i_stats_snapshot_store import (
    IStatsSnapshotStore,
)
from src.service.seat_reconciliation.app.interface.i_vendor_seat_scraper import (
    IVendorSeatScraper,
)

__all__ = [
    'IEventRefreshLock',
    'IScrapeResultCache',
    'ISeatHistoryStore',
    'ISeatOverrideStore',
    'IStatsSnapshotStore',
    'IVendorSeatScraper',
]
