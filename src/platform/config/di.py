"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings, settings
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.seat_reconciliation.app.command.clear_event_state_use_case import (
    ClearEventStateUseCase,
)
from src.service.seat_reconciliation.app.command.refresh_event_stats_use_case import (
    RefreshEventStatsUseCase,
)
from src.service.seat_reconciliation.app.command.save_seat_overrides_use_case import (
    SaveSeatOverridesUseCase,
)
from src.service.seat_reconciliation.app.query.build_event_seat_map_use_case import (
    BuildEventSeatMapUseCase,
)
from src.service.seat_reconciliation.app.query.get_event_stats_use_case import (
    GetEventStatsUseCase,
)
from src.service.seat_reconciliation.app.query.get_seat_overrides_use_case import (
    GetSeatOverridesUseCase,
)
from src.service.seat_reconciliation.domain.enum import Vendor
from src.service.seat_reconciliation.driven_adapter.cache.scrape_result_cache_impl import (
    ScrapeResultCacheImpl,
)
from src.service.seat_reconciliation.driven_adapter.lock.in_memory_event_refresh_lock import (
    InMemoryEventRefreshLock,
)
from src.service.seat_reconciliation.driven_adapter.lock.kvrocks_event_refresh_lock import (
    KvrocksEventRefreshLock,
)
from src.service.seat_reconciliation.driven_adapter.store.in_memory_record_backend import (
    InMemoryRecordBackend,
)
from src.service.seat_reconciliation.driven_adapter.store.json_file_record_backend import (
    JsonFileRecordBackend,
)
from src.service.seat_reconciliation.driven_adapter.store.kvrocks_record_backend import (
    KvrocksRecordBackend,
)
from src.service.seat_reconciliation.driven_adapter.store.seat_history_store_impl import (
    SeatHistoryStoreImpl,
)
from src.service.seat_reconciliation.driven_adapter.store.seat_override_store_impl import (
    SeatOverrideStoreImpl,
)
from src.service.seat_reconciliation.driven_adapter.store.stats_snapshot_store_impl import (
    StatsSnapshotStoreImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    reference_vendor = providers.Object(Vendor(settings.REFERENCE_VENDOR))

    # Record backend shared by the three state stores (STATE_BACKEND)
    record_backend = providers.Selector(
        providers.Callable(lambda: settings.STATE_BACKEND),
        file=providers.Singleton(JsonFileRecordBackend, data_dir=settings.DATA_DIR),
        kvrocks=providers.Singleton(KvrocksRecordBackend),
        memory=providers.Singleton(InMemoryRecordBackend),
    )

    seat_history_store = providers.Singleton(SeatHistoryStoreImpl, backend=record_backend)
    stats_snapshot_store = providers.Singleton(StatsSnapshotStoreImpl, backend=record_backend)
    seat_override_store = providers.Singleton(SeatOverrideStoreImpl, backend=record_backend)

    # Single-flight guard per event: distributed only when state is shared through Kvrocks
    in_memory_refresh_lock = providers.Singleton(InMemoryEventRefreshLock)
    event_refresh_lock = providers.Selector(
        providers.Callable(lambda: settings.STATE_BACKEND),
        file=in_memory_refresh_lock,
        kvrocks=providers.Singleton(
            KvrocksEventRefreshLock, ttl_seconds=settings.REFRESH_LOCK_TTL_SECONDS
        ),
        memory=in_memory_refresh_lock,
    )

    scrape_result_cache = providers.Singleton(
        ScrapeResultCacheImpl, ttl_seconds=settings.SCRAPE_CACHE_TTL_SECONDS
    )

    # Vendor scrapers live outside this package, override with the deployed ones
    vendor_seat_scrapers = providers.List()

    # Use Cases
    refresh_event_stats_use_case = providers.Singleton(
        RefreshEventStatsUseCase,
        history_store=seat_history_store,
        snapshot_store=stats_snapshot_store,
        refresh_lock=event_refresh_lock,
        reference_vendor=reference_vendor,
    )
    get_event_stats_use_case = providers.Singleton(
        GetEventStatsUseCase,
        scrapers=vendor_seat_scrapers,
        cache=scrape_result_cache,
        refresh_use_case=refresh_event_stats_use_case,
        scrape_timeout_seconds=settings.VENDOR_SCRAPE_TIMEOUT_SECONDS,
    )
    build_event_seat_map_use_case = providers.Singleton(
        BuildEventSeatMapUseCase,
        override_store=seat_override_store,
        reference_vendor=reference_vendor,
    )
    save_seat_overrides_use_case = providers.Singleton(
        SaveSeatOverridesUseCase,
        override_store=seat_override_store,
        cache=scrape_result_cache,
    )
    get_seat_overrides_use_case = providers.Singleton(
        GetSeatOverridesUseCase,
        override_store=seat_override_store,
    )
    clear_event_state_use_case = providers.Singleton(
        ClearEventStateUseCase,
        history_store=seat_history_store,
        override_store=seat_override_store,
        cache=scrape_result_cache,
    )


container = Container()


async def setup() -> None:
    container.config_service()
    if settings.STATE_BACKEND == 'kvrocks':
        await kvrocks_client.initialize()


async def cleanup() -> None:
    container.reset_singletons()
    await kvrocks_client.disconnect()
