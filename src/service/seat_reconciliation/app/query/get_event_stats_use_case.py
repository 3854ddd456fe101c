"""
Get Event Stats Use Case

Request-level flow for the stats of one event:
1. Serve fresh cached stats unless a refresh is forced
2. Collect every vendor's report concurrently, each with its own timeout
3. Run the refresh pass and cache its result

A vendor that fails or times out is passed on as unavailable, never as "all sold".
"""

from typing import Sequence

import anyio

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.app.command.refresh_event_stats_use_case import (
    RefreshEventStatsUseCase,
)
from src.service.seat_reconciliation.app.dto import EventRef
from src.service.seat_reconciliation.app.interface import IScrapeResultCache, IVendorSeatScraper
from src.service.seat_reconciliation.domain.entity.combined_event_stats import CombinedEventStats
from src.service.seat_reconciliation.domain.enum import Vendor
from src.service.seat_reconciliation.domain.value_object import VendorSeatReport


class GetEventStatsUseCase:
    def __init__(
        self,
        scrapers: Sequence[IVendorSeatScraper],
        cache: IScrapeResultCache,
        refresh_use_case: RefreshEventStatsUseCase,
        scrape_timeout_seconds: float,
    ) -> None:
        self.scrapers = scrapers
        self.cache = cache
        self.refresh_use_case = refresh_use_case
        self.scrape_timeout_seconds = scrape_timeout_seconds

    @Logger.io
    async def execute(self, *, event: EventRef, force_refresh: bool = False) -> CombinedEventStats:
        if not force_refresh and (cached := self.cache.get(event_id=event.event_id)):
            Logger.base.info(f'⚡ [CACHE] Serving cached stats for event {event.event_id}')
            return cached

        reports = await self._collect_reports(event=event)
        stats = await self.refresh_use_case.execute(event=event, reports=reports)
        self.cache.set(event_id=event.event_id, stats=stats)
        return stats

    async def _collect_reports(self, *, event: EventRef) -> dict[Vendor, VendorSeatReport]:
        reports: dict[Vendor, VendorSeatReport] = {}

        async def collect(scraper: IVendorSeatScraper) -> None:
            reports[scraper.vendor] = await self._scrape(scraper=scraper, event=event)

        async with anyio.create_task_group() as tg:
            for scraper in self.scrapers:
                # Events without vendor links are tried on every vendor
                if event.vendor_urls and not event.sold_by(scraper.vendor):
                    continue
                tg.start_soon(collect, scraper)

        return reports

    async def _scrape(self, *, scraper: IVendorSeatScraper, event: EventRef) -> VendorSeatReport:
        try:
            with anyio.fail_after(self.scrape_timeout_seconds):
                report = await scraper.scrape(event=event)
        except TimeoutError:
            Logger.base.warning(
                f'⏱️ [REFRESH] {scraper.vendor} timed out after {self.scrape_timeout_seconds}s '
                f'for event {event.event_id}'
            )
            return VendorSeatReport.unavailable(scraper.vendor)
        except Exception as e:
            Logger.base.warning(
                f'⚠️ [REFRESH] {scraper.vendor} scrape failed for event {event.event_id}: {e}'
            )
            return VendorSeatReport.unavailable(scraper.vendor)

        Logger.base.info(
            f'🔎 [REFRESH] {scraper.vendor} returned {len(report.sectors)} sectors '
            f'for event {event.event_id}'
        )
        return report
