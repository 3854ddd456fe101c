"""Unit tests for SourceStatsBuilder sector naming and aggregation"""

import pytest

from src.service.seat_reconciliation.domain.enum import Vendor
from src.service.seat_reconciliation.domain.source_stats_builder import (
    build_canonical_sectors,
    build_source_stats,
)
from src.service.seat_reconciliation.domain.value_object import RowStats


class TestBuildCanonicalSectors:
    @pytest.mark.unit
    def test_keeps_reference_names_and_fills_missing_ones(self, make_sector, grid) -> None:
        sectors = build_canonical_sectors(
            [
                make_sector('Parter', free=grid(['1'], 2)),
                make_sector(None, free=grid(['1'], 2)),
            ]
        )

        assert [s.sector_name for s in sectors] == ['Parter', 'Sektor 2']

    @pytest.mark.unit
    def test_skips_reports_without_seats(self, make_sector, grid) -> None:
        sectors = build_canonical_sectors(
            [make_sector('Scena'), make_sector('Parter', free=grid(['1'], 2))]
        )

        assert [s.sector_name for s in sectors] == ['Parter']


class TestBuildSourceStats:
    @pytest.mark.unit
    def test_no_seat_data_means_vendor_unavailable(self, make_sector) -> None:
        stats = build_source_stats(
            vendor=Vendor.EBILET,
            reports=[make_sector('A')],
            canonical_sectors=[],
            is_reference=False,
        )

        assert stats is None

    @pytest.mark.unit
    def test_single_report_takes_the_only_canonical_name(self, make_sector, grid) -> None:
        canonical = build_canonical_sectors([make_sector('Sala', free=grid(['1', '2'], 5))])

        stats = build_source_stats(
            vendor=Vendor.BILETYNA,
            reports=[make_sector(None, free=grid(['7', '8', '9'], 20))],
            canonical_sectors=canonical,
            is_reference=False,
        )

        assert stats is not None
        assert [s.sector_name for s in stats.sectors] == ['Sala']
        assert stats.sectors[0].aligned

    @pytest.mark.unit
    def test_single_report_with_many_canonical_sectors_is_unaligned(
        self, make_sector, grid
    ) -> None:
        canonical = build_canonical_sectors(
            [make_sector('A', free=grid(['1'], 5)), make_sector('B', free=grid(['1'], 5))]
        )

        stats = build_source_stats(
            vendor=Vendor.BILETYNA,
            reports=[make_sector(None, free=grid(['1'], 5))],
            canonical_sectors=canonical,
            is_reference=False,
        )

        assert stats is not None
        assert stats.sectors[0].sector_name == 'biletyna Sektor 1'
        assert not stats.sectors[0].aligned

    @pytest.mark.unit
    def test_multi_sector_alignment_with_synthetic_fallback(self, make_sector, grid) -> None:
        canonical = build_canonical_sectors(
            [
                make_sector('Parter', free=grid(['1', '2', '3'], 10)),
                make_sector('Balkon', free=grid(['1', '2'], 6)),
            ]
        )

        stats = build_source_stats(
            vendor=Vendor.EBILET,
            reports=[
                make_sector('B', free=grid(['I', 'II'], 6)),
                make_sector('?', free=grid(['a', 'b', 'c', 'd', 'e', 'f', 'g'], 3)),
                make_sector('P', taken=grid(['1', '2', '3'], 10)),
            ],
            canonical_sectors=canonical,
            is_reference=False,
        )

        assert stats is not None
        assert [s.sector_name for s in stats.sectors] == ['Balkon', 'ebilet Sektor 2', 'Parter']
        assert [s.aligned for s in stats.sectors] == [True, False, True]

    @pytest.mark.unit
    def test_aggregates_rows_seats_and_totals(self, make_sector) -> None:
        stats = build_source_stats(
            vendor=Vendor.KUPBILECIK,
            reports=[
                make_sector('A', free=['1-1', '1-2'], taken=['2-1']),
                make_sector('B', free=['1-5'], taken=['1-6', '1-7']),
            ],
            canonical_sectors=[],
            is_reference=True,
            final_url='https://kupbilecik.example/event/1',
        )

        assert stats is not None
        assert stats.totals.total == 6
        assert stats.totals.free == 3
        assert stats.totals.taken == 3
        assert stats.rows['1'] == RowStats(total=5, free=3, taken=2)
        assert stats.rows['2'] == RowStats(total=1, free=0, taken=1)
        assert stats.free_seats == ('1-1', '1-2', '1-5')
        assert stats.final_url == 'https://kupbilecik.example/event/1'
        assert stats.is_multi_sector
