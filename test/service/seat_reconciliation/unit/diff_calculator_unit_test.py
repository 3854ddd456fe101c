"""Unit tests for DiffCalculator"""

from datetime import datetime, timezone

import pytest

from src.service.seat_reconciliation.domain.diff_calculator import calculate_diff, next_snapshot
from src.service.seat_reconciliation.domain.entity.stats_snapshot import StatsSnapshot
from src.service.seat_reconciliation.domain.enum import Vendor


PREVIOUS_AT = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
NOW = datetime(2026, 3, 1, 12, 5, tzinfo=timezone.utc)


@pytest.fixture
def previous() -> StatsSnapshot:
    return StatsSnapshot(taken={Vendor.KUPBILECIK: 10, Vendor.EBILET: 5}, timestamp=PREVIOUS_AT)


class TestCalculateDiff:
    @pytest.mark.unit
    def test_first_run_has_no_diff(self) -> None:
        assert calculate_diff({Vendor.KUPBILECIK: 10}, None) is None

    @pytest.mark.unit
    def test_increase_is_reported(self, previous) -> None:
        diff = calculate_diff({Vendor.KUPBILECIK: 13, Vendor.EBILET: 5}, previous)

        assert diff is not None
        assert diff.taken_delta[Vendor.KUPBILECIK] == 3
        assert diff.taken_delta[Vendor.EBILET] == 0
        assert diff.previous_timestamp == PREVIOUS_AT

    @pytest.mark.unit
    def test_decrease_is_clamped_to_zero(self, previous) -> None:
        diff = calculate_diff({Vendor.KUPBILECIK: 8, Vendor.EBILET: 5}, previous)

        assert diff is not None
        assert diff.taken_delta[Vendor.KUPBILECIK] == 0

    @pytest.mark.unit
    def test_vendor_missing_on_either_side_is_zero(self, previous) -> None:
        diff = calculate_diff({Vendor.KUPBILECIK: 10, Vendor.BILETYNA: 7}, previous)

        assert diff is not None
        assert diff.taken_delta == {
            Vendor.BILETYNA: 0,
            Vendor.EBILET: 0,
            Vendor.KUPBILECIK: 0,
        }


class TestNextSnapshot:
    @pytest.mark.unit
    def test_missing_vendor_keeps_previous_count(self, previous) -> None:
        snapshot = next_snapshot({Vendor.KUPBILECIK: 12}, previous, now=NOW)

        assert snapshot.taken == {Vendor.KUPBILECIK: 12, Vendor.EBILET: 5}
        assert snapshot.timestamp == NOW

    @pytest.mark.unit
    def test_scrape_failure_does_not_spike_next_run(self, previous) -> None:
        # Run 2: ebilet down. Run 3: ebilet back with 6 taken
        run2 = next_snapshot({Vendor.KUPBILECIK: 10}, previous, now=NOW)
        diff = calculate_diff({Vendor.KUPBILECIK: 10, Vendor.EBILET: 6}, run2)

        assert diff is not None
        assert diff.taken_delta[Vendor.EBILET] == 1

    @pytest.mark.unit
    def test_snapshot_serialization(self, previous) -> None:
        data = previous.to_dict()

        assert data == {
            'taken': {'kupbilecik': 10, 'ebilet': 5},
            'timestamp': '2026-03-01T12:00:00+00:00',
        }
        assert StatsSnapshot.from_dict(data) == previous
