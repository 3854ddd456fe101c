"""Unit tests for StatusReconciler"""

import pytest

from src.service.seat_reconciliation.domain.enum import ColorClass, SeatStatus, Vendor
from src.service.seat_reconciliation.domain.source_stats_builder import build_canonical_sectors
from src.service.seat_reconciliation.domain.status_reconciler import (
    reconcile,
    resolve_seat_color,
)
from src.service.seat_reconciliation.domain.value_object import SeatColor


@pytest.fixture
def sector(make_sector):
    def _sector(name, *, free=None, taken=None):
        return build_canonical_sectors([make_sector(name, free=free, taken=taken)])[0]

    return _sector


class TestReconcile:
    @pytest.mark.unit
    def test_free_anywhere_beats_taken_elsewhere(self, sector) -> None:
        canonical = sector('A', free=['1-1'], taken=['1-2', '1-3'])
        result = reconcile(
            canonical,
            {
                Vendor.KUPBILECIK: canonical,
                Vendor.EBILET: sector('A', free=['1-2']),
                Vendor.BILETYNA: sector('A', taken=['1-2']),
            },
        )

        seat = result['1-2']
        assert seat.status == SeatStatus.FREE
        assert seat.free_vendor == Vendor.EBILET
        assert seat.status_per_vendor[Vendor.BILETYNA] == SeatStatus.TAKEN

    @pytest.mark.unit
    def test_free_attribution_follows_vendor_priority(self, sector) -> None:
        canonical = sector('A', free=['1-1'])
        result = reconcile(
            canonical,
            {
                Vendor.KUPBILECIK: canonical,
                Vendor.EBILET: sector('A', free=['1-1']),
                Vendor.BILETYNA: sector('A', free=['1-1']),
            },
        )

        assert result['1-1'].free_vendor == Vendor.BILETYNA

    @pytest.mark.unit
    def test_taken_everywhere_without_history_shows_no_data(self, sector) -> None:
        canonical = sector('A', taken=['1-3'])
        result = reconcile(
            canonical,
            {Vendor.KUPBILECIK: canonical, Vendor.EBILET: sector('A', taken=['1-3'])},
        )

        seat = result['1-3']
        assert seat.status == SeatStatus.TAKEN
        assert seat.free_vendor is None
        color = resolve_seat_color(seat, history_key='A:1-3', inferred_sold={})
        assert color == SeatColor.no_data()

    @pytest.mark.unit
    def test_universe_is_the_canonical_sector(self, sector) -> None:
        canonical = sector('A', free=['1-1'], taken=['1-2'])
        result = reconcile(
            canonical,
            {Vendor.KUPBILECIK: canonical, Vendor.EBILET: sector('A', free=['9-9', '1-2'])},
        )

        assert list(result) == ['1-1', '1-2']

    @pytest.mark.unit
    def test_unaligned_vendor_is_unknown_not_taken(self, sector) -> None:
        canonical = sector('A', taken=['1-1'])
        result = reconcile(canonical, {Vendor.KUPBILECIK: canonical})

        statuses = result['1-1'].status_per_vendor
        assert statuses[Vendor.BILETYNA] is None
        assert statuses[Vendor.EBILET] is None
        assert statuses[Vendor.KUPBILECIK] == SeatStatus.TAKEN

    @pytest.mark.unit
    def test_row_labels_are_normalized_across_vendors(self, sector) -> None:
        canonical = sector('A', taken=['5-12'])
        result = reconcile(
            canonical,
            {Vendor.KUPBILECIK: canonical, Vendor.BILETYNA: sector('A', free=['V-12'])},
        )

        assert result['5-12'].free_vendor == Vendor.BILETYNA

    @pytest.mark.unit
    def test_free_wins_when_a_vendor_lists_a_seat_twice(self, sector) -> None:
        canonical = sector('A', free=['1-1'], taken=['1-1'])
        result = reconcile(canonical, {Vendor.KUPBILECIK: canonical})

        assert result['1-1'].status_per_vendor[Vendor.KUPBILECIK] == SeatStatus.FREE


class TestResolveSeatColor:
    @pytest.mark.unit
    def test_free_seat_is_attributed_to_free_vendor(self, sector) -> None:
        canonical = sector('A', free=['1-1'])
        seat = reconcile(canonical, {Vendor.KUPBILECIK: canonical})['1-1']

        color = resolve_seat_color(
            seat, history_key='A:1-1', inferred_sold={'A:1-1': Vendor.EBILET}
        )

        assert color == SeatColor(color_class=ColorClass.FREE, vendor=Vendor.KUPBILECIK)

    @pytest.mark.unit
    def test_taken_seat_uses_inferred_seller(self, sector) -> None:
        canonical = sector('A', taken=['1-1'])
        seat = reconcile(canonical, {Vendor.KUPBILECIK: canonical})['1-1']

        color = resolve_seat_color(
            seat, history_key='A:1-1', inferred_sold={'A:1-1': Vendor.EBILET}
        )

        assert color.token == 'ebilet:taken'
