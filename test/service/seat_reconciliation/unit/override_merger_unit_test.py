"""Unit tests for OverrideMerger and override token parsing"""

import pytest

from src.service.seat_reconciliation.domain.enum import ColorClass, Vendor
from src.service.seat_reconciliation.domain.override_merger import merge, merge_seat_color
from src.service.seat_reconciliation.domain.value_object import SeatColor


class TestMerge:
    @pytest.mark.unit
    def test_live_taken_beats_free_override(self) -> None:
        result = merge(ColorClass.TAKEN, Vendor.EBILET, ColorClass.FREE, Vendor.BILETYNA)

        assert result == ColorClass.TAKEN

    @pytest.mark.unit
    def test_taken_override_beats_no_data(self) -> None:
        result = merge(ColorClass.NO_DATA, None, ColorClass.TAKEN, Vendor.KUPBILECIK)

        assert result == ColorClass.TAKEN

    @pytest.mark.unit
    @pytest.mark.parametrize(
        'special',
        [ColorClass.NOT_FOR_SALE, ColorClass.OTHER_CHANNEL, ColorClass.BOX_OFFICE],
    )
    @pytest.mark.parametrize(
        'live', [ColorClass.FREE, ColorClass.TAKEN, ColorClass.NO_DATA]
    )
    def test_special_override_always_wins(self, special, live) -> None:
        assert merge(live, Vendor.EBILET, special, None) == special

    @pytest.mark.unit
    def test_free_override_reattributes_vendor(self) -> None:
        live = SeatColor(color_class=ColorClass.FREE, vendor=Vendor.KUPBILECIK)
        override = SeatColor(color_class=ColorClass.FREE, vendor=Vendor.BILETYNA)

        assert merge_seat_color(live, override) == override

    @pytest.mark.unit
    def test_live_taken_keeps_its_vendor(self) -> None:
        live = SeatColor(color_class=ColorClass.TAKEN, vendor=Vendor.EBILET)
        override = SeatColor(color_class=ColorClass.TAKEN, vendor=Vendor.KUPBILECIK)

        assert merge_seat_color(live, override) == live

    @pytest.mark.unit
    def test_no_data_override_keeps_live(self) -> None:
        live = SeatColor(color_class=ColorClass.FREE, vendor=Vendor.EBILET)

        assert merge_seat_color(live, SeatColor.no_data()) == live
        assert merge_seat_color(live, None) == live


class TestSeatColorToken:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        'token,expected',
        [
            ('ebilet:free', SeatColor(color_class=ColorClass.FREE, vendor=Vendor.EBILET)),
            (
                'kupbilecik:taken',
                SeatColor(color_class=ColorClass.TAKEN, vendor=Vendor.KUPBILECIK),
            ),
            ('box-office', SeatColor(color_class=ColorClass.BOX_OFFICE)),
            ('no-data', SeatColor.no_data()),
        ],
    )
    def test_parses_known_tokens(self, token, expected) -> None:
        assert SeatColor.parse_token(token) == expected
        assert expected.token == token

    @pytest.mark.unit
    @pytest.mark.parametrize(
        'token', ['free', 'taken', 'purple', 'ticketmaster:free', 'ebilet:box-office', '']
    )
    def test_rejects_unknown_tokens(self, token) -> None:
        assert SeatColor.parse_token(token) is None
