"""
Override Merger

Resolves a manually entered seat color against the live one, highest priority first:
1. special override (not-for-sale, other-channel, box-office)
2. live taken, a real sale is never overwritten by a stale correction
3. taken override over live free/no-data
4. free override over live free/no-data, reattributes the vendor
5. live
"""

from typing import Optional

from src.service.seat_reconciliation.domain.enum import ColorClass, Vendor
from src.service.seat_reconciliation.domain.value_object import SeatColor


def merge(
    live_class: ColorClass,
    live_vendor: Optional[Vendor],
    override_class: ColorClass,
    override_vendor: Optional[Vendor],
) -> ColorClass:
    return merge_seat_color(
        SeatColor(color_class=live_class, vendor=live_vendor),
        SeatColor(color_class=override_class, vendor=override_vendor),
    ).color_class


def merge_seat_color(live: SeatColor, override: Optional[SeatColor]) -> SeatColor:
    if override is None:
        return live
    if override.color_class.is_special:
        return override
    if live.color_class == ColorClass.TAKEN:
        return live
    if override.color_class in (ColorClass.TAKEN, ColorClass.FREE):
        return override
    return live
