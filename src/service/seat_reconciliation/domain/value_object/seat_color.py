"""
Seat Color Value Object

Display state of one seat: a color class plus, for free/taken, the vendor it is
attributed to. Serialized as the tokens used by the override map:
"<vendor>:free", "<vendor>:taken", "no-data", "not-for-sale", "other-channel",
"box-office".
"""

from typing import Optional

import attrs

from src.service.seat_reconciliation.domain.enum import ColorClass, Vendor


@attrs.define(frozen=True)
class SeatColor:
    """Seat Color (Value Object)"""

    color_class: ColorClass
    vendor: Optional[Vendor] = None

    @property
    def token(self) -> str:
        if self.color_class.is_vendor_bound and self.vendor:
            return f'{self.vendor}:{self.color_class}'
        return str(self.color_class)

    @classmethod
    def no_data(cls) -> 'SeatColor':
        return cls(color_class=ColorClass.NO_DATA)

    @classmethod
    def parse_token(cls, token: str) -> Optional['SeatColor']:
        """Parse an override token, None for anything unrecognised"""
        vendor_part, separator, class_part = token.strip().partition(':')
        if not separator:
            try:
                color_class = ColorClass(vendor_part)
            except ValueError:
                return None
            # Free/taken without a vendor is not a valid token
            return None if color_class.is_vendor_bound else cls(color_class=color_class)

        try:
            vendor = Vendor(vendor_part)
            color_class = ColorClass(class_part)
        except ValueError:
            return None
        if not color_class.is_vendor_bound:
            return None
        return cls(color_class=color_class, vendor=vendor)
