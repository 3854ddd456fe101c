"""Color Class Enum"""

from enum import StrEnum


class ColorClass(StrEnum):
    """Display class of a seat after reconciliation and manual overrides"""

    FREE = 'free'
    TAKEN = 'taken'
    NO_DATA = 'no-data'
    NOT_FOR_SALE = 'not-for-sale'
    OTHER_CHANNEL = 'other-channel'
    BOX_OFFICE = 'box-office'

    @property
    def is_special(self) -> bool:
        """Operator-only categories that no scrape can produce"""
        return self in _SPECIAL_CLASSES

    @property
    def is_vendor_bound(self) -> bool:
        return self in (ColorClass.FREE, ColorClass.TAKEN)


_SPECIAL_CLASSES = frozenset(
    {ColorClass.NOT_FOR_SALE, ColorClass.OTHER_CHANNEL, ColorClass.BOX_OFFICE}
)
