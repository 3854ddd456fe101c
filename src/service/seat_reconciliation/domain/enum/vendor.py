"""Vendor Enum"""

from enum import StrEnum


class Vendor(StrEnum):
    """Ticket vendors selling the same events"""

    BILETYNA = 'biletyna'
    EBILET = 'ebilet'
    KUPBILECIK = 'kupbilecik'


# Free-seat attribution order: the first vendor in this tuple reporting a seat free owns it
VENDOR_PRIORITY: tuple[Vendor, ...] = (Vendor.BILETYNA, Vendor.EBILET, Vendor.KUPBILECIK)
