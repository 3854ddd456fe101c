"""Seat Status Enum"""

from enum import StrEnum


class SeatStatus(StrEnum):
    """Status of a seat as reported by a single vendor"""

    FREE = 'free'
    TAKEN = 'taken'
