"""
Seat Key Value Object

Canonical "row-seatLabel" identifier of a seat inside one sector. The row part is
always normalized so the same physical seat gets the same key from every vendor.

Seat labels containing "-" are a known ambiguity: the first "-" separates the row,
everything after it is the seat label.
"""

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.seat_reconciliation.domain.row_name_normalizer import normalize_row_name


SEAT_KEY_SEPARATOR = '-'


@attrs.define(frozen=True)
class SeatKey:
    """Seat Key (Value Object)"""

    row: str
    seat_label: str

    def __str__(self) -> str:
        return f'{self.row}{SEAT_KEY_SEPARATOR}{self.seat_label}'

    @classmethod
    def create(cls, *, row: str, seat_label: str) -> 'SeatKey':
        """Build a key from raw vendor labels"""
        return cls(row=normalize_row_name(row), seat_label=seat_label.strip())

    @classmethod
    def from_str(cls, seat_key: str) -> 'SeatKey':
        """Parse an already serialized key"""
        row, separator, seat_label = seat_key.partition(SEAT_KEY_SEPARATOR)
        if not separator or not row or not seat_label:
            raise DomainError(f'Invalid seat key format: {seat_key}. Expected: row-seat', 400)
        return cls(row=row, seat_label=seat_label)


def normalize_seat_key(seat_key: str) -> str:
    """Normalize the row of a raw "row-seat" string, keys without a separator pass through"""
    row, separator, seat_label = seat_key.partition(SEAT_KEY_SEPARATOR)
    if not separator:
        return seat_key
    return f'{normalize_row_name(row)}{SEAT_KEY_SEPARATOR}{seat_label}'
