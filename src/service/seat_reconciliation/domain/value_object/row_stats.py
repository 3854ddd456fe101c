"""Row Stats Value Object"""

import attrs


@attrs.define(frozen=True)
class RowStats:
    """Seat counts of one row as reported by one vendor"""

    total: int = 0
    free: int = 0
    taken: int = 0

    def __add__(self, other: 'RowStats') -> 'RowStats':
        return RowStats(
            total=self.total + other.total,
            free=self.free + other.free,
            taken=self.taken + other.taken,
        )
