from datetime import datetime
from typing import Any

import attrs

from src.service.seat_reconciliation.domain.enum import Vendor


@attrs.define(frozen=True)
class StatsSnapshot:
    """Per-vendor taken counts of the previous refresh, overwritten every run"""

    taken: dict[Vendor, int]
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            'taken': {str(vendor): count for vendor, count in self.taken.items()},
            'timestamp': self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'StatsSnapshot':
        """Raises KeyError/ValueError/TypeError for a malformed record"""
        return cls(
            taken={Vendor(vendor): int(count) for vendor, count in data['taken'].items()},
            timestamp=datetime.fromisoformat(data['timestamp']),
        )
