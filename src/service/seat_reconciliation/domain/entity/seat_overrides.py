from datetime import datetime, timezone
from typing import Any, Optional

import attrs

from src.service.seat_reconciliation.domain.enum import Vendor


@attrs.define
class SeatOverrides:
    """
    Manually entered seat colors for one event.

    Keys are "sectorName::row-seat" for multi-sector events and "row-seat" otherwise,
    values are seat color tokens. stats_snapshot holds the vendor taken counts at the
    time of the last save.
    """

    event_id: str
    overrides: dict[str, str] = attrs.field(factory=dict)
    last_updated: Optional[datetime] = None
    stats_snapshot: Optional[dict[Vendor, int]] = None

    @classmethod
    def create(
        cls,
        *,
        event_id: str,
        overrides: dict[str, str],
        stats_snapshot: Optional[dict[Vendor, int]] = None,
    ) -> 'SeatOverrides':
        return cls(
            event_id=event_id,
            overrides=dict(overrides),
            last_updated=datetime.now(timezone.utc),
            stats_snapshot=stats_snapshot,
        )

    @classmethod
    def empty(cls, event_id: str) -> 'SeatOverrides':
        return cls(event_id=event_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            'event_id': self.event_id,
            'last_updated': self.last_updated.isoformat() if self.last_updated else None,
            'overrides': self.overrides,
            'stats_snapshot': (
                {str(vendor): count for vendor, count in self.stats_snapshot.items()}
                if self.stats_snapshot is not None
                else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'SeatOverrides':
        """Raises KeyError/ValueError/TypeError for a malformed record"""
        last_updated = data.get('last_updated')
        snapshot = data.get('stats_snapshot')
        return cls(
            event_id=str(data['event_id']),
            overrides={str(key): str(value) for key, value in data['overrides'].items()},
            last_updated=datetime.fromisoformat(last_updated) if last_updated else None,
            stats_snapshot=(
                {Vendor(vendor): int(count) for vendor, count in snapshot.items()}
                if snapshot is not None
                else None
            ),
        )
