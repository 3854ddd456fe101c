"""
Key String Generator

Record keys for the per-event state of seat reconciliation.
"""

import os


def _make_key(key: str) -> str:
    """Add prefix to key for test isolation in parallel testing"""
    return f'{os.getenv("KVROCKS_KEY_PREFIX", "")}{key}'


def make_seat_history_key(*, event_id: str) -> str:
    return _make_key(f'seat_history:{event_id}')


def make_stats_snapshot_key(*, event_id: str) -> str:
    return _make_key(f'stats_snapshot:{event_id}')


def make_seat_overrides_key(*, event_id: str) -> str:
    return _make_key(f'seat_overrides:{event_id}')


def make_refresh_lock_key(*, event_id: str) -> str:
    return _make_key(f'lock:refresh:{event_id}')
