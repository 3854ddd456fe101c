"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import: settings and the
logger read it at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    os.environ['KVROCKS_KEY_PREFIX'] = 'test_' if worker_id == 'master' else f'test_{worker_id}_'
    os.environ['STATE_BACKEND'] = 'memory'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Callable  # noqa: E402
from typing import Optional  # noqa: E402

import pytest  # noqa: E402

from src.service.seat_reconciliation.domain.enum import Vendor  # noqa: E402
from src.service.seat_reconciliation.domain.value_object import (  # noqa: E402
    RawSectorReport,
    VendorSeatReport,
)


@pytest.fixture
def make_sector() -> Callable[..., RawSectorReport]:
    """Raw sector report built from "row-seat" lists"""

    def _make(
        name: Optional[str],
        *,
        free: Optional[list[str]] = None,
        taken: Optional[list[str]] = None,
    ) -> RawSectorReport:
        return RawSectorReport.from_seats(
            sector_name=name, free_seats=free or [], taken_seats=taken or []
        )

    return _make


@pytest.fixture
def grid() -> Callable[[list[str], int], list[str]]:
    """All "row-seat" keys of a rectangular block"""

    def _grid(rows: list[str], seats_per_row: int) -> list[str]:
        return [f'{row}-{seat}' for row in rows for seat in range(1, seats_per_row + 1)]

    return _grid


@pytest.fixture
def make_report() -> Callable[..., VendorSeatReport]:
    def _make(
        vendor: Vendor, *sectors: RawSectorReport, final_url: Optional[str] = None
    ) -> VendorSeatReport:
        return VendorSeatReport(vendor=vendor, sectors=sectors, final_url=final_url)

    return _make
