"""
Unit tests for the event stats pipeline

Two-sector event: kupbilecik names the sectors, ebilet reports them unnamed, in
another order and with Roman row labels.
"""

from datetime import datetime, timezone

import pytest

from src.service.seat_reconciliation.domain.entity.source_stats import Totals
from src.service.seat_reconciliation.domain.enum import Vendor
from src.service.seat_reconciliation.domain.event_stats_pipeline import run_pipeline
from src.service.seat_reconciliation.domain.seat_map_builder import build_seat_map


RUN_1_AT = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
RUN_2_AT = datetime(2026, 3, 1, 12, 5, tzinfo=timezone.utc)


def _split(seats, free):
    return {'free': [s for s in seats if s in free], 'taken': [s for s in seats if s not in free]}


@pytest.fixture
def reports(make_report, make_sector, grid):
    def _reports(*, kup_free_a, ebilet_free_y, ebilet_free_x):
        return {
            Vendor.KUPBILECIK: make_report(
                Vendor.KUPBILECIK,
                make_sector('A', **_split(grid(['1', '2', '3'], 4), kup_free_a)),
                make_sector('B', taken=grid(['1', '2'], 6)),
                final_url='https://kupbilecik.example/evt-1',
            ),
            Vendor.EBILET: make_report(
                Vendor.EBILET,
                make_sector('Y', **_split(grid(['1', '2'], 6), ebilet_free_y)),
                make_sector('X', **_split(grid(['I', 'II', 'III'], 4), ebilet_free_x)),
            ),
            Vendor.BILETYNA: make_report(Vendor.BILETYNA),
        }

    return _reports


class TestRunPipeline:
    @pytest.mark.unit
    def test_first_run(self, reports) -> None:
        result = run_pipeline(
            event_id='evt-1',
            reports=reports(kup_free_a=['1-1'], ebilet_free_y=['2-6'], ebilet_free_x=['II-3']),
            previous_history={},
            previous_snapshot=None,
            reference_vendor=Vendor.KUPBILECIK,
            now=RUN_1_AT,
            title='Koncert',
        )

        stats = result.stats
        assert set(stats.per_source) == {Vendor.KUPBILECIK, Vendor.EBILET}
        assert stats.per_source[Vendor.KUPBILECIK].totals == Totals(total=24, free=1, taken=23)
        assert stats.per_source[Vendor.EBILET].totals == Totals(total=24, free=2, taken=22)
        assert stats.combined_totals == Totals(total=48, free=3, taken=45)
        assert [s.sector_name for s in stats.per_source[Vendor.EBILET].sectors] == ['B', 'A']
        assert stats.per_source[Vendor.KUPBILECIK].final_url == 'https://kupbilecik.example/evt-1'
        assert stats.title == 'Koncert'
        assert stats.diff is None
        assert stats.inferred_sold == {}
        assert result.history == {
            'A:1-1': Vendor.KUPBILECIK,
            'A:2-3': Vendor.EBILET,
            'B:2-6': Vendor.EBILET,
        }
        assert result.snapshot.taken == {Vendor.KUPBILECIK: 23, Vendor.EBILET: 22}
        assert result.snapshot.timestamp == RUN_1_AT

    @pytest.mark.unit
    def test_second_run_infers_sales_and_diff(self, reports) -> None:
        first = run_pipeline(
            event_id='evt-1',
            reports=reports(kup_free_a=['1-1'], ebilet_free_y=['2-6'], ebilet_free_x=['II-3']),
            previous_history={},
            previous_snapshot=None,
            reference_vendor=Vendor.KUPBILECIK,
            now=RUN_1_AT,
        )

        second = run_pipeline(
            event_id='evt-1',
            reports=reports(kup_free_a=[], ebilet_free_y=['2-6'], ebilet_free_x=[]),
            previous_history=first.history,
            previous_snapshot=first.snapshot,
            reference_vendor=Vendor.KUPBILECIK,
            now=RUN_2_AT,
        )

        stats = second.stats
        assert stats.inferred_sold == {'A:1-1': Vendor.KUPBILECIK, 'A:2-3': Vendor.EBILET}
        assert stats.diff is not None
        assert stats.diff.taken_delta == {
            Vendor.BILETYNA: 0,
            Vendor.EBILET: 1,
            Vendor.KUPBILECIK: 1,
        }
        assert stats.diff.previous_timestamp == RUN_1_AT
        assert stats.taken_counts() == {Vendor.KUPBILECIK: 24, Vendor.EBILET: 23}

    @pytest.mark.unit
    def test_reference_vendor_down_keeps_other_vendors(self, make_report, make_sector) -> None:
        result = run_pipeline(
            event_id='evt-1',
            reports={
                Vendor.KUPBILECIK: make_report(Vendor.KUPBILECIK),
                Vendor.EBILET: make_report(Vendor.EBILET, make_sector('Sala', free=['1-1'])),
            },
            previous_history={'Sala:1-2': Vendor.KUPBILECIK},
            previous_snapshot=None,
            reference_vendor=Vendor.KUPBILECIK,
            now=RUN_1_AT,
        )

        assert list(result.stats.per_source) == [Vendor.EBILET]
        # ebilet's only sector is unaligned, its vendor-scoped name matches no history entry
        assert result.stats.inferred_sold == {}
        assert result.history['ebilet Sektor 1:1-1'] == Vendor.EBILET


class TestUnalignedSectorHistory:
    @pytest.mark.unit
    def test_sale_in_unaligned_sector_is_not_inferred_on_canonical_sector(
        self, make_report, make_sector, grid
    ) -> None:
        canonical_rows = grid(['1', '2', '3'], 4)
        # Five rows against three: never aligns, so it falls back to its second slot
        wide_rows = grid(['1', '2', '3', '4', '5'], 4)

        def _run(*, ebilet_free, previous_history, now):
            return run_pipeline(
                event_id='evt-1',
                reports={
                    Vendor.KUPBILECIK: make_report(
                        Vendor.KUPBILECIK,
                        make_sector(None, taken=canonical_rows),
                        make_sector(None, taken=canonical_rows),
                    ),
                    Vendor.EBILET: make_report(
                        Vendor.EBILET,
                        make_sector(None, taken=canonical_rows),
                        make_sector(None, **_split(wide_rows, ebilet_free)),
                    ),
                },
                previous_history=previous_history,
                previous_snapshot=None,
                reference_vendor=Vendor.KUPBILECIK,
                now=now,
            )

        run_1 = _run(ebilet_free={'1-1'}, previous_history={}, now=RUN_1_AT)
        run_2 = _run(ebilet_free=set(), previous_history=run_1.history, now=RUN_2_AT)

        ebilet = run_2.stats.per_source[Vendor.EBILET]
        assert [(s.sector_name, s.aligned) for s in ebilet.sectors] == [
            ('Sektor 1', True),
            ('ebilet Sektor 2', False),
        ]
        assert 'Sektor 2:1-1' not in run_1.history
        assert run_2.stats.inferred_sold == {'ebilet Sektor 2:1-1': Vendor.EBILET}

        seat_map = build_seat_map(run_2.stats, reference_vendor=Vendor.KUPBILECIK)
        canonical_sektor_2 = next(s for s in seat_map.sectors if s.sector_name == 'Sektor 2')
        cell = next(c for c in canonical_sektor_2.cells() if c.seat_key == '1-1')
        assert cell.color.token == 'no-data'
