"""Tests for construction phase segmentation."""

from datetime import date, datetime

import pytest

from proforma.calculations.phases import (
    get_phase,
    month_start,
    months_between,
    resolve_construction_schedule,
)
from proforma.models.config import ProFormaConfig
from proforma.models.projection import Phase


class TestResolveConstructionSchedule:
    """Tests for completion date and construction length."""

    def test_inferred_completion_is_80_pct_of_horizon(self):
        """Without a completion date, construction is ceil(0.8 x horizon) months."""
        schedule = resolve_construction_schedule(date(2026, 1, 1), 12)

        assert schedule.completion_date == date(2026, 11, 1)
        assert schedule.construction_months == 10
        assert schedule.completion_inferred

    def test_inferred_length_rounds_up(self):
        """0.8 x 6 = 4.8 should round up to 5 months."""
        schedule = resolve_construction_schedule(date(2026, 1, 1), 6)

        assert schedule.construction_months == 5
        assert schedule.completion_date == date(2026, 6, 1)

    def test_dates_are_month_normalized(self):
        """Start and completion should snap to the first of the month."""
        schedule = resolve_construction_schedule(
            date(2026, 3, 17), 12, completion_date=date(2026, 9, 28),
        )

        assert schedule.start_date == date(2026, 3, 1)
        assert schedule.completion_date == date(2026, 9, 1)
        assert schedule.construction_months == 6
        assert not schedule.completion_inferred

    def test_completion_before_start_gives_one_month(self):
        """Construction length should never drop below one month."""
        schedule = resolve_construction_schedule(
            date(2026, 6, 1), 12, completion_date=date(2026, 1, 1),
        )

        assert schedule.construction_months == 1

    def test_completion_past_horizon_is_kept(self):
        """A completion date beyond the horizon should not be clamped."""
        schedule = resolve_construction_schedule(
            date(2026, 1, 1), 6, completion_date=date(2027, 1, 1),
        )

        assert schedule.construction_months == 12

    def test_config_overrides_fraction(self):
        """A custom construction fraction should change the inferred length."""
        config = ProFormaConfig(construction_fraction=0.5)
        schedule = resolve_construction_schedule(date(2026, 1, 1), 12, config=config)

        assert schedule.construction_months == 6


class TestGetPhase:
    """Tests for month phase classification."""

    def test_months_before_completion_are_construction(self):
        schedule = resolve_construction_schedule(
            date(2026, 1, 1), 12, completion_date=date(2026, 4, 1),
        )

        assert get_phase(date(2026, 1, 1), schedule) == Phase.CONSTRUCTION
        assert get_phase(date(2026, 3, 1), schedule) == Phase.CONSTRUCTION

    def test_completion_month_is_post_construction(self):
        schedule = resolve_construction_schedule(
            date(2026, 1, 1), 12, completion_date=date(2026, 4, 1),
        )

        assert get_phase(date(2026, 4, 1), schedule) == Phase.POST_CONSTRUCTION
        assert get_phase(date(2026, 12, 1), schedule) == Phase.POST_CONSTRUCTION

    def test_datetime_months_compare_with_schedule(self):
        schedule = resolve_construction_schedule(
            date(2026, 1, 1), 12, completion_date=date(2026, 4, 1),
        )

        assert get_phase(datetime(2026, 3, 31, 23, 59), schedule) == Phase.CONSTRUCTION
        assert get_phase(datetime(2026, 4, 1, 8, 0), schedule) == Phase.POST_CONSTRUCTION


class TestMonthHelpers:
    """Tests for calendar month helpers."""

    def test_month_start(self):
        assert month_start(date(2026, 2, 28)) == date(2026, 2, 1)

    def test_month_start_drops_time_of_day(self):
        result = month_start(datetime(2026, 3, 15, 10, 30))

        assert result == date(2026, 3, 1)
        assert type(result) is date

    def test_datetime_completion_counts_calendar_months(self):
        """A completion time after midnight should not add a month."""
        schedule = resolve_construction_schedule(
            datetime(2026, 1, 1), 4, completion_date=datetime(2026, 3, 15, 10),
        )

        assert schedule.construction_months == 2
        assert schedule.completion_date == date(2026, 3, 1)
        assert schedule.start_date == date(2026, 1, 1)

    @pytest.mark.parametrize("start,end,expected", [
        (date(2026, 1, 1), date(2026, 2, 1), 1),
        (date(2026, 1, 31), date(2026, 3, 1), 2),
        (date(2025, 11, 1), date(2026, 2, 1), 3),
        (date(2026, 1, 1), date(2026, 1, 1), 0),
    ])
    def test_months_between(self, start, end, expected):
        assert months_between(start, end) == expected
