"""Tests for rental income and rent roll summary."""

from datetime import date, datetime

import pytest

from proforma.calculations.revenue import (
    calculate_rental_income,
    calculate_rental_summary,
    calculate_unit_monthly_rent,
    is_unit_occupied,
)
from proforma.models.inputs import RentalUnit, RentType


class TestUnitMonthlyRent:
    """Tests for effective rent of a single unit."""

    def test_fixed_rent_derated_by_occupancy(self):
        """$2,000 fixed rent at 90% occupancy should earn $1,800."""
        unit = RentalUnit(rent_type=RentType.FIXED, monthly_rent=2_000, occupancy_rate=90)
        assert calculate_unit_monthly_rent(unit) == pytest.approx(1_800)

    def test_per_area_rent(self):
        unit = RentalUnit(
            rent_type=RentType.PER_AREA,
            square_footage=1_000,
            rent_per_sqft=2.25,
            occupancy_rate=80,
        )
        assert calculate_unit_monthly_rent(unit) == pytest.approx(1_800)

    def test_fixed_rent_ignores_area_fields(self):
        unit = RentalUnit(
            rent_type=RentType.FIXED,
            monthly_rent=1_000,
            square_footage=5_000,
            rent_per_sqft=10,
            occupancy_rate=100,
        )
        assert calculate_unit_monthly_rent(unit) == pytest.approx(1_000)

    def test_missing_rent_is_zero(self):
        """A fixed unit with no rent entered should earn nothing."""
        assert calculate_unit_monthly_rent(RentalUnit(rent_type=RentType.FIXED)) == 0
        assert calculate_unit_monthly_rent(RentalUnit(rent_type=RentType.PER_AREA)) == 0


class TestRentalIncome:
    """Tests for monthly rental income across units."""

    def test_units_summed(self):
        units = [
            RentalUnit(monthly_rent=2_000, occupancy_rate=90),
            RentalUnit(monthly_rent=1_000, occupancy_rate=100),
        ]
        assert calculate_rental_income(units, date(2026, 6, 1)) == pytest.approx(2_800)

    def test_unit_excluded_before_occupancy_start(self):
        """A unit should earn nothing before its occupancy start month."""
        unit = RentalUnit(monthly_rent=1_000, occupancy_start_date=date(2026, 7, 20))

        assert calculate_rental_income([unit], date(2026, 6, 1)) == 0
        # Occupancy starting mid-month counts for the whole month
        assert calculate_rental_income([unit], date(2026, 7, 1)) == pytest.approx(1_000)
        assert calculate_rental_income([unit], date(2026, 8, 1)) == pytest.approx(1_000)

    def test_datetime_occupancy_start(self):
        """Occupancy starts given with a time of day compare by month."""
        unit = RentalUnit(monthly_rent=1_000, occupancy_start_date=datetime(2026, 7, 20, 9, 0))

        assert not is_unit_occupied(unit, date(2026, 6, 1))
        assert is_unit_occupied(unit, date(2026, 7, 1))
        assert is_unit_occupied(unit, datetime(2026, 7, 1, 12, 0))

    def test_is_unit_occupied_without_start_date(self):
        assert is_unit_occupied(RentalUnit(), date(2000, 1, 1))

    def test_no_units(self):
        assert calculate_rental_income([], date(2026, 6, 1)) == 0


class TestRentalSummary:
    """Tests for the rent roll summary."""

    def test_summary_of_mixed_units(self):
        units = [
            RentalUnit(monthly_rent=2_000, square_footage=1_000, occupancy_rate=90),
            RentalUnit(
                rent_type=RentType.PER_AREA,
                square_footage=800,
                rent_per_sqft=1.5,
                occupancy_rate=100,
            ),
        ]
        summary = calculate_rental_summary(units, True, 2_400)

        assert summary.total_units == 2
        assert summary.total_square_footage == 1_800
        assert summary.total_project_square_footage == 2_400
        assert summary.average_rent_per_unit == pytest.approx(1_500)
        assert summary.average_rent_per_sqft == pytest.approx(3_000 / 1_800)
        assert summary.stabilized_occupancy == pytest.approx(95)

    def test_occupancy_is_not_area_weighted(self):
        """Stabilized occupancy should be the simple mean of unit rates."""
        units = [
            RentalUnit(monthly_rent=1, square_footage=9_000, occupancy_rate=100),
            RentalUnit(monthly_rent=1, square_footage=1_000, occupancy_rate=50),
        ]
        assert calculate_rental_summary(units, True).stabilized_occupancy == pytest.approx(75)

    def test_zero_area_gives_zero_rent_per_sqft(self):
        units = [RentalUnit(monthly_rent=1_000)]
        assert calculate_rental_summary(units, True).average_rent_per_sqft == 0

    def test_disabled_rental_income(self):
        """Disabled rental income should zero everything but project area."""
        units = [RentalUnit(monthly_rent=1_000, square_footage=500)]
        summary = calculate_rental_summary(units, False, 3_000)

        assert summary.total_units == 0
        assert summary.total_square_footage == 0
        assert summary.average_rent_per_unit == 0
        assert summary.total_project_square_footage == 3_000

    def test_no_units_defaults_project_area_to_zero(self):
        summary = calculate_rental_summary([], True)

        assert summary.total_units == 0
        assert summary.total_project_square_footage == 0
