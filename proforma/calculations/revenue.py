"""Rental income and rent roll summary calculations."""

from datetime import date
from typing import Optional, Sequence

from ..models.inputs import RentalUnit, RentType
from ..models.projection import RentalSummary
from .amounts import non_negative
from .phases import month_start


def calculate_unit_monthly_rent(unit: RentalUnit) -> float:
    """Calculate a unit's effective monthly rent at its occupancy rate.

    Gross rent is the fixed monthly rent, or square footage x rent per
    square foot for per-area units. Effective rent = gross x occupancy / 100.

    Args:
        unit: Rental unit.

    Returns:
        Occupancy-derated monthly rent.

    Example:
        >>> calculate_unit_monthly_rent(RentalUnit(monthly_rent=2000, occupancy_rate=90))
        1800.0
    """
    if unit.rent_type == RentType.FIXED:
        gross_rent = non_negative(unit.monthly_rent)
    else:
        gross_rent = non_negative(unit.square_footage) * non_negative(unit.rent_per_sqft)

    return gross_rent * non_negative(unit.occupancy_rate) / 100


def is_unit_occupied(unit: RentalUnit, current_month: date) -> bool:
    """Check whether a unit is available for rent in the given month.

    A unit with an occupancy start date earns nothing before the first day
    of that start month.
    """
    if unit.occupancy_start_date is None:
        return True
    return month_start(unit.occupancy_start_date) <= month_start(current_month)


def calculate_rental_income(units: Sequence[RentalUnit], current_month: date) -> float:
    """Calculate total rental income for a month.

    Args:
        units: Rental units.
        current_month: First day of the month being projected.

    Returns:
        Sum of effective monthly rent for units occupied in that month.
    """
    return sum(
        (calculate_unit_monthly_rent(u) for u in units if is_unit_occupied(u, current_month)),
        0.0,
    )


def calculate_rental_summary(
    units: Sequence[RentalUnit],
    include_rental_income: bool,
    total_project_square_footage: Optional[float] = None,
) -> RentalSummary:
    """Summarize the rent roll at stabilized occupancy.

    Averages are per unit and per rentable square foot of the units; the
    project square footage is reported as supplied and does not feed any
    average. Stabilized occupancy is the simple (unweighted) mean of unit
    occupancy rates.

    Args:
        units: Rental units.
        include_rental_income: Whether rental income is part of the projection.
        total_project_square_footage: Total project area, if known.

    Returns:
        RentalSummary, all zero except project square footage when rental
        income is excluded or there are no units.
    """
    project_sqft = non_negative(total_project_square_footage)

    if not include_rental_income or not units:
        return RentalSummary(total_project_square_footage=project_sqft)

    total_units = len(units)
    total_sqft = sum(non_negative(u.square_footage) for u in units)
    total_monthly_rent = sum(calculate_unit_monthly_rent(u) for u in units)
    stabilized_occupancy = sum(non_negative(u.occupancy_rate) for u in units) / total_units

    return RentalSummary(
        total_units=total_units,
        total_square_footage=total_sqft,
        total_project_square_footage=project_sqft,
        average_rent_per_unit=total_monthly_rent / total_units,
        average_rent_per_sqft=total_monthly_rent / total_sqft if total_sqft > 0 else 0.0,
        stabilized_occupancy=stabilized_occupancy,
    )
