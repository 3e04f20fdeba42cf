"""Operating expense calculations for the post-construction phase.

The raw OperatingExpenses input carries two either/or choices:

- Property management is a percent of rental income when the percent is
  non-zero, otherwise a fixed monthly fee.
- Insurance and property tax come from the structured annual expenses when
  supplied, otherwise from the flat monthly insurance / annual tax fields.

normalize_operating_expenses() resolves both once into tagged variants so the
per-month calculator never re-checks which field is populated.
"""

import logging
from dataclasses import dataclass
from typing import Union

from ..models.inputs import OperatingExpenses
from .amounts import non_negative

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PercentManagementFee:
    """Management fee as a percent (0-100) of rental income."""

    percent: float

    def monthly_fee(self, rental_income: float) -> float:
        return rental_income * self.percent / 100


@dataclass(frozen=True)
class FixedManagementFee:
    """Flat monthly management fee."""

    amount: float

    def monthly_fee(self, rental_income: float) -> float:
        return self.amount


ManagementFee = Union[PercentManagementFee, FixedManagementFee]


@dataclass(frozen=True)
class StructuredAnnualExpenses:
    """Annual insurance, tax, and other expenses prorated to 1/12 per month."""

    insurance: float
    property_tax: float
    other: float

    def monthly_amount(self) -> float:
        return (self.insurance + self.property_tax + self.other) / 12


@dataclass(frozen=True)
class LegacyFlatExpenses:
    """Flat monthly insurance plus annual property tax prorated monthly."""

    monthly_insurance: float
    annual_property_tax: float

    def monthly_amount(self) -> float:
        return self.monthly_insurance + self.annual_property_tax / 12


AnnualExpenseBasis = Union[StructuredAnnualExpenses, LegacyFlatExpenses]


@dataclass(frozen=True)
class NormalizedOperatingExpenses:
    """Operating expenses with either/or choices resolved."""

    management_fee: ManagementFee
    annual_basis: AnnualExpenseBasis
    monthly_reserves: float
    monthly_utilities: float
    monthly_other: float

    @property
    def fixed_monthly(self) -> float:
        """Monthly expenses that do not depend on rental income."""
        return (
            self.monthly_reserves
            + self.monthly_utilities
            + self.monthly_other
            + self.annual_basis.monthly_amount()
        )


def normalize_operating_expenses(expenses: OperatingExpenses) -> NormalizedOperatingExpenses:
    """Resolve the management-fee and annual-expense choices.

    Args:
        expenses: Raw operating expense assumptions.

    Returns:
        NormalizedOperatingExpenses with tagged variants.
    """
    management_pct = non_negative(expenses.property_management_percent)
    if management_pct > 0:
        management_fee: ManagementFee = PercentManagementFee(management_pct)
    else:
        management_fee = FixedManagementFee(non_negative(expenses.monthly_property_management))

    annual = expenses.annual_expenses
    if annual is not None:
        annual_basis: AnnualExpenseBasis = StructuredAnnualExpenses(
            insurance=non_negative(annual.insurance),
            property_tax=non_negative(annual.property_tax),
            other=non_negative(annual.other),
        )
    else:
        annual_basis = LegacyFlatExpenses(
            monthly_insurance=non_negative(expenses.monthly_property_insurance),
            annual_property_tax=non_negative(expenses.annual_property_tax),
        )

    logger.debug("Operating expenses: %s, %s", management_fee, annual_basis)

    return NormalizedOperatingExpenses(
        management_fee=management_fee,
        annual_basis=annual_basis,
        monthly_reserves=non_negative(expenses.monthly_reserves),
        monthly_utilities=non_negative(expenses.monthly_utilities),
        monthly_other=non_negative(expenses.monthly_other),
    )


def calculate_operating_expenses(
    expenses: NormalizedOperatingExpenses,
    rental_income: float,
) -> float:
    """Calculate total operating expenses for one month.

    OpEx = management fee + reserves + utilities + other
           + monthly share of insurance and property tax

    Args:
        expenses: Normalized operating expenses.
        rental_income: Rental income for the same month.

    Returns:
        Total monthly operating expenses.

    Example:
        >>> opex = normalize_operating_expenses(OperatingExpenses(
        ...     property_management_percent=8,
        ...     annual_expenses=AnnualExpenses(insurance=1200, property_tax=2400),
        ... ))
        >>> calculate_operating_expenses(opex, rental_income=1800)
        444.0
    """
    return expenses.management_fee.monthly_fee(rental_income) + expenses.fixed_monthly
