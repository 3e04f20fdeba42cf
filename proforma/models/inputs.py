"""Input data model for a construction pro forma projection."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class RentType(str, Enum):
    """How a rental unit's monthly rent is derived."""

    FIXED = "fixed"  # Flat monthly amount
    PER_AREA = "per-area"  # Square footage x rent per square foot


class PaymentType(str, Enum):
    """Debt repayment structure."""

    INTEREST_ONLY = "interest-only"
    AMORTIZING = "amortizing"


class OverheadMethod(str, Enum):
    """How company overhead is charged to construction months."""

    PROPORTIONAL = "proportional"  # Weighted by each month's share of cost
    FLAT = "flat"  # Same amount every construction month
    NONE = "none"


@dataclass
class Project:
    """Identifying metadata for the project being projected."""

    id: str
    name: str


@dataclass
class CostLine:
    """Estimate line item totals.

    Only the totals matter to the projection; quantities and rates stay with
    the estimate that produced them.
    """

    total_cost: float = 0.0
    labor_cost: float = 0.0
    material_cost: float = 0.0
    subcontractor_cost: float = 0.0
    name: str = ""


@dataclass
class PaymentMilestone:
    """Scheduled payment from the owner or lender.

    Only the calendar month of ``date`` is used for bucketing.
    """

    id: str
    name: str
    date: date
    amount: float
    percent_complete: float = 0.0  # 0-100, informational
    description: str = ""


@dataclass
class RentalUnit:
    """A leasable unit that produces income after construction."""

    name: str = ""
    rent_type: RentType = RentType.FIXED
    monthly_rent: Optional[float] = None  # Used when rent_type is FIXED
    square_footage: Optional[float] = None
    rent_per_sqft: Optional[float] = None  # Monthly $/sqft, used when PER_AREA
    occupancy_rate: float = 100.0  # 0-100 steady-state occupancy
    occupancy_start_date: Optional[date] = None  # No income before this month


@dataclass
class AnnualExpenses:
    """Annual property expenses, charged at 1/12 per month."""

    insurance: float = 0.0
    property_tax: float = 0.0
    other: float = 0.0


@dataclass
class OperatingExpenses:
    """Post-construction operating expense assumptions.

    ``property_management_percent`` (of rental income) takes precedence over
    ``monthly_property_management`` whenever it is non-zero. When
    ``annual_expenses`` is absent, the flat ``monthly_property_insurance``
    and ``annual_property_tax`` fields are used instead.
    """

    property_management_percent: float = 0.0
    monthly_property_management: float = 0.0
    monthly_reserves: float = 0.0
    monthly_utilities: float = 0.0
    monthly_other: float = 0.0
    annual_expenses: Optional[AnnualExpenses] = None

    # Flat fields used when annual_expenses is not supplied
    monthly_property_insurance: float = 0.0
    annual_property_tax: float = 0.0


@dataclass
class DebtService:
    """Loan terms for the project's debt."""

    loan_amount: float = 0.0
    interest_rate: float = 0.0  # Annual percent (5.5 = 5.5%)
    loan_term_months: int = 0
    payment_type: PaymentType = PaymentType.AMORTIZING


@dataclass
class ProFormaInput:
    """All user-entered assumptions for a single projection."""

    contract_value: float
    start_date: date
    projection_months: int = 12
    payment_milestones: List[PaymentMilestone] = field(default_factory=list)

    # Overhead
    monthly_overhead: float = 0.0
    overhead_allocation_method: OverheadMethod = OverheadMethod.PROPORTIONAL

    # Construction completion (inferred from the horizon when absent)
    construction_completion_date: Optional[date] = None

    # Rental income
    include_rental_income: bool = False
    rental_units: List[RentalUnit] = field(default_factory=list)
    total_project_square_footage: Optional[float] = None

    # Operating expenses
    include_operating_expenses: bool = False
    operating_expenses: OperatingExpenses = field(default_factory=OperatingExpenses)

    # Debt service
    include_debt_service: bool = False
    debt_service: DebtService = field(default_factory=DebtService)

    # Return metrics (optional)
    property_value: Optional[float] = None
    initial_investment: Optional[float] = None
