"""Output data model for a construction pro forma projection."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Phase(str, Enum):
    """Project phase for a projection month."""

    CONSTRUCTION = "construction"
    POST_CONSTRUCTION = "post-construction"


@dataclass
class MonthlyCashFlow:
    """Cash flow for a single calendar month."""

    month: str  # "YYYY-MM"
    month_label: str  # "January 2026"
    phase: Phase

    # Inflows
    milestone_payments: float = 0.0
    rental_income: float = 0.0

    # Outflows (construction)
    labor_cost: float = 0.0
    material_cost: float = 0.0
    subcontractor_cost: float = 0.0
    overhead_allocation: float = 0.0

    # Outflows (post-construction, plus interest-only debt during construction)
    operating_expenses: float = 0.0
    debt_service: float = 0.0

    # Totals
    total_inflow: float = 0.0
    total_outflow: float = 0.0
    net_cash_flow: float = 0.0
    cumulative_balance: float = 0.0


@dataclass
class ProFormaSummary:
    """Totals, cash risk metrics, and stabilized operating figures."""

    total_inflow: float = 0.0
    total_outflow: float = 0.0
    net_cash_flow: float = 0.0
    peak_cash_needed: float = 0.0
    months_negative: int = 0

    # Rental income
    total_rental_income: float = 0.0
    annual_rental_income: float = 0.0
    monthly_rental_income: float = 0.0  # Stabilized average

    # Operating expenses
    total_operating_expenses: float = 0.0
    annual_operating_expenses: float = 0.0

    # Debt service
    total_debt_service: float = 0.0
    monthly_debt_service: float = 0.0

    # Stabilized annual figures
    net_operating_income: float = 0.0
    cash_flow_after_debt: float = 0.0
    cap_rate: Optional[float] = None  # NOI / property value
    cash_on_cash_return: Optional[float] = None  # Cash flow after debt / investment


@dataclass
class CostBreakdown:
    """Share of estimated cost by type, in percent (0-100)."""

    labor_percent: float = 0.0
    material_percent: float = 0.0
    subcontractor_percent: float = 0.0
    overhead_percent: float = 0.0


@dataclass
class RentalSummary:
    """Rent roll overview at stabilized occupancy."""

    total_units: int = 0
    total_square_footage: float = 0.0  # Sum of rental unit areas
    total_project_square_footage: float = 0.0
    average_rent_per_unit: float = 0.0
    average_rent_per_sqft: float = 0.0
    stabilized_occupancy: float = 0.0  # Simple average of unit occupancy (0-100)


@dataclass
class ProFormaProjection:
    """Complete pro forma projection result."""

    project_id: str
    project_name: str
    contract_value: float
    total_estimated_cost: float
    projected_profit: float
    projected_margin: float  # Profit / contract value
    monthly_cash_flows: List[MonthlyCashFlow] = field(default_factory=list)
    summary: ProFormaSummary = field(default_factory=ProFormaSummary)
    cost_breakdown: CostBreakdown = field(default_factory=CostBreakdown)
    rental_summary: RentalSummary = field(default_factory=RentalSummary)

    def get_phase_months(self, phase: Phase) -> List[MonthlyCashFlow]:
        """Get all months tagged with the given phase."""
        return [m for m in self.monthly_cash_flows if m.phase == phase]
