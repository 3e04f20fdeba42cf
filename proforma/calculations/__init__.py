"""Calculation modules for the construction pro forma engine."""

from .costs import (
    CostAggregate,
    MonthlyCostShare,
    aggregate_costs,
    distribute_costs_evenly,
    calculate_overhead_allocation,
)
from .phases import ConstructionSchedule, resolve_construction_schedule, get_phase
from .milestones import milestone_payments_for_month, generate_default_milestones
from .revenue import calculate_unit_monthly_rent, calculate_rental_income, calculate_rental_summary
from .expenses import (
    PercentManagementFee,
    FixedManagementFee,
    StructuredAnnualExpenses,
    LegacyFlatExpenses,
    NormalizedOperatingExpenses,
    normalize_operating_expenses,
    calculate_operating_expenses,
)
from .debt import calculate_monthly_debt_service, debt_service_applies

# Projection engine (entry point)
from .cashflow import (
    project_cash_flow,
    generate_monthly_cash_flows,
    summarize_cash_flows,
)

__all__ = [
    "CostAggregate",
    "MonthlyCostShare",
    "aggregate_costs",
    "distribute_costs_evenly",
    "calculate_overhead_allocation",
    "ConstructionSchedule",
    "resolve_construction_schedule",
    "get_phase",
    "milestone_payments_for_month",
    "generate_default_milestones",
    "calculate_unit_monthly_rent",
    "calculate_rental_income",
    "calculate_rental_summary",
    "PercentManagementFee",
    "FixedManagementFee",
    "StructuredAnnualExpenses",
    "LegacyFlatExpenses",
    "NormalizedOperatingExpenses",
    "normalize_operating_expenses",
    "calculate_operating_expenses",
    "calculate_monthly_debt_service",
    "debt_service_applies",
    "project_cash_flow",
    "generate_monthly_cash_flows",
    "summarize_cash_flows",
]
