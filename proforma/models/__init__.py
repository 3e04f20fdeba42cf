"""Data models for the construction pro forma engine."""

from .lookups import (
    MilestoneTemplate,
    DEFAULT_MILESTONE_SCHEDULE,
    DEFAULT_CONSTRUCTION_FRACTION,
    MAX_PROJECTION_MONTHS,
)
from .config import ProFormaConfig, DEFAULT_CONFIG
from .inputs import (
    RentType,
    PaymentType,
    OverheadMethod,
    Project,
    CostLine,
    PaymentMilestone,
    RentalUnit,
    AnnualExpenses,
    OperatingExpenses,
    DebtService,
    ProFormaInput,
)
from .projection import (
    Phase,
    MonthlyCashFlow,
    ProFormaSummary,
    CostBreakdown,
    RentalSummary,
    ProFormaProjection,
)

__all__ = [
    "MilestoneTemplate",
    "DEFAULT_MILESTONE_SCHEDULE",
    "DEFAULT_CONSTRUCTION_FRACTION",
    "MAX_PROJECTION_MONTHS",
    "ProFormaConfig",
    "DEFAULT_CONFIG",
    "RentType",
    "PaymentType",
    "OverheadMethod",
    "Project",
    "CostLine",
    "PaymentMilestone",
    "RentalUnit",
    "AnnualExpenses",
    "OperatingExpenses",
    "DebtService",
    "ProFormaInput",
    "Phase",
    "MonthlyCashFlow",
    "ProFormaSummary",
    "CostBreakdown",
    "RentalSummary",
    "ProFormaProjection",
]
