"""Construction pro forma projection engine.

Turns an estimate and a handful of financial assumptions into a monthly
cash flow forecast that carries a project from construction into operation.
"""

from .calculations.cashflow import project_cash_flow
from .calculations.milestones import generate_default_milestones

__all__ = [
    "project_cash_flow",
    "generate_default_milestones",
]
