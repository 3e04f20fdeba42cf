"""Payment milestone lookup and default milestone schedule."""

import math
import uuid
from datetime import date
from typing import Iterable, List, Optional

from dateutil.relativedelta import relativedelta

from ..models.config import ProFormaConfig, DEFAULT_CONFIG
from ..models.inputs import PaymentMilestone
from ..models.projection import Phase
from .amounts import non_negative


def milestone_payments_for_month(
    milestones: Iterable[PaymentMilestone],
    current_month: date,
    phase: Phase,
) -> float:
    """Sum milestone payments falling in the current calendar month.

    Milestones are a construction-phase inflow; post-construction months
    always receive zero.

    Args:
        milestones: Payment milestones.
        current_month: Month being projected.
        phase: Phase of the month being projected.

    Returns:
        Total milestone payments for the month.
    """
    if phase != Phase.CONSTRUCTION:
        return 0.0

    return sum(
        (
            non_negative(m.amount)
            for m in milestones
            if m.date.year == current_month.year and m.date.month == current_month.month
        ),
        0.0,
    )


def generate_default_milestones(
    contract_value: float,
    start_date: date,
    months: int,
    config: Optional[ProFormaConfig] = None,
) -> List[PaymentMilestone]:
    """Generate a default milestone schedule from the contract value.

    Each template milestone lands floor(percent_complete/100 x months)
    months after the start and pays amount_percent of the contract value.
    With the default table:

        Project Start        0%   -> 10%
        Foundation Complete  15%  -> 15%
        Framing Complete     30%  -> 20%
        Rough-In Complete    50%  -> 20%
        Drywall Complete     70%  -> 15%
        Final Completion     100% -> 20%

    Args:
        contract_value: Total contract value.
        start_date: Date of the first milestone.
        months: Duration the schedule is spread over.
        config: Engine configuration supplying the milestone table.

    Returns:
        List of PaymentMilestone in schedule order.

    Raises:
        ValueError: If months is negative.
    """
    if months < 0:
        raise ValueError(f"Milestone duration must be non-negative, got {months}")

    config = config or DEFAULT_CONFIG
    milestones = []

    for template in config.milestone_schedule:
        offset = math.floor(template.percent_complete / 100 * months)
        milestones.append(PaymentMilestone(
            id=str(uuid.uuid4()),
            name=template.name,
            date=start_date + relativedelta(months=offset),
            amount=contract_value * template.amount_percent / 100,
            percent_complete=template.percent_complete,
        ))

    return milestones
