"""Monthly cash flow projection engine.

Walks the projection horizon month by month:
- Construction months draw the straight-line cost budget, overhead, and
  milestone payments (plus interest-only debt service).
- Post-construction months recognize rental income, operating expenses,
  and debt service.

The cumulative balance is the running sum of net cash flow from the first
month, and drives the peak cash need and months-negative risk metrics.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np
from dateutil.relativedelta import relativedelta

from ..models.config import ProFormaConfig, DEFAULT_CONFIG
from ..models.inputs import CostLine, OverheadMethod, Project, ProFormaInput
from ..models.projection import (
    CostBreakdown,
    MonthlyCashFlow,
    Phase,
    ProFormaProjection,
    ProFormaSummary,
)
from .costs import (
    CostAggregate,
    aggregate_costs,
    calculate_overhead_allocation,
    distribute_costs_evenly,
    get_cost_share,
)
from .debt import calculate_monthly_debt_service, debt_service_applies
from .expenses import calculate_operating_expenses, normalize_operating_expenses
from .milestones import milestone_payments_for_month
from .phases import ConstructionSchedule, get_phase, resolve_construction_schedule
from .revenue import calculate_rental_income, calculate_rental_summary

logger = logging.getLogger(__name__)


def validate_projection_months(projection_months: int, config: ProFormaConfig) -> None:
    """Reject horizons that are empty or unreasonably long.

    Raises:
        ValueError: If projection_months is not in [1, max_projection_months].
    """
    if projection_months <= 0:
        raise ValueError(f"projection_months must be positive, got {projection_months}")
    if projection_months > config.max_projection_months:
        raise ValueError(
            f"projection_months {projection_months} exceeds the maximum of "
            f"{config.max_projection_months}"
        )


def generate_monthly_cash_flows(
    inputs: ProFormaInput,
    aggregate: CostAggregate,
    schedule: ConstructionSchedule,
) -> List[MonthlyCashFlow]:
    """Generate one cash flow row per projection month.

    Args:
        inputs: Projection assumptions.
        aggregate: Aggregated estimate costs.
        schedule: Resolved construction schedule.

    Returns:
        Monthly cash flows in chronological order.
    """
    total_cost = aggregate.total_estimated_cost
    distribution = distribute_costs_evenly(total_cost, schedule.construction_months, aggregate)
    opex = normalize_operating_expenses(inputs.operating_expenses)
    monthly_debt_service = calculate_monthly_debt_service(
        inputs.debt_service, inputs.include_debt_service,
    )

    months: List[MonthlyCashFlow] = []
    cumulative_balance = 0.0

    for i in range(inputs.projection_months):
        current_month = schedule.start_date + relativedelta(months=i)
        phase = get_phase(current_month, schedule)
        cf = MonthlyCashFlow(
            month=current_month.strftime("%Y-%m"),
            month_label=current_month.strftime("%B %Y"),
            phase=phase,
        )

        cf.milestone_payments = milestone_payments_for_month(
            inputs.payment_milestones, current_month, phase,
        )

        if phase == Phase.CONSTRUCTION:
            share = get_cost_share(distribution, i)
            cf.labor_cost = share.labor
            cf.material_cost = share.material
            cf.subcontractor_cost = share.subcontractor
            cf.overhead_allocation = calculate_overhead_allocation(
                inputs.overhead_allocation_method,
                inputs.monthly_overhead,
                share.total,
                total_cost,
                schedule.construction_months,
            )
        else:
            if inputs.include_rental_income:
                cf.rental_income = calculate_rental_income(inputs.rental_units, current_month)
            if inputs.include_operating_expenses:
                cf.operating_expenses = calculate_operating_expenses(opex, cf.rental_income)

        if debt_service_applies(phase, inputs.debt_service):
            cf.debt_service = monthly_debt_service

        cf.total_inflow = cf.milestone_payments + cf.rental_income
        cf.total_outflow = (
            cf.labor_cost
            + cf.material_cost
            + cf.subcontractor_cost
            + cf.overhead_allocation
            + cf.operating_expenses
            + cf.debt_service
        )
        cf.net_cash_flow = cf.total_inflow - cf.total_outflow
        cumulative_balance += cf.net_cash_flow
        cf.cumulative_balance = cumulative_balance

        months.append(cf)

    return months


def summarize_cash_flows(
    months: Sequence[MonthlyCashFlow],
    property_value: Optional[float] = None,
    initial_investment: Optional[float] = None,
) -> ProFormaSummary:
    """Calculate totals, cash risk metrics, and stabilized operating figures.

    Peak cash needed is the deepest negative cumulative balance (zero if the
    balance never goes negative). Stabilized figures average only the
    post-construction months that earn rental income:

        NOI = (avg rental income - avg operating expenses) x 12
        Cash flow after debt = (NOI / 12 - avg debt service) x 12

    Args:
        months: Monthly cash flows.
        property_value: Property value for cap rate, if known.
        initial_investment: Equity invested for cash-on-cash return, if known.

    Returns:
        ProFormaSummary.
    """
    if not months:
        return ProFormaSummary()

    balances = np.array([m.cumulative_balance for m in months])

    total_inflow = sum(m.total_inflow for m in months)
    total_outflow = sum(m.total_outflow for m in months)

    stabilized = [
        m for m in months
        if m.phase == Phase.POST_CONSTRUCTION and m.rental_income > 0
    ]
    if stabilized:
        avg_rental = float(np.mean([m.rental_income for m in stabilized]))
        avg_opex = float(np.mean([m.operating_expenses for m in stabilized]))
        avg_debt = float(np.mean([m.debt_service for m in stabilized]))
    else:
        avg_rental = avg_opex = avg_debt = 0.0

    noi = (avg_rental - avg_opex) * 12
    cash_flow_after_debt = (noi / 12 - avg_debt) * 12

    summary = ProFormaSummary(
        total_inflow=total_inflow,
        total_outflow=total_outflow,
        net_cash_flow=total_inflow - total_outflow,
        peak_cash_needed=max(0.0, float(np.max(-balances))),
        months_negative=int(np.count_nonzero(balances < 0)),
        total_rental_income=sum(m.rental_income for m in months),
        annual_rental_income=avg_rental * 12,
        monthly_rental_income=avg_rental,
        total_operating_expenses=sum(m.operating_expenses for m in months),
        annual_operating_expenses=avg_opex * 12,
        total_debt_service=sum(m.debt_service for m in months),
        monthly_debt_service=avg_debt,
        net_operating_income=noi,
        cash_flow_after_debt=cash_flow_after_debt,
    )

    if property_value is not None and property_value > 0:
        summary.cap_rate = noi / property_value
    if initial_investment is not None and initial_investment > 0:
        summary.cash_on_cash_return = cash_flow_after_debt / initial_investment

    return summary


def project_cash_flow(
    project: Project,
    cost_lines: Sequence[CostLine],
    inputs: ProFormaInput,
    config: Optional[ProFormaConfig] = None,
) -> ProFormaProjection:
    """Project monthly cash flow for a construction project.

    This is the main entry point. It aggregates the estimate, resolves the
    construction window, builds the monthly rows, and derives the summary,
    cost breakdown, and rental summary.

    When the horizon is shorter than construction, months past the horizon
    are never projected and their share of the cost budget is not paid out.

    Args:
        project: Project identity, echoed into the result.
        cost_lines: Estimate line items (read only).
        inputs: Projection assumptions.
        config: Engine configuration (defaults to DEFAULT_CONFIG).

    Returns:
        ProFormaProjection.

    Raises:
        ValueError: If projection_months is not positive or exceeds the
            configured maximum.

    Example:
        >>> projection = project_cash_flow(project, cost_lines, ProFormaInput(
        ...     contract_value=500_000,
        ...     start_date=date(2026, 1, 1),
        ...     projection_months=12,
        ...     overhead_allocation_method=OverheadMethod.NONE,
        ... ))
        >>> projection.total_estimated_cost
        400000.0
    """
    config = config or DEFAULT_CONFIG
    validate_projection_months(inputs.projection_months, config)

    aggregate = aggregate_costs(cost_lines)
    total_cost = aggregate.total_estimated_cost

    schedule = resolve_construction_schedule(
        inputs.start_date,
        inputs.projection_months,
        inputs.construction_completion_date,
        config,
    )

    months = generate_monthly_cash_flows(inputs, aggregate, schedule)
    summary = summarize_cash_flows(months, inputs.property_value, inputs.initial_investment)

    cost_breakdown = CostBreakdown(
        labor_percent=aggregate.labor_percent,
        material_percent=aggregate.material_percent,
        subcontractor_percent=aggregate.subcontractor_percent,
    )
    if total_cost > 0 and inputs.overhead_allocation_method != OverheadMethod.NONE:
        overhead_total = sum(m.overhead_allocation for m in months)
        if overhead_total > 0:
            cost_breakdown.overhead_percent = overhead_total / (total_cost + overhead_total) * 100

    projected_profit = inputs.contract_value - total_cost
    projected_margin = projected_profit / inputs.contract_value if inputs.contract_value else 0.0

    logger.debug(
        "Projected %s over %d months: net %.2f, peak cash %.2f, %d months negative",
        project.id, len(months), summary.net_cash_flow,
        summary.peak_cash_needed, summary.months_negative,
    )

    return ProFormaProjection(
        project_id=project.id,
        project_name=project.name,
        contract_value=inputs.contract_value,
        total_estimated_cost=total_cost,
        projected_profit=projected_profit,
        projected_margin=projected_margin,
        monthly_cash_flows=months,
        summary=summary,
        cost_breakdown=cost_breakdown,
        rental_summary=calculate_rental_summary(
            inputs.rental_units,
            inputs.include_rental_income,
            inputs.total_project_square_footage,
        ),
    )
