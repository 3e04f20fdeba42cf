"""Cost aggregation, straight-line monthly distribution, and overhead allocation."""

from dataclasses import dataclass
from typing import Iterable, List

from ..models.inputs import CostLine, OverheadMethod
from .amounts import non_negative


@dataclass
class CostAggregate:
    """Total estimated cost and its split by cost type."""

    total_estimated_cost: float
    labor_total: float
    material_total: float
    subcontractor_total: float
    labor_percent: float  # 0-100
    material_percent: float
    subcontractor_percent: float


@dataclass
class MonthlyCostShare:
    """Construction cost drawn in one construction month."""

    labor: float
    material: float
    subcontractor: float

    @property
    def total(self) -> float:
        return self.labor + self.material + self.subcontractor


def aggregate_costs(cost_lines: Iterable[CostLine]) -> CostAggregate:
    """Sum estimate line items into a total cost and type breakdown.

    Percentages are each category's share of total cost:
        labor_percent = sum(labor_cost) / sum(total_cost) x 100

    All three percentages are zero when there is no cost.

    Args:
        cost_lines: Estimate line items.

    Returns:
        CostAggregate with totals and percentages.

    Example:
        >>> agg = aggregate_costs([CostLine(400_000, 150_000, 150_000, 100_000)])
        >>> agg.labor_percent
        37.5
    """
    total = 0.0
    labor = 0.0
    material = 0.0
    subcontractor = 0.0

    for line in cost_lines:
        total += non_negative(line.total_cost)
        labor += non_negative(line.labor_cost)
        material += non_negative(line.material_cost)
        subcontractor += non_negative(line.subcontractor_cost)

    if total > 0:
        labor_pct = labor / total * 100
        material_pct = material / total * 100
        sub_pct = subcontractor / total * 100
    else:
        labor_pct = material_pct = sub_pct = 0.0

    return CostAggregate(
        total_estimated_cost=total,
        labor_total=labor,
        material_total=material,
        subcontractor_total=subcontractor,
        labor_percent=labor_pct,
        material_percent=material_pct,
        subcontractor_percent=sub_pct,
    )


def distribute_costs_evenly(
    total_cost: float,
    construction_months: int,
    aggregate: CostAggregate,
) -> List[MonthlyCostShare]:
    """Spread total cost evenly across construction months.

    Straight-line draw: every construction month gets the same share, split
    by the aggregate's type percentages.

    Args:
        total_cost: Total estimated cost to distribute.
        construction_months: Number of construction months (at least 1).
        aggregate: Cost aggregate supplying the type percentages.

    Returns:
        One MonthlyCostShare per construction month, indexed by offset from
        the start of construction.
    """
    if construction_months <= 0:
        return []

    monthly_total = total_cost / construction_months
    share = MonthlyCostShare(
        labor=monthly_total * aggregate.labor_percent / 100,
        material=monthly_total * aggregate.material_percent / 100,
        subcontractor=monthly_total * aggregate.subcontractor_percent / 100,
    )
    return [
        MonthlyCostShare(share.labor, share.material, share.subcontractor)
        for _ in range(construction_months)
    ]


def get_cost_share(distribution: List[MonthlyCostShare], offset: int) -> MonthlyCostShare:
    """Look up the cost share for a construction month offset.

    Offsets past the end of the table reuse the last month's share.
    """
    if not distribution:
        return MonthlyCostShare(0.0, 0.0, 0.0)
    return distribution[min(offset, len(distribution) - 1)]


def calculate_overhead_allocation(
    method: OverheadMethod,
    monthly_overhead: float,
    month_cost_total: float,
    total_estimated_cost: float,
    construction_months: int,
) -> float:
    """Calculate overhead charged to one construction month.

    - NONE: no overhead.
    - FLAT: the monthly overhead figure.
    - PROPORTIONAL: total construction overhead (monthly overhead x
      construction months) weighted by this month's share of total cost.

    Args:
        method: Overhead allocation method.
        monthly_overhead: Company overhead per month.
        month_cost_total: Labor + material + subcontractor for this month.
        total_estimated_cost: Total estimated cost of the project.
        construction_months: Number of construction months.

    Returns:
        Overhead allocated to this month.
    """
    overhead = non_negative(monthly_overhead)

    if method == OverheadMethod.FLAT:
        return overhead
    if method == OverheadMethod.PROPORTIONAL:
        if total_estimated_cost <= 0:
            return 0.0
        return (month_cost_total / total_estimated_cost) * (overhead * construction_months)
    return 0.0
