"""Construction phase segmentation."""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from ..models.config import ProFormaConfig, DEFAULT_CONFIG
from ..models.projection import Phase

logger = logging.getLogger(__name__)


@dataclass
class ConstructionSchedule:
    """Resolved construction window for a projection."""

    start_date: date  # First day of the start month
    completion_date: date  # First day of the first post-construction month
    construction_months: int  # Months the cost budget is spread over
    completion_inferred: bool  # True if derived from the horizon


def month_start(value: date) -> date:
    """Normalize a date or datetime to a plain date on the first of its month."""
    return date(value.year, value.month, 1)


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start`` to ``end`` (both month-normalized)."""
    delta = relativedelta(month_start(end), month_start(start))
    return delta.years * 12 + delta.months


def resolve_construction_schedule(
    start_date: date,
    projection_months: int,
    completion_date: Optional[date] = None,
    config: Optional[ProFormaConfig] = None,
) -> ConstructionSchedule:
    """Determine the construction completion date and construction length.

    When no completion date is given, construction is assumed to last
    ceil(construction_fraction x projection_months) months from the start.

    The construction month count is at least 1 so the cost budget always has
    somewhere to land, even when completion is on or before the start month.

    Args:
        start_date: Projection start date.
        projection_months: Length of the projection horizon.
        completion_date: Explicit construction completion date, if known.
        config: Engine configuration (defaults to DEFAULT_CONFIG).

    Returns:
        ConstructionSchedule with month-normalized dates.

    Example:
        >>> schedule = resolve_construction_schedule(date(2026, 1, 15), 12)
        >>> schedule.completion_date
        datetime.date(2026, 11, 1)
        >>> schedule.construction_months
        10
    """
    config = config or DEFAULT_CONFIG
    start = month_start(start_date)

    if completion_date is None:
        inferred_months = math.ceil(config.construction_fraction * projection_months)
        completion = start + relativedelta(months=inferred_months)
        inferred = True
    else:
        completion = month_start(completion_date)
        inferred = False

    construction_months = max(1, months_between(start, completion))

    logger.debug(
        "Construction schedule: %s to %s (%d months, inferred=%s)",
        start, completion, construction_months, inferred,
    )
    if construction_months > projection_months:
        logger.warning(
            "Projection horizon of %d months ends before construction completes "
            "(%d months); cost after month %d is not projected",
            projection_months, construction_months, projection_months,
        )

    return ConstructionSchedule(
        start_date=start,
        completion_date=completion,
        construction_months=construction_months,
        completion_inferred=inferred,
    )


def get_phase(current_month: date, schedule: ConstructionSchedule) -> Phase:
    """Classify a month as construction or post-construction.

    Args:
        current_month: First day of the month being classified.
        schedule: Resolved construction schedule.

    Returns:
        Phase.CONSTRUCTION before the completion month, otherwise
        Phase.POST_CONSTRUCTION.
    """
    if month_start(current_month) < schedule.completion_date:
        return Phase.CONSTRUCTION
    return Phase.POST_CONSTRUCTION
