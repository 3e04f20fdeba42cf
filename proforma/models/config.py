"""Engine configuration carrying the default tables and heuristics."""

from dataclasses import dataclass
from typing import Tuple

from .lookups import (
    MilestoneTemplate,
    DEFAULT_MILESTONE_SCHEDULE,
    DEFAULT_CONSTRUCTION_FRACTION,
    MAX_PROJECTION_MONTHS,
)


@dataclass(frozen=True)
class ProFormaConfig:
    """Overridable defaults used by the projection engine.

    Callers that need a different draw schedule or construction-length
    heuristic pass their own instance instead of editing module constants.
    """

    milestone_schedule: Tuple[MilestoneTemplate, ...] = DEFAULT_MILESTONE_SCHEDULE
    construction_fraction: float = DEFAULT_CONSTRUCTION_FRACTION
    max_projection_months: int = MAX_PROJECTION_MONTHS


DEFAULT_CONFIG = ProFormaConfig()
