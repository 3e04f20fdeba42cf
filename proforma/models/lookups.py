"""Lookup tables for default milestone schedules and projection heuristics."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class MilestoneTemplate:
    """One row of a default payment milestone schedule."""

    name: str
    percent_complete: float  # Point in the duration (0-100) the milestone lands on
    amount_percent: float  # Share of contract value paid (0-100)


# Common construction loan draw milestones
DEFAULT_MILESTONE_SCHEDULE: Tuple[MilestoneTemplate, ...] = (
    MilestoneTemplate("Project Start", percent_complete=0, amount_percent=10),
    MilestoneTemplate("Foundation Complete", percent_complete=15, amount_percent=15),
    MilestoneTemplate("Framing Complete", percent_complete=30, amount_percent=20),
    MilestoneTemplate("Rough-In Complete", percent_complete=50, amount_percent=20),
    MilestoneTemplate("Drywall Complete", percent_complete=70, amount_percent=15),
    MilestoneTemplate("Final Completion", percent_complete=100, amount_percent=20),
)

# Share of the projection horizon treated as construction when no
# completion date is supplied
DEFAULT_CONSTRUCTION_FRACTION = 0.8

# Upper bound on projection length (100 years of months)
MAX_PROJECTION_MONTHS = 1200
