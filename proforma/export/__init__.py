"""Export modules for pro forma projections."""

from .tables import (
    CASH_FLOW_COLUMNS,
    cash_flows_to_dataframe,
    summary_to_series,
)

__all__ = [
    "CASH_FLOW_COLUMNS",
    "cash_flows_to_dataframe",
    "summary_to_series",
]
