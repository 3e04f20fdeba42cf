"""Tabular export of pro forma projections.

Produces pandas structures with the same column set as the spreadsheet
export, so presentation layers can write them to Excel, CSV, or render them
without re-deriving any figure.
"""

from typing import Dict, List

import pandas as pd

from ..models.projection import Phase, ProFormaProjection

# Display column -> MonthlyCashFlow attribute
CASH_FLOW_COLUMNS: Dict[str, str] = {
    "Month": "month_label",
    "Phase": "phase",
    "Milestone Payments": "milestone_payments",
    "Rental Income": "rental_income",
    "Total Inflow": "total_inflow",
    "Labor Cost": "labor_cost",
    "Material Cost": "material_cost",
    "Subcontractor Cost": "subcontractor_cost",
    "Overhead": "overhead_allocation",
    "Operating Expenses": "operating_expenses",
    "Debt Service": "debt_service",
    "Total Outflow": "total_outflow",
    "Net Cash Flow": "net_cash_flow",
    "Cumulative Balance": "cumulative_balance",
}

PHASE_LABELS: Dict[Phase, str] = {
    Phase.CONSTRUCTION: "Build",
    Phase.POST_CONSTRUCTION: "Rent",
}


def cash_flows_to_dataframe(projection: ProFormaProjection) -> pd.DataFrame:
    """Convert monthly cash flows to a DataFrame indexed by month key.

    Args:
        projection: Projection to export.

    Returns:
        DataFrame with one row per month and CASH_FLOW_COLUMNS as columns.
    """
    rows: List[Dict[str, object]] = []
    for cf in projection.monthly_cash_flows:
        row = {column: getattr(cf, attr) for column, attr in CASH_FLOW_COLUMNS.items()}
        row["Phase"] = PHASE_LABELS[cf.phase]
        rows.append(row)

    index = pd.Index([cf.month for cf in projection.monthly_cash_flows], name="month")
    return pd.DataFrame(rows, index=index, columns=list(CASH_FLOW_COLUMNS))


def summary_to_series(projection: ProFormaProjection) -> pd.Series:
    """Collect the headline projection figures into a Series."""
    summary = projection.summary
    rental = projection.rental_summary

    data = {
        "Contract Value": projection.contract_value,
        "Total Estimated Cost": projection.total_estimated_cost,
        "Projected Profit": projection.projected_profit,
        "Projected Margin Ratio": projection.projected_margin,
        "Total Inflow": summary.total_inflow,
        "Total Outflow": summary.total_outflow,
        "Net Cash Flow": summary.net_cash_flow,
        "Peak Cash Needed": summary.peak_cash_needed,
        "Months Negative": summary.months_negative,
    }

    # Rental figures only when the project earns rent
    if summary.monthly_rental_income > 0:
        data.update({
            "Monthly Rental Income": summary.monthly_rental_income,
            "Annual Rental Income": summary.annual_rental_income,
            "Net Operating Income": summary.net_operating_income,
            "Cash Flow After Debt": summary.cash_flow_after_debt,
            "Total Units": rental.total_units,
            "Total Project Square Footage": rental.total_project_square_footage,
            "Rental Units Square Footage": rental.total_square_footage,
            "Average Rent Per Unit": rental.average_rent_per_unit,
            "Average Rent Per Sqft": rental.average_rent_per_sqft,
            "Occupancy Rate": rental.stabilized_occupancy,
        })

    return pd.Series(data, name=projection.project_name, dtype=object)
