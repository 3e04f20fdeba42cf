#!/usr/bin/env python3
"""Example script to run a construction pro forma projection."""

import sys
from datetime import date
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from proforma.models.inputs import (
    AnnualExpenses,
    CostLine,
    DebtService,
    OperatingExpenses,
    OverheadMethod,
    PaymentType,
    ProFormaInput,
    Project,
    RentalUnit,
    RentType,
)
from proforma.calculations.cashflow import project_cash_flow
from proforma.calculations.milestones import generate_default_milestones
from proforma.export.tables import cash_flows_to_dataframe, summary_to_series


def get_example_cost_lines() -> list[CostLine]:
    """Get a small estimate for a two-story mixed-use building."""
    return [
        CostLine(name="Foundation", total_cost=60_000, labor_cost=20_000, material_cost=25_000, subcontractor_cost=15_000),
        CostLine(name="Framing", total_cost=110_000, labor_cost=55_000, material_cost=55_000),
        CostLine(name="MEP rough-in", total_cost=90_000, subcontractor_cost=90_000),
        CostLine(name="Drywall & finishes", total_cost=140_000, labor_cost=75_000, material_cost=65_000),
    ]


def get_example_inputs() -> ProFormaInput:
    """Get a build-then-rent projection with permanent debt."""
    start = date(2026, 1, 1)
    contract_value = 500_000
    construction_months = 9

    return ProFormaInput(
        contract_value=contract_value,
        start_date=start,
        projection_months=24,
        payment_milestones=generate_default_milestones(contract_value, start, construction_months),
        monthly_overhead=4_000,
        overhead_allocation_method=OverheadMethod.PROPORTIONAL,
        construction_completion_date=date(2026, 10, 1),
        include_rental_income=True,
        rental_units=[
            RentalUnit(name="First Floor Store", rent_type=RentType.FIXED, monthly_rent=2_500,
                       square_footage=1_200, occupancy_rate=90),
            RentalUnit(name="Unit 2A", rent_type=RentType.PER_AREA, square_footage=850,
                       rent_per_sqft=1.65, occupancy_rate=95),
            RentalUnit(name="Unit 2B", rent_type=RentType.PER_AREA, square_footage=850,
                       rent_per_sqft=1.65, occupancy_rate=95,
                       occupancy_start_date=date(2027, 1, 1)),
        ],
        total_project_square_footage=3_200,
        include_operating_expenses=True,
        operating_expenses=OperatingExpenses(
            property_management_percent=8,
            monthly_reserves=150,
            monthly_utilities=200,
            annual_expenses=AnnualExpenses(insurance=2_400, property_tax=4_800, other=600),
        ),
        include_debt_service=True,
        debt_service=DebtService(
            loan_amount=350_000,
            interest_rate=6.75,
            loan_term_months=360,
            payment_type=PaymentType.AMORTIZING,
        ),
        property_value=650_000,
        initial_investment=150_000,
    )


def main():
    project = Project(id="example-001", name="Main Street Mixed Use")
    projection = project_cash_flow(project, get_example_cost_lines(), get_example_inputs())

    print("=" * 80)
    print(f"PRO FORMA: {projection.project_name}")
    print("=" * 80)

    df = cash_flows_to_dataframe(projection)
    columns = ["Month", "Phase", "Total Inflow", "Total Outflow", "Net Cash Flow", "Cumulative Balance"]
    print(df[columns].to_string(float_format=lambda v: f"{v:,.0f}"))

    print()
    print("SUMMARY")
    print("-" * 80)
    for label, value in summary_to_series(projection).items():
        if isinstance(value, float):
            print(f"  {label:<32} {value:>14,.2f}")
        else:
            print(f"  {label:<32} {value:>14}")

    breakdown = projection.cost_breakdown
    print()
    print("COST BREAKDOWN")
    print("-" * 80)
    print(f"  Labor:          {breakdown.labor_percent:6.1f}%")
    print(f"  Material:       {breakdown.material_percent:6.1f}%")
    print(f"  Subcontractor:  {breakdown.subcontractor_percent:6.1f}%")
    print(f"  Overhead:       {breakdown.overhead_percent:6.1f}%")


if __name__ == "__main__":
    main()
