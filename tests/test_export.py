"""Tests for tabular projection export."""

import pytest

from proforma.calculations.cashflow import project_cash_flow
from proforma.export.tables import CASH_FLOW_COLUMNS, cash_flows_to_dataframe, summary_to_series


class TestCashFlowsToDataFrame:
    """Tests for the monthly cash flow table."""

    def test_one_row_per_month(self, project, cost_lines, stabilized_inputs):
        result = project_cash_flow(project, cost_lines, stabilized_inputs)
        df = cash_flows_to_dataframe(result)

        assert len(df) == 24
        assert list(df.columns) == list(CASH_FLOW_COLUMNS)
        assert df.index.name == "month"
        assert df.index[0] == "2026-01"

    def test_values_match_projection(self, project, cost_lines, stabilized_inputs):
        result = project_cash_flow(project, cost_lines, stabilized_inputs)
        df = cash_flows_to_dataframe(result)

        last = result.monthly_cash_flows[-1]
        assert df.loc[last.month, "Cumulative Balance"] == pytest.approx(last.cumulative_balance)
        assert df["Net Cash Flow"].sum() == pytest.approx(last.cumulative_balance)
        assert df.loc["2026-01", "Month"] == "January 2026"

    def test_phase_labels(self, project, cost_lines, stabilized_inputs):
        result = project_cash_flow(project, cost_lines, stabilized_inputs)
        df = cash_flows_to_dataframe(result)

        assert df.loc["2026-01", "Phase"] == "Build"
        assert df.loc["2026-07", "Phase"] == "Rent"


class TestSummaryToSeries:
    """Tests for the headline figures."""

    def test_construction_only_omits_rental_rows(self, project, cost_lines, construction_inputs):
        result = project_cash_flow(project, cost_lines, construction_inputs)
        series = summary_to_series(result)

        assert series["Total Estimated Cost"] == 400_000
        assert series["Peak Cash Needed"] == pytest.approx(350_000)
        assert "Net Operating Income" not in series.index
        assert series.name == "Main Street Mixed Use"

    def test_margin_labeled_as_ratio(self, project, cost_lines, construction_inputs):
        """Margin is exported as a ratio, distinct from the 0-100 cost percents."""
        result = project_cash_flow(project, cost_lines, construction_inputs)
        series = summary_to_series(result)

        assert series["Projected Margin Ratio"] == pytest.approx(0.2)
        assert "Projected Margin" not in series.index

    def test_rental_rows_included(self, project, cost_lines, stabilized_inputs):
        result = project_cash_flow(project, cost_lines, stabilized_inputs)
        series = summary_to_series(result)

        assert series["Monthly Rental Income"] == pytest.approx(3_000)
        assert series["Total Units"] == 2
