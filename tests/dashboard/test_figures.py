from dataclasses import replace
from datetime import date

from pathwise.dashboard.figures import build_position_figure
from pathwise.engine.visualization import generate_visualization_data


class TestBuildPositionFigure:
    def test_trace_per_asset_plus_totals(self, car_loan, mortgage, index_fund):
        points = generate_visualization_data(
            [car_loan, mortgage], [index_fund], start_date=date(2025, 1, 1), end_date=date(2030, 1, 1)
        )
        fig = build_position_figure(points, [car_loan, mortgage], [index_fund])
        names = [trace.name for trace in fig.data]
        assert names == ["Car Loan", "Mortgage", "Index Fund", "Total Loans", "Total Investments", "Overall Position"]
        assert len(fig.data[0].x) == 6

    def test_duplicate_names_disambiguated(self, car_loan):
        twin = replace(car_loan, id="abcdef123456")
        fig = build_position_figure([], [car_loan, twin], [])
        assert fig.data[0].name == "Car Loan"
        assert fig.data[1].name == "Car Loan (abcdef12)"

    def test_values_are_floats(self, index_fund):
        points = generate_visualization_data(
            [], [index_fund], start_date=date(2025, 1, 1), end_date=date(2026, 1, 1)
        )
        fig = build_position_figure(points, [], [index_fund])
        assert list(fig.data[0].y) == [10000.0, 10423.0]

    def test_empty(self):
        fig = build_position_figure([], [], [])
        assert len(fig.data) == 3
        assert fig.layout.title.text == "Financial Position Over Time"
