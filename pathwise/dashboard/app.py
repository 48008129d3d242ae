"""Plotly Dash application: financial position chart for the cached portfolio."""

import logging
from datetime import date

from dash import Dash, Input, Output, dcc, html

from pathwise.config import settings
from pathwise.dashboard.figures import build_position_figure
from pathwise.data.cache import PortfolioCache
from pathwise.engine.visualization import generate_visualization_data, max_visualization_date
from pathwise.models.visualization import SampleCadence

logger = logging.getLogger(__name__)

this_year = date.today().year

app = Dash(__name__, title="Pathwise")

app.layout = html.Div([
    html.Nav([
        html.H1("Pathwise", style={"fontSize": "1.5rem", "margin": "0"}),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem",
        "marginBottom": "2rem",
    }),

    html.Div([
        html.Div([
            html.Label("Start Year"),
            dcc.Input(id="start-year", type="number", value=this_year, step=1),
        ], style={"width": "200px"}),
        html.Div([
            html.Label("End Year"),
            dcc.Input(
                id="end-year",
                type="number",
                value=this_year + settings.visualization_horizon_years,
                step=1,
            ),
        ], style={"width": "200px"}),
        html.Div([
            html.Label("Cadence"),
            dcc.Dropdown(
                id="cadence",
                options=[{"label": c.value.title(), "value": c.value} for c in SampleCadence],
                value=settings.visualization_cadence,
                clearable=False,
            ),
        ], style={"width": "200px"}),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "2rem"}),

    html.Div(id="range-error", style={"color": "#e94560"}),
    dcc.Graph(id="position-chart"),
], style={"maxWidth": "1200px", "margin": "0 auto", "padding": "0 1rem"})


@app.callback(
    Output("position-chart", "figure"),
    Output("range-error", "children"),
    Input("start-year", "value"),
    Input("end-year", "value"),
    Input("cadence", "value"),
)
def update_chart(start_year, end_year, cadence):
    cached = PortfolioCache().load()
    loans, investments = cached if cached else ([], [])

    if start_year is None or end_year is None:
        start_year = this_year
        end_year = max_visualization_date(
            loans, investments, horizon_years=settings.visualization_horizon_years
        ).year
    if start_year > end_year:
        return build_position_figure([], loans, investments), "Start year must be less than or equal to end year"

    points = generate_visualization_data(
        loans,
        investments,
        start_date=date(int(start_year), 1, 1),
        end_date=date(int(end_year), 12, 31),
        cadence=SampleCadence(cadence),
        horizon_years=settings.visualization_horizon_years,
    )
    logger.debug("Rendering %d points for %d-%d", len(points), start_year, end_year)
    return build_position_figure(points, loans, investments), ""


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    app.run(debug=settings.debug, port=8050)
