"""Plotly figures for the financial position chart."""

import plotly.graph_objects as go

from pathwise.models.investment import Investment
from pathwise.models.loan import Loan
from pathwise.models.visualization import VisualizationDataPoint

LOAN_COLOR = "#e94560"
INVESTMENT_COLOR = "#2ecc71"
POSITION_COLOR = "#1a1a2e"


def _label(name: str, asset_id: str, seen: set[str]) -> str:
    """Display name, disambiguated by id when two assets share a name."""
    label = name if name not in seen else f"{name} ({asset_id[:8]})"
    seen.add(name)
    return label


def build_position_figure(
    points: list[VisualizationDataPoint],
    loans: list[Loan],
    investments: list[Investment],
) -> go.Figure:
    """Per-asset lines plus loan, investment and overall totals."""
    dates = [p.date for p in points]
    seen: set[str] = set()

    fig = go.Figure()
    for loan in loans:
        fig.add_trace(go.Scatter(
            x=dates,
            y=[float(p.loan_values.get(loan.id, 0)) for p in points],
            mode="lines",
            name=_label(loan.name, loan.id, seen),
            line=dict(color=LOAN_COLOR, width=1, dash="dot"),
        ))
    for inv in investments:
        fig.add_trace(go.Scatter(
            x=dates,
            y=[float(p.investment_values.get(inv.id, 0)) for p in points],
            mode="lines",
            name=_label(inv.name, inv.id, seen),
            line=dict(color=INVESTMENT_COLOR, width=1, dash="dot"),
        ))

    fig.add_trace(go.Scatter(
        x=dates,
        y=[float(p.total_loan_value) for p in points],
        mode="lines+markers",
        name="Total Loans",
        line=dict(color=LOAN_COLOR, width=3),
    ))
    fig.add_trace(go.Scatter(
        x=dates,
        y=[float(p.total_investment_value) for p in points],
        mode="lines+markers",
        name="Total Investments",
        line=dict(color=INVESTMENT_COLOR, width=3),
    ))
    fig.add_trace(go.Scatter(
        x=dates,
        y=[float(p.overall_position) for p in points],
        mode="lines+markers",
        name="Overall Position",
        line=dict(color=POSITION_COLOR, width=3),
    ))
    fig.update_layout(
        title="Financial Position Over Time",
        xaxis_title="Date",
        yaxis_title="Value ($)",
        hovermode="x unified",
    )
    return fig
