"""Chart data routes."""

from fastapi import APIRouter

from pathwise.api.schemas import VisualizationPointResponse, VisualizationRequest
from pathwise.config import settings
from pathwise.engine.visualization import generate_visualization_data
from pathwise.models.visualization import SampleCadence

router = APIRouter(prefix="/api/v1/visualization", tags=["visualization"])


@router.post("", response_model=list[VisualizationPointResponse])
async def visualization_series(req: VisualizationRequest):
    """Sampled per-asset and aggregate values over a date range."""
    points = generate_visualization_data(
        [r.to_entity() for r in req.loans],
        [r.to_entity() for r in req.investments],
        start_date=req.start_date,
        end_date=req.end_date,
        cadence=req.cadence or SampleCadence(settings.visualization_cadence),
        horizon_years=settings.visualization_horizon_years,
    )
    return [
        VisualizationPointResponse(
            date=p.date,
            loan_values=p.loan_values,
            investment_values=p.investment_values,
            total_loan_value=p.total_loan_value,
            total_investment_value=p.total_investment_value,
            overall_position=p.overall_position,
        )
        for p in points
    ]
