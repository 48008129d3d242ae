"""Investment growth routes."""

from fastapi import APIRouter

from pathwise.api.schemas import (
    GrowthRequest,
    GrowthResponse,
    PitInvestmentRequest,
    PitInvestmentResponse,
)
from pathwise.engine.growth import generate_investment_growth, pit_investment
from pathwise.models.records import GrowthEntryRecord

router = APIRouter(prefix="/api/v1/investments", tags=["investments"])


@router.post("/growth", response_model=GrowthResponse)
async def growth_projection(req: GrowthRequest):
    """Period-by-period growth up to end_date (default today)."""
    growth = generate_investment_growth(req.investment.to_entity(), req.end_date)
    return GrowthResponse(growth=[
        GrowthEntryRecord(
            period=e.period,
            contribution_amount=e.contribution_amount,
            interest_earned=e.interest_earned,
            total_value=e.total_value,
        )
        for e in growth
    ])


@router.post("/pit", response_model=PitInvestmentResponse)
async def investment_snapshot(req: PitInvestmentRequest):
    """Contributions, interest and value of an investment as of a date."""
    pit = pit_investment(req.investment.to_entity(), req.as_of)
    return PitInvestmentResponse(
        current_periods=pit.current_periods,
        total_contributions=pit.total_contributions,
        total_interest_earned=pit.total_interest_earned,
        current_value=pit.current_value,
        projected_annual_return=pit.projected_annual_return,
    )
