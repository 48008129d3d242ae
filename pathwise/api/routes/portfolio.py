"""Portfolio import and merge routes."""

import json
import logging

from fastapi import APIRouter, Body, HTTPException

from pathwise.api.schemas import MergeCounts, MergeRequest, MergeResponse, PortfolioPayload
from pathwise.data.portfolio_io import PortfolioImportError, import_from_json, merge_data
from pathwise.models.records import InvestmentRecord, LoanRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/portfolio", tags=["portfolio"])


@router.post("/import", response_model=PortfolioPayload)
async def import_portfolio(payload: dict = Body(...)):
    """Validate an exported portfolio document."""
    try:
        loans, investments = import_from_json(json.dumps(payload))
    except PortfolioImportError as e:
        logger.info("Rejected portfolio import: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return PortfolioPayload(
        loans=[LoanRecord.from_entity(loan) for loan in loans],
        investments=[InvestmentRecord.from_entity(inv) for inv in investments],
    )


@router.post("/merge", response_model=MergeResponse)
async def merge_portfolio(req: MergeRequest):
    """Merge imported loans and investments into existing ones by id."""
    loans, loan_result = merge_data(
        [r.to_entity() for r in req.existing.loans],
        [r.to_entity() for r in req.imported.loans],
    )
    investments, inv_result = merge_data(
        [r.to_entity() for r in req.existing.investments],
        [r.to_entity() for r in req.imported.investments],
    )
    return MergeResponse(
        loans=[LoanRecord.from_entity(loan) for loan in loans],
        investments=[InvestmentRecord.from_entity(inv) for inv in investments],
        loans_result=MergeCounts(added=loan_result.added, updated=loan_result.updated),
        investments_result=MergeCounts(added=inv_result.added, updated=inv_result.updated),
    )
