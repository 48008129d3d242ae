"""Pydantic schemas for API request/response models."""

from datetime import date

from pydantic import BaseModel, Field

from pathwise.models.records import (
    Amount,
    AmortizationEntryRecord,
    GrowthEntryRecord,
    InvestmentRecord,
    LoanRecord,
)
from pathwise.models.visualization import SampleCadence


# ---- Request schemas ----

class PaymentRequest(BaseModel):
    principal: Amount
    interest_rate: Amount = Field(..., description="Annual rate in percent, 5.0 = 5%")
    term_count: int = Field(..., description="Number of monthly terms")


class ScheduleRequest(BaseModel):
    loan: LoanRecord
    term_limit: int | None = Field(None, ge=1)


class PitLoanRequest(BaseModel):
    loan: LoanRecord
    as_of: date


class GrowthRequest(BaseModel):
    investment: InvestmentRecord
    end_date: date | None = None


class PitInvestmentRequest(BaseModel):
    investment: InvestmentRecord
    as_of: date | None = None


class VisualizationRequest(BaseModel):
    loans: list[LoanRecord] = Field(default_factory=list)
    investments: list[InvestmentRecord] = Field(default_factory=list)
    start_date: date | None = None
    end_date: date | None = None
    cadence: SampleCadence | None = None


class PortfolioPayload(BaseModel):
    loans: list[LoanRecord] = Field(default_factory=list)
    investments: list[InvestmentRecord] = Field(default_factory=list)


class MergeRequest(BaseModel):
    existing: PortfolioPayload
    imported: PortfolioPayload


# ---- Response schemas ----

class PaymentResponse(BaseModel):
    monthly_payment: Amount
    computable: bool


class ScheduleResponse(BaseModel):
    monthly_payment: Amount | None
    schedule: list[AmortizationEntryRecord]


class PitLoanResponse(BaseModel):
    paid_terms: int
    remaining_terms: int
    remaining_principal: Amount
    paid_principal: Amount
    paid_interest: Amount


class GrowthResponse(BaseModel):
    growth: list[GrowthEntryRecord]


class PitInvestmentResponse(BaseModel):
    current_periods: int
    total_contributions: Amount
    total_interest_earned: Amount
    current_value: Amount
    projected_annual_return: Amount


class VisualizationPointResponse(BaseModel):
    date: date
    loan_values: dict[str, Amount]
    investment_values: dict[str, Amount]
    total_loan_value: Amount
    total_investment_value: Amount
    overall_position: Amount


class MergeCounts(BaseModel):
    added: int
    updated: int


class MergeResponse(BaseModel):
    loans: list[LoanRecord]
    investments: list[InvestmentRecord]
    loans_result: MergeCounts
    investments_result: MergeCounts
