"""Loan amortization routes."""

from fastapi import APIRouter

from pathwise.api.schemas import (
    PaymentRequest,
    PaymentResponse,
    PitLoanRequest,
    PitLoanResponse,
    ScheduleRequest,
    ScheduleResponse,
)
from pathwise.engine.amortization import (
    generate_amortization_schedule,
    payment_quote,
    pit_loan,
    with_derived_fields,
)
from pathwise.models.records import AmortizationEntryRecord

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])


@router.post("/payment", response_model=PaymentResponse)
async def calculate_payment(req: PaymentRequest):
    """Fixed monthly payment for a principal, rate and term count."""
    quote = payment_quote(req.principal, req.interest_rate, req.term_count)
    return PaymentResponse(monthly_payment=quote.amount, computable=quote.computable)


@router.post("/schedule", response_model=ScheduleResponse)
async def amortization_schedule(req: ScheduleRequest):
    """Amortization schedule; the payment is derived when the loan lacks one."""
    loan = req.loan.to_entity()
    if loan.monthly_payment is None:
        loan = with_derived_fields(loan)
    schedule = generate_amortization_schedule(loan, req.term_limit)
    return ScheduleResponse(
        monthly_payment=loan.monthly_payment,
        schedule=[
            AmortizationEntryRecord(
                term=e.term,
                principal_payment=e.principal_payment,
                interest_payment=e.interest_payment,
                remaining_balance=e.remaining_balance,
            )
            for e in schedule
        ],
    )


@router.post("/pit", response_model=PitLoanResponse)
async def loan_snapshot(req: PitLoanRequest):
    """Paid and remaining figures of a loan as of a date."""
    loan = req.loan.to_entity()
    if loan.monthly_payment is None:
        loan = with_derived_fields(loan)
    pit = pit_loan(loan, req.as_of)
    return PitLoanResponse(
        paid_terms=pit.paid_terms,
        remaining_terms=pit.remaining_terms,
        remaining_principal=pit.remaining_principal,
        paid_principal=pit.paid_principal,
        paid_interest=pit.paid_interest,
    )
