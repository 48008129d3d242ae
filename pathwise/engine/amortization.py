"""Loan amortization schedule computation.

Pure functions: Decimal in, dataclass out. No I/O.
Degenerate inputs (zero principal/rate/term, payment not yet computed)
yield zero or empty results rather than errors.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from pathwise.engine.periods import loan_terms
from pathwise.models.loan import AmortizationScheduleEntry, Loan, PaymentQuote, PitLoan

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


def _monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    return annual_rate_percent / 100 / 12


def payment_quote(
    principal: Decimal, annual_rate_percent: Decimal, term_count: int
) -> PaymentQuote:
    """Fixed monthly payment, tagged with whether the inputs allowed one."""
    if principal <= 0 or annual_rate_percent <= 0 or term_count <= 0:
        return PaymentQuote(amount=ZERO, computable=False)

    r = _monthly_rate(annual_rate_percent)

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** term_count
    payment = principal * (r * factor) / (factor - 1)
    return PaymentQuote(amount=payment.quantize(TWO_PLACES, ROUND_HALF_UP))


def monthly_payment(principal: Decimal, annual_rate_percent: Decimal, term_count: int) -> Decimal:
    """Calculate fixed monthly loan payment (0 for degenerate inputs)."""
    return payment_quote(principal, annual_rate_percent, term_count).amount


def generate_amortization_schedule(
    loan: Loan, term_limit: int | None = None
) -> list[AmortizationScheduleEntry]:
    """Generate full or partial amortization schedule.

    Args:
        loan: Loan with monthly_payment set; an unset payment yields []
        term_limit: If provided, only generate this many terms
    """
    if loan.monthly_payment is None:
        return []

    r = _monthly_rate(loan.interest_rate)
    total_terms = loan_terms(loan)
    n_terms = total_terms if term_limit is None else min(term_limit, total_terms)

    schedule: list[AmortizationScheduleEntry] = []
    balance = loan.principal

    for term in range(1, n_terms + 1):
        interest = (balance * r).quantize(TWO_PLACES, ROUND_HALF_UP)

        # Final term absorbs rounding drift and retires the loan
        if term == total_terms:
            principal_paid = balance
        else:
            principal_paid = (loan.monthly_payment - interest).quantize(TWO_PLACES, ROUND_HALF_UP)

        balance = max(balance - principal_paid, ZERO)

        schedule.append(AmortizationScheduleEntry(
            term=term,
            principal_payment=principal_paid,
            interest_payment=interest,
            remaining_balance=balance,
        ))

    return schedule


def pit_loan(loan: Loan, as_of: date) -> PitLoan:
    """Point-in-time view of a loan as of a date."""
    total_terms = loan_terms(loan)
    paid_terms = loan_terms(loan, as_of)

    schedule = loan.amortization_schedule
    if len(schedule) < paid_terms:
        schedule = generate_amortization_schedule(loan, paid_terms)

    if not schedule:
        # Payment not computed yet: nothing paid, everything outstanding
        return PitLoan(
            paid_terms=0,
            remaining_terms=total_terms,
            remaining_principal=loan.principal,
        )

    paid = schedule[:paid_terms]
    last = paid[-1]
    return PitLoan(
        paid_terms=last.term,
        remaining_terms=total_terms - last.term,
        remaining_principal=last.remaining_balance,
        paid_principal=loan.principal - last.remaining_balance,
        paid_interest=sum((e.interest_payment for e in paid), ZERO),
    )


def with_derived_fields(loan: Loan) -> Loan:
    """Recompute monthly payment and full schedule after an edit.

    A loan whose payment cannot be computed keeps monthly_payment=None and
    an empty schedule.
    """
    quote = payment_quote(loan.principal, loan.interest_rate, loan_terms(loan))
    pmt = quote.amount if quote.computable else None
    updated = replace(loan, monthly_payment=pmt, amortization_schedule=[])
    return replace(updated, amortization_schedule=generate_amortization_schedule(updated))


def yearly_loan_summary(schedule: list[AmortizationScheduleEntry]) -> list[dict[str, Decimal]]:
    """Aggregate an amortization schedule by loan year.

    Returns list of dicts with keys: year, principal, interest, ending_balance
    """
    yearly: list[dict[str, Decimal]] = []
    year_principal = ZERO
    year_interest = ZERO

    for entry in schedule:
        year_principal += entry.principal_payment
        year_interest += entry.interest_payment

        if entry.term % 12 == 0 or entry.term == len(schedule):
            yearly.append({
                "year": Decimal((entry.term - 1) // 12 + 1),
                "principal": year_principal,
                "interest": year_interest,
                "ending_balance": entry.remaining_balance,
            })
            year_principal = ZERO
            year_interest = ZERO

    return yearly
