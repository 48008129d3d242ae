from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AmortizationScheduleEntry:
    term: int  # 1-indexed month
    principal_payment: Decimal
    interest_payment: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class Loan:
    id: str
    provider: str
    name: str
    interest_rate: Decimal  # Annual percent, 5.0 = 5%
    principal: Decimal
    start_date: date
    end_date: date
    current_amount: Decimal = Decimal("0")

    # Derived
    monthly_payment: Decimal | None = None  # None = not yet computed
    amortization_schedule: list[AmortizationScheduleEntry] = field(default_factory=list)


@dataclass(frozen=True)
class PitLoan:
    """Point-in-time snapshot of a loan."""
    paid_terms: int = 0
    remaining_terms: int = 0
    remaining_principal: Decimal = Decimal("0")
    paid_principal: Decimal = Decimal("0")
    paid_interest: Decimal = Decimal("0")


@dataclass(frozen=True)
class PaymentQuote:
    """Monthly payment plus whether it could be computed at all.

    A quote for a zero principal, rate or term carries amount 0 with
    computable=False, so callers can tell it apart from a real zero.
    """
    amount: Decimal
    computable: bool = True
