"""Canonical test fixtures shared across engine, data and API tests.

Loans: $10K at 6% over 12 terms with a fixed $860.66 payment, and a
$100K mortgage at 3.5% over 30 years with no payment set.
Investment: $10K at 4.23% compounding annually from 2025-01-01.
"""

import pytest
from datetime import date
from decimal import Decimal

from pathwise.models.investment import CompoundingFrequency, Investment, StepUpType
from pathwise.models.loan import Loan


@pytest.fixture
def car_loan() -> Loan:
    """12 monthly terms, Jan 2025 through Dec 2025."""
    return Loan(
        id="loan-car",
        provider="Credit Union",
        name="Car Loan",
        interest_rate=Decimal("6"),
        principal=Decimal("10000"),
        start_date=date(2025, 1, 1),
        end_date=date(2025, 12, 1),
        monthly_payment=Decimal("860.66"),
    )


@pytest.fixture
def mortgage() -> Loan:
    """360 monthly terms; payment left for the engine to derive."""
    return Loan(
        id="loan-home",
        provider="Big Bank",
        name="Mortgage",
        interest_rate=Decimal("3.5"),
        principal=Decimal("100000"),
        start_date=date(2024, 1, 1),
        end_date=date(2053, 12, 1),
    )


@pytest.fixture
def index_fund() -> Investment:
    return Investment(
        id="inv-index",
        provider="Brokerage",
        name="Index Fund",
        start_date=date(2025, 1, 1),
        starting_balance=Decimal("10000"),
        average_return_rate=Decimal("4.23"),
        compounding_period=CompoundingFrequency.ANNUALLY,
    )


@pytest.fixture
def savings_plan() -> Investment:
    """No starting balance, no return, $100/month stepping up $10 each year."""
    return Investment(
        id="inv-plan",
        provider="Brokerage",
        name="Savings Plan",
        start_date=date(2025, 1, 1),
        starting_balance=Decimal("0"),
        average_return_rate=Decimal("0"),
        compounding_period=CompoundingFrequency.MONTHLY,
        recurring_contribution=Decimal("100"),
        contribution_frequency=CompoundingFrequency.MONTHLY,
        contribution_step_up_amount=Decimal("10"),
        contribution_step_up_type=StepUpType.FLAT,
    )


@pytest.fixture
def tmp_db(tmp_path):
    return str(tmp_path / "test_cache.db")
