"""Investment growth projection: compounding with recurring contributions.

Pure functions. No I/O.

Contributions land before interest is applied for the period. A period cut
short by the end date earns interest pro-rated by actual days. Interest and
total value are rounded to cents per entry while the running balance keeps
full precision.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from pathwise.engine.periods import (
    investment_year,
    next_compounding_date,
    periods_elapsed,
    periods_per_year,
)
from pathwise.models.investment import (
    CompoundingFrequency,
    Investment,
    InvestmentGrowthEntry,
    PitInvestment,
    StepUpType,
)

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


def _cents(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def contribution_for_year(
    base: Decimal,
    year: int,
    step_up_amount: Decimal | None = None,
    step_up_type: StepUpType | None = None,
) -> Decimal:
    """Contribution amount for an investment year with step-up applied.

    Year 1 pays the base amount; each later year adds one step-up, either
    a flat amount or a compounding percentage.
    """
    if not step_up_amount or step_up_amount <= 0 or step_up_type is None or year <= 1:
        return base

    steps = year - 1
    if step_up_type == StepUpType.FLAT:
        return base + step_up_amount * steps
    return base * (1 + step_up_amount / 100) ** steps


def contributions_in_period(
    start: date, end: date, frequency: CompoundingFrequency
) -> int:
    """Number of contribution dates in [start, end)."""
    count = 0
    current = start
    while current < end:
        count += 1
        current = next_compounding_date(current, frequency)
    return count


def contributions_with_step_up(
    period_start: date,
    period_end: date,
    investment_start: date,
    base: Decimal,
    frequency: CompoundingFrequency,
    step_up_amount: Decimal | None = None,
    step_up_type: StepUpType | None = None,
) -> Decimal:
    """Total contributed in [period_start, period_end), each tick priced by its year."""
    total = ZERO
    current = period_start
    while current < period_end:
        year = investment_year(current, investment_start)
        total += contribution_for_year(base, year, step_up_amount, step_up_type)
        current = next_compounding_date(current, frequency)
    return total


def generate_investment_growth(
    investment: Investment, end_date: date | None = None
) -> list[InvestmentGrowthEntry]:
    """Period-by-period growth from the start date to end_date (default today).

    Returns [] when end_date is on or before the start date.
    """
    end = end_date or date.today()
    if end <= investment.start_date:
        return []

    period_rate = investment.average_return_rate / 100 / periods_per_year(
        investment.compounding_period
    )

    value = investment.starting_balance
    current = investment.start_date
    period = 0

    growth: list[InvestmentGrowthEntry] = [InvestmentGrowthEntry(
        period=0,
        contribution_amount=ZERO,
        interest_earned=ZERO,
        total_value=_cents(value),
    )]

    while current < end:
        next_date = next_compounding_date(current, investment.compounding_period)
        period_end = min(next_date, end)
        period += 1

        contribution = ZERO
        if investment.has_contributions:
            contribution = contributions_with_step_up(
                current,
                period_end,
                investment.start_date,
                investment.recurring_contribution,
                investment.contribution_frequency,
                investment.contribution_step_up_amount,
                investment.contribution_step_up_type,
            )
            value += contribution

        if next_date <= end:
            rate = period_rate
        else:
            total_days = (next_date - current).days
            actual_days = (end - current).days
            rate = period_rate * actual_days / total_days

        interest = value * rate
        value += interest

        growth.append(InvestmentGrowthEntry(
            period=period,
            contribution_amount=contribution,
            interest_earned=_cents(interest),
            total_value=_cents(value),
        ))

        current = next_date

    return growth


def pit_investment(investment: Investment, as_of: date | None = None) -> PitInvestment:
    """Point-in-time view of an investment as of a date (default today)."""
    end = as_of or date.today()
    current_periods = periods_elapsed(investment.start_date, end, investment.compounding_period)
    growth = generate_investment_growth(investment, end)

    total_contributions = investment.starting_balance + sum(
        (e.contribution_amount for e in growth), ZERO
    )
    current_value = growth[-1].total_value if growth else investment.starting_balance
    total_interest = current_value - total_contributions

    annual_return = ZERO
    if total_contributions > 0:
        annual_return = total_interest / total_contributions * 100

    return PitInvestment(
        current_periods=current_periods,
        total_contributions=_cents(total_contributions),
        total_interest_earned=_cents(total_interest),
        current_value=_cents(current_value),
        projected_annual_return=_cents(annual_return),
    )


def investment_value(
    principal: Decimal,
    annual_rate_percent: Decimal,
    frequency: CompoundingFrequency,
    start: date,
    end: date,
    recurring_contribution: Decimal | None = None,
    contribution_frequency: CompoundingFrequency | None = None,
) -> Decimal:
    """Value at `end` of an ad-hoc balance, without building an entity first."""
    investment = Investment(
        id="",
        provider="",
        name="",
        start_date=start,
        starting_balance=principal,
        average_return_rate=annual_rate_percent,
        compounding_period=frequency,
        recurring_contribution=recurring_contribution,
        contribution_frequency=contribution_frequency,
    )
    growth = generate_investment_growth(investment, end)
    return growth[-1].total_value if growth else _cents(principal)


def with_projected_growth(investment: Investment, end_date: date | None = None) -> Investment:
    """Regenerate the cached growth projection after an edit."""
    return replace(investment, projected_growth=generate_investment_growth(investment, end_date))
