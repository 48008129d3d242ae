"""Multi-asset time series for charting.

Samples loan balances and investment values at a uniform cadence over a
date range. Cached schedules on the entities are reused when they cover the
sample date; otherwise values are derived on the spot.

Pure functions. No I/O.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from dateutil.relativedelta import relativedelta

from pathwise.engine.growth import generate_investment_growth
from pathwise.engine.periods import completed_periods, months_between
from pathwise.models.investment import Investment
from pathwise.models.loan import Loan
from pathwise.models.visualization import SampleCadence, VisualizationDataPoint

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")

DEFAULT_HORIZON_YEARS = 30

CADENCE_STEPS: dict[SampleCadence, relativedelta] = {
    SampleCadence.MONTHLY: relativedelta(months=1),
    SampleCadence.YEARLY: relativedelta(years=1),
}


def max_visualization_date(
    loans: list[Loan],
    investments: list[Investment],
    today: date | None = None,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> date:
    """Right edge of the chart.

    Investments have no end date, so their presence pushes the edge out to
    the projection horizon; loans contribute their latest end date.
    """
    today = today or date.today()
    latest_loan_end = max((loan.end_date for loan in loans), default=today)
    if not investments:
        return latest_loan_end
    return max(latest_loan_end, today + relativedelta(years=horizon_years))


def loan_value_at(loan: Loan, when: date) -> Decimal:
    """Remaining balance of a loan on a date (0 outside its term)."""
    if when < loan.start_date or when >= loan.end_date:
        return ZERO

    elapsed = months_between(loan.start_date, when)

    if loan.amortization_schedule:
        index = min(elapsed, len(loan.amortization_schedule) - 1)
        return loan.amortization_schedule[index].remaining_balance

    # No schedule yet: straight line from principal to zero
    total = months_between(loan.start_date, loan.end_date)
    if total <= 0:
        return loan.principal
    remaining = max(ZERO, min(Decimal("1"), 1 - Decimal(elapsed) / total))
    return (loan.principal * remaining).quantize(TWO_PLACES, ROUND_HALF_UP)


def investment_value_at(investment: Investment, when: date) -> Decimal:
    """Value of an investment on a date (0 before it starts)."""
    if when < investment.start_date:
        return ZERO

    growth = investment.projected_growth
    if growth:
        index = completed_periods(investment.start_date, when, investment.compounding_period)
        # The last cached entry may be a partial period, so only earlier ones are trusted
        if index < len(growth) - 1:
            return growth[index].total_value

    fresh = generate_investment_growth(investment, when)
    if fresh:
        return fresh[-1].total_value
    return investment.starting_balance.quantize(TWO_PLACES, ROUND_HALF_UP)


def sample_dates(start: date, end: date, cadence: SampleCadence) -> list[date]:
    """Sample dates from start to end inclusive, one per cadence step."""
    step = CADENCE_STEPS[cadence]
    dates: list[date] = []
    i = 0
    current = start
    while current <= end:
        dates.append(current)
        i += 1
        current = start + step * i
    return dates


def generate_visualization_data(
    loans: list[Loan],
    investments: list[Investment],
    start_date: date | None = None,
    end_date: date | None = None,
    cadence: SampleCadence = SampleCadence.YEARLY,
    today: date | None = None,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> list[VisualizationDataPoint]:
    """Sampled per-asset and aggregate values between two dates.

    Args:
        start_date: First sample (default today)
        end_date: Last possible sample (default max_visualization_date)
        cadence: Sampling step, yearly unless asked otherwise
    """
    today = today or date.today()
    start = start_date or today
    end = end_date or max_visualization_date(loans, investments, today, horizon_years)

    points: list[VisualizationDataPoint] = []
    for when in sample_dates(start, end, cadence):
        loan_values = {loan.id: loan_value_at(loan, when) for loan in loans}
        investment_values = {inv.id: investment_value_at(inv, when) for inv in investments}

        total_loans = sum(loan_values.values(), ZERO)
        total_investments = sum(investment_values.values(), ZERO)

        points.append(VisualizationDataPoint(
            date=when,
            loan_values=loan_values,
            investment_values=investment_values,
            total_loan_value=total_loans,
            total_investment_value=total_investments,
            overall_position=total_investments - total_loans,
        ))

    return points
