"""Period calendar: compounding/payment periods from calendar dates.

Pure functions: date in, int/date out. No I/O.
All stepping is calendar based (months, quarters, years), never days/365.
"""

import calendar
from datetime import date, timedelta

from pathwise.models.investment import CompoundingFrequency
from pathwise.models.loan import Loan

PERIODS_PER_YEAR: dict[CompoundingFrequency, int] = {
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.QUARTERLY: 4,
    CompoundingFrequency.ANNUALLY: 1,
}

MONTHS_PER_PERIOD: dict[CompoundingFrequency, int] = {
    CompoundingFrequency.MONTHLY: 1,
    CompoundingFrequency.QUARTERLY: 3,
    CompoundingFrequency.ANNUALLY: 12,
}


def periods_per_year(frequency: CompoundingFrequency) -> int:
    return PERIODS_PER_YEAR.get(frequency, 1)


def _rollover_date(year: int, month: int, day: int) -> date:
    """Build a date, letting an out-of-range day spill into the next month.

    (2025, 2, 31) -> 2025-03-03.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)


def add_months(d: date, months: int) -> date:
    """Advance by whole months keeping the day of month, with natural rollover."""
    return _rollover_date(d.year, d.month + months, d.day)


def next_compounding_date(d: date, frequency: CompoundingFrequency) -> date:
    return add_months(d, MONTHS_PER_PERIOD[frequency])


def months_between(start: date, end: date) -> int:
    """Calendar month difference, ignoring the day of month."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def terms_between(start: date, end: date) -> int:
    """Whole months from start to end inclusive; the start month is term 1."""
    return max(1, months_between(start, end) + 1)


def loan_terms(loan: Loan, as_of: date | None = None) -> int:
    """Term count of a loan, or the term reached as of a date.

    Before the start date the loan is on term 1; on or after the end date it
    has run its full term count.
    """
    if as_of is not None and as_of < loan.start_date:
        return 1
    if as_of is None or as_of >= loan.end_date:
        return terms_between(loan.start_date, loan.end_date)
    return terms_between(loan.start_date, as_of)


def anniversary(start: date, year: int) -> date:
    """The start date's month/day in the given year.

    Feb 29 falls back to Feb 28 in non-leap years.
    """
    day = start.day
    if start.month == 2 and day == 29 and not calendar.isleap(year):
        day = 28
    return date(year, start.month, day)


def periods_elapsed(start: date, as_of: date, frequency: CompoundingFrequency) -> int:
    """Periods from start up to and including the one containing as_of.

    A period counts once its month-mark (monthly), quarter-mark (quarterly)
    or anniversary (annually) is reached.
    """
    if as_of < start:
        return 0

    if frequency == CompoundingFrequency.MONTHLY:
        periods = months_between(start, as_of)
        if as_of.day >= start.day:
            periods += 1
    elif frequency == CompoundingFrequency.QUARTERLY:
        start_quarter = (start.month - 1) // 3
        end_quarter = (as_of.month - 1) // 3
        periods = (as_of.year - start.year) * 4 + (end_quarter - start_quarter)
        quarter_mark = _rollover_date(as_of.year, end_quarter * 3 + 1, start.day)
        if as_of >= quarter_mark:
            periods += 1
    else:
        periods = as_of.year - start.year
        if as_of >= anniversary(start, as_of.year):
            periods += 1

    return max(periods, 1)


def completed_periods(start: date, as_of: date, frequency: CompoundingFrequency) -> int:
    """Compounding periods that have fully ended on or before as_of.

    Walks the same next_compounding_date chain as the growth projection, so
    the count is the index of the last earned growth entry.
    """
    count = 0
    boundary = next_compounding_date(start, frequency)
    while boundary <= as_of:
        count += 1
        boundary = next_compounding_date(boundary, frequency)
    return count


def investment_year(current: date, start: date) -> int:
    """1-indexed year of an investment's lifetime.

    Year 1 runs from the start date to the day before the first anniversary.
    Dates before the start count as year 1.
    """
    if current < start:
        return 1

    years_elapsed = current.year - start.year
    if current >= anniversary(start, current.year):
        return years_elapsed + 1
    return years_elapsed
