from datetime import date

from pathwise.engine.periods import (
    add_months,
    anniversary,
    completed_periods,
    investment_year,
    loan_terms,
    months_between,
    next_compounding_date,
    periods_elapsed,
    periods_per_year,
    terms_between,
)
from pathwise.models.investment import CompoundingFrequency


class TestPeriodsPerYear:
    def test_frequencies(self):
        assert periods_per_year(CompoundingFrequency.MONTHLY) == 12
        assert periods_per_year(CompoundingFrequency.QUARTERLY) == 4
        assert periods_per_year(CompoundingFrequency.ANNUALLY) == 1


class TestNextCompoundingDate:
    def test_month_end_rolls_over(self):
        """Jan 31 + 1 month overflows February into March."""
        nxt = next_compounding_date(date(2025, 1, 31), CompoundingFrequency.MONTHLY)
        assert nxt == date(2025, 3, 3)

    def test_leap_day_annual(self):
        nxt = next_compounding_date(date(2024, 2, 29), CompoundingFrequency.ANNUALLY)
        assert nxt == date(2025, 3, 1)

    def test_quarter_crosses_year(self):
        nxt = next_compounding_date(date(2025, 11, 15), CompoundingFrequency.QUARTERLY)
        assert nxt == date(2026, 2, 15)

    def test_add_months_plain(self):
        assert add_months(date(2025, 1, 15), 1) == date(2025, 2, 15)
        assert add_months(date(2025, 12, 15), 1) == date(2026, 1, 15)


class TestTermsBetween:
    def test_inclusive_of_both_months(self):
        assert terms_between(date(2025, 1, 1), date(2026, 1, 1)) == 13

    def test_same_month_is_one_term(self):
        assert terms_between(date(2025, 1, 1), date(2025, 1, 20)) == 1

    def test_never_below_one(self):
        assert terms_between(date(2025, 6, 1), date(2025, 1, 1)) == 1

    def test_months_between_ignores_day(self):
        assert months_between(date(2025, 1, 31), date(2025, 2, 1)) == 1


class TestLoanTerms:
    def test_full_term_count(self, car_loan):
        assert loan_terms(car_loan) == 12

    def test_before_start(self, car_loan):
        assert loan_terms(car_loan, date(2024, 6, 1)) == 1

    def test_mid_loan(self, car_loan):
        assert loan_terms(car_loan, date(2025, 7, 1)) == 7

    def test_after_end_capped(self, car_loan):
        assert loan_terms(car_loan, date(2030, 1, 1)) == 12


class TestPeriodsElapsed:
    def test_before_start_is_zero(self):
        assert periods_elapsed(date(2025, 1, 1), date(2024, 12, 31), CompoundingFrequency.MONTHLY) == 0

    def test_start_day_is_first_period(self):
        assert periods_elapsed(date(2025, 1, 1), date(2025, 1, 1), CompoundingFrequency.ANNUALLY) == 1

    def test_monthly_day_of_month_boundary(self):
        start = date(2025, 1, 15)
        assert periods_elapsed(start, date(2025, 3, 14), CompoundingFrequency.MONTHLY) == 2
        assert periods_elapsed(start, date(2025, 3, 15), CompoundingFrequency.MONTHLY) == 3

    def test_quarterly_boundary(self):
        start = date(2025, 1, 15)
        assert periods_elapsed(start, date(2025, 4, 14), CompoundingFrequency.QUARTERLY) == 1
        assert periods_elapsed(start, date(2025, 4, 15), CompoundingFrequency.QUARTERLY) == 2

    def test_annual_anniversaries(self):
        start = date(2025, 1, 1)
        assert periods_elapsed(start, date(2026, 1, 1), CompoundingFrequency.ANNUALLY) == 2
        assert periods_elapsed(start, date(2030, 1, 1), CompoundingFrequency.ANNUALLY) == 6
        assert periods_elapsed(start, date(2055, 1, 1), CompoundingFrequency.ANNUALLY) == 31

    def test_leap_day_anniversary_in_common_year(self):
        start = date(2024, 2, 29)
        assert periods_elapsed(start, date(2025, 2, 27), CompoundingFrequency.ANNUALLY) == 1
        assert periods_elapsed(start, date(2025, 2, 28), CompoundingFrequency.ANNUALLY) == 2


class TestCompletedPeriods:
    def test_nothing_ended_yet(self):
        assert completed_periods(date(2025, 2, 15), date(2025, 4, 20), CompoundingFrequency.QUARTERLY) == 0

    def test_counts_from_start_not_calendar_quarters(self):
        start = date(2025, 2, 15)
        assert completed_periods(start, date(2025, 5, 14), CompoundingFrequency.QUARTERLY) == 0
        assert completed_periods(start, date(2025, 5, 15), CompoundingFrequency.QUARTERLY) == 1
        assert completed_periods(start, date(2026, 2, 15), CompoundingFrequency.QUARTERLY) == 4

    def test_follows_month_end_rollover(self):
        # Jan 31 -> Mar 3 -> Apr 3
        start = date(2025, 1, 31)
        assert completed_periods(start, date(2025, 3, 2), CompoundingFrequency.MONTHLY) == 0
        assert completed_periods(start, date(2025, 4, 3), CompoundingFrequency.MONTHLY) == 2


class TestInvestmentYear:
    def test_first_year(self):
        start = date(2025, 3, 15)
        assert investment_year(date(2025, 3, 15), start) == 1
        assert investment_year(date(2026, 3, 14), start) == 1

    def test_anniversary_starts_next_year(self):
        assert investment_year(date(2026, 3, 15), date(2025, 3, 15)) == 2

    def test_before_start_is_year_one(self):
        assert investment_year(date(2024, 1, 1), date(2025, 3, 15)) == 1

    def test_anniversary_leap_fallback(self):
        assert anniversary(date(2024, 2, 29), 2025) == date(2025, 2, 28)
        assert anniversary(date(2024, 2, 29), 2028) == date(2028, 2, 29)
