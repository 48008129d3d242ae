"""Pydantic models for the portfolio wire format (PascalCase JSON keys)."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Annotated

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    model_validator,
)

from pathwise.models.investment import (
    CompoundingFrequency,
    Investment,
    InvestmentGrowthEntry,
    StepUpType,
)
from pathwise.models.loan import AmortizationScheduleEntry, Loan


def _json_amount(value: Decimal) -> float | str:
    """JSON number when a float holds the value exactly, else a decimal string.

    Both forms validate back to an equal Decimal on import.
    """
    as_float = float(value)
    if Decimal(repr(as_float)) == value:
        return as_float
    return str(value)


Amount = Annotated[Decimal, PlainSerializer(_json_amount, return_type=float | str, when_used="json")]


def _parse_date(value):
    """Accept YYYY-MM-DD or a full ISO-8601 timestamp (e.g. ...T00:00:00.000Z).

    Timestamps with an offset are rounded to the nearest UTC calendar day, so
    a local midnight written out in UTC (2024-12-31T22:00:00.000Z from a
    UTC+2 clock) still lands on the day it was meant for.
    """
    if isinstance(value, str) and "T" in value:
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return (value.astimezone(timezone.utc) + timedelta(hours=12)).date()
    return value


IsoDate = Annotated[date, BeforeValidator(_parse_date)]


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class AmortizationEntryRecord(_Record):
    term: int = Field(alias="Term")
    principal_payment: Amount = Field(alias="PrincipalPayment")
    interest_payment: Amount = Field(alias="InterestPayment")
    remaining_balance: Amount = Field(alias="RemainingBalance")


class LoanRecord(_Record):
    id: str = Field(alias="Id")
    provider: str = Field(alias="Provider")
    name: str = Field(alias="Name")
    interest_rate: Amount = Field(alias="InterestRate")
    principal: Amount = Field(alias="Principal")
    start_date: IsoDate = Field(alias="StartDate")
    end_date: IsoDate = Field(alias="EndDate")
    current_amount: Amount = Field(Decimal("0"), alias="CurrentAmount")
    monthly_payment: Amount | None = Field(None, alias="MonthlyPayment")
    amortization_schedule: list[AmortizationEntryRecord] = Field(
        default_factory=list, alias="AmortizationSchedule"
    )

    @model_validator(mode="after")
    def ensure_term(self) -> "LoanRecord":
        if self.end_date <= self.start_date:
            raise ValueError("EndDate must be after StartDate")
        return self

    def to_entity(self) -> Loan:
        return Loan(
            id=self.id,
            provider=self.provider,
            name=self.name,
            interest_rate=self.interest_rate,
            principal=self.principal,
            start_date=self.start_date,
            end_date=self.end_date,
            current_amount=self.current_amount,
            monthly_payment=self.monthly_payment,
            amortization_schedule=[
                AmortizationScheduleEntry(
                    term=e.term,
                    principal_payment=e.principal_payment,
                    interest_payment=e.interest_payment,
                    remaining_balance=e.remaining_balance,
                )
                for e in self.amortization_schedule
            ],
        )

    @classmethod
    def from_entity(cls, loan: Loan) -> "LoanRecord":
        return cls(
            id=loan.id,
            provider=loan.provider,
            name=loan.name,
            interest_rate=loan.interest_rate,
            principal=loan.principal,
            start_date=loan.start_date,
            end_date=loan.end_date,
            current_amount=loan.current_amount,
            monthly_payment=loan.monthly_payment,
            amortization_schedule=[
                AmortizationEntryRecord(
                    term=e.term,
                    principal_payment=e.principal_payment,
                    interest_payment=e.interest_payment,
                    remaining_balance=e.remaining_balance,
                )
                for e in loan.amortization_schedule
            ],
        )


class GrowthEntryRecord(_Record):
    period: int = Field(alias="Period")
    contribution_amount: Amount = Field(alias="ContributionAmount")
    interest_earned: Amount = Field(alias="InterestEarned")
    total_value: Amount = Field(alias="TotalValue")


class InvestmentRecord(_Record):
    id: str = Field(alias="Id")
    provider: str = Field(alias="Provider")
    name: str = Field(alias="Name")
    start_date: IsoDate = Field(alias="StartDate")
    starting_balance: Amount = Field(alias="StartingBalance", ge=0)
    average_return_rate: Amount = Field(alias="AverageReturnRate", ge=0)
    compounding_period: CompoundingFrequency = Field(alias="CompoundingPeriod")
    recurring_contribution: Amount | None = Field(None, alias="RecurringContribution")
    contribution_frequency: CompoundingFrequency | None = Field(None, alias="ContributionFrequency")
    contribution_step_up_amount: Amount | None = Field(None, alias="ContributionStepUpAmount")
    contribution_step_up_type: StepUpType | None = Field(None, alias="ContributionStepUpType")
    projected_growth: list[GrowthEntryRecord] = Field(default_factory=list, alias="ProjectedGrowth")

    @model_validator(mode="after")
    def default_contribution_frequency(self) -> "InvestmentRecord":
        if self.recurring_contribution and self.recurring_contribution > 0 and self.contribution_frequency is None:
            self.contribution_frequency = CompoundingFrequency.MONTHLY
        return self

    def to_entity(self) -> Investment:
        return Investment(
            id=self.id,
            provider=self.provider,
            name=self.name,
            start_date=self.start_date,
            starting_balance=self.starting_balance,
            average_return_rate=self.average_return_rate,
            compounding_period=self.compounding_period,
            recurring_contribution=self.recurring_contribution,
            contribution_frequency=self.contribution_frequency,
            contribution_step_up_amount=self.contribution_step_up_amount,
            contribution_step_up_type=self.contribution_step_up_type,
            projected_growth=[
                InvestmentGrowthEntry(
                    period=e.period,
                    contribution_amount=e.contribution_amount,
                    interest_earned=e.interest_earned,
                    total_value=e.total_value,
                )
                for e in self.projected_growth
            ],
        )

    @classmethod
    def from_entity(cls, investment: Investment) -> "InvestmentRecord":
        return cls(
            id=investment.id,
            provider=investment.provider,
            name=investment.name,
            start_date=investment.start_date,
            starting_balance=investment.starting_balance,
            average_return_rate=investment.average_return_rate,
            compounding_period=investment.compounding_period,
            recurring_contribution=investment.recurring_contribution,
            contribution_frequency=investment.contribution_frequency,
            contribution_step_up_amount=investment.contribution_step_up_amount,
            contribution_step_up_type=investment.contribution_step_up_type,
            projected_growth=[
                GrowthEntryRecord(
                    period=e.period,
                    contribution_amount=e.contribution_amount,
                    interest_earned=e.interest_earned,
                    total_value=e.total_value,
                )
                for e in investment.projected_growth
            ],
        )


class PortfolioExport(_Record):
    loans: list[LoanRecord] = Field(default_factory=list)
    investments: list[InvestmentRecord] = Field(default_factory=list)
    export_date: datetime = Field(alias="exportDate")
    version: str = "1.0"
