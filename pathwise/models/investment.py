from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class CompoundingFrequency(Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


class StepUpType(Enum):
    FLAT = "flat"
    PERCENTAGE = "percentage"


@dataclass(frozen=True)
class InvestmentGrowthEntry:
    period: int  # 0 = initial snapshot
    contribution_amount: Decimal  # This period only
    interest_earned: Decimal  # This period only
    total_value: Decimal  # Cumulative balance


@dataclass(frozen=True)
class Investment:
    id: str
    provider: str
    name: str
    start_date: date
    starting_balance: Decimal
    average_return_rate: Decimal  # Annual percent
    compounding_period: CompoundingFrequency = CompoundingFrequency.ANNUALLY

    # Recurring contributions
    recurring_contribution: Decimal | None = None
    contribution_frequency: CompoundingFrequency | None = None
    contribution_step_up_amount: Decimal | None = None
    contribution_step_up_type: StepUpType | None = None

    # Derived
    projected_growth: list[InvestmentGrowthEntry] = field(default_factory=list)

    @property
    def has_contributions(self) -> bool:
        return (
            self.recurring_contribution is not None
            and self.recurring_contribution > 0
            and self.contribution_frequency is not None
        )


@dataclass(frozen=True)
class PitInvestment:
    """Point-in-time snapshot of an investment."""
    current_periods: int = 0
    total_contributions: Decimal = Decimal("0")  # Includes starting balance
    total_interest_earned: Decimal = Decimal("0")
    current_value: Decimal = Decimal("0")
    projected_annual_return: Decimal = Decimal("0")  # Percent
