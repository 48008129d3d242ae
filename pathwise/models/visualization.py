from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class SampleCadence(Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class VisualizationDataPoint:
    date: date
    loan_values: dict[str, Decimal] = field(default_factory=dict)  # Keyed by loan id
    investment_values: dict[str, Decimal] = field(default_factory=dict)  # Keyed by investment id
    total_loan_value: Decimal = Decimal("0")
    total_investment_value: Decimal = Decimal("0")
    overall_position: Decimal = Decimal("0")  # Investments - loans
