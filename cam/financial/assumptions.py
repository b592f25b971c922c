from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import math

from cam.errors import DomainError

PROJECTION_YEARS = 5

# Growth multipliers for years 2..5; growth decelerates as the business matures.
GROWTH_DECAY: Tuple[float, ...] = (1.0, 0.7, 0.5, 0.35)

# Share of annual revenue realised as net cash in years 1..5 (operating leverage ramp).
CASH_CONVERSION_RAMP: Tuple[float, ...] = (0.15, 0.35, 0.52, 0.60, 0.65)

# Benchmark gross margin the ramp was calibrated against.
REFERENCE_GROSS_MARGIN_PCT = 78.0


@dataclass(frozen=True)
class FinancialAssumptions:
    monthly_price: float
    year1_customers: float
    revenue_growth_pct: float  # e.g. 85 for 85% year-over-year
    gross_margin_pct: float    # e.g. 78 for 78%
    investment_amount: float
    discount_rate: float       # e.g. 10 for 10%
    projection_years: int = PROJECTION_YEARS


# Assumptions perturbed by the sensitivity analysis, in declaration order.
SENSITIVITY_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("monthly_price", "Monthly Price"),
    ("year1_customers", "Year 1 Customers"),
    ("revenue_growth_pct", "Revenue Growth %"),
    ("gross_margin_pct", "Gross Margin %"),
    ("investment_amount", "Investment Amount"),
    ("discount_rate", "Discount Rate"),
)


def validate_assumptions(a: FinancialAssumptions) -> None:
    for name, _ in SENSITIVITY_FIELDS:
        value = getattr(a, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DomainError(f"{name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise DomainError(f"{name} must be finite, got {value!r}")
    if a.discount_rate <= -100:
        raise DomainError("discount rate must be greater than -100%")
    if a.investment_amount < 0:
        raise DomainError("investment amount must be non-negative")
    if a.projection_years != PROJECTION_YEARS:
        raise DomainError(f"projection horizon is fixed at {PROJECTION_YEARS} years")
