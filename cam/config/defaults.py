from __future__ import annotations
from dataclasses import fields, replace
from typing import Any, Mapping

from cam.errors import DomainError
from cam.financial.assumptions import FinancialAssumptions

# Seed for interactive tools; callers override fields, never mutate it.
DEFAULT_ASSUMPTIONS = FinancialAssumptions(
    monthly_price=3500.0,
    year1_customers=15.0,
    revenue_growth_pct=85.0,
    gross_margin_pct=78.0,
    investment_amount=1_800_000.0,
    discount_rate=10.0,
)

ASSUMPTION_FIELDS = tuple(f.name for f in fields(FinancialAssumptions))


def assumptions_from_mapping(data: Mapping[str, Any],
                             base: FinancialAssumptions = DEFAULT_ASSUMPTIONS) -> FinancialAssumptions:
    """Overlay caller-supplied fields on `base`; missing or null fields keep the base value."""
    overrides = {}
    for name in ASSUMPTION_FIELDS:
        val = data.get(name)
        if val is None:
            continue
        if isinstance(val, bool):
            raise DomainError(f"{name} must be a number, got {val!r}")
        try:
            overrides[name] = int(val) if name == "projection_years" else float(val)
        except (TypeError, ValueError):
            raise DomainError(f"{name} must be a number, got {val!r}") from None
    return replace(base, **overrides)
