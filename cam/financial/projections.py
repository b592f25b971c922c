from __future__ import annotations
from typing import Iterable, List

from cam.financial.assumptions import (
    CASH_CONVERSION_RAMP,
    GROWTH_DECAY,
    REFERENCE_GROSS_MARGIN_PCT,
    FinancialAssumptions,
)


def project_revenues(a: FinancialAssumptions) -> List[float]:
    """Annual revenue for years 1..N.

    Year 1 = monthly_price * year1_customers * 12
    Year n = year(n-1) * (1 + growth * GROWTH_DECAY[n-2])
    """
    growth = a.revenue_growth_pct / 100.0
    revenues = [float(a.monthly_price) * float(a.year1_customers) * 12.0]
    for decay in GROWTH_DECAY[: a.projection_years - 1]:
        revenues.append(revenues[-1] * (1.0 + growth * decay))
    return revenues


def cash_conversion(a: FinancialAssumptions) -> List[float]:
    """Ramp factors scaled by the gross margin relative to the benchmark."""
    scale = a.gross_margin_pct / REFERENCE_GROSS_MARGIN_PCT
    return [ramp * scale for ramp in CASH_CONVERSION_RAMP[: a.projection_years]]


def project_cash_flows(revenues: Iterable[float], a: FinancialAssumptions) -> List[float]:
    """Undiscounted net cash flows; index 0 is the investment outlay."""
    flows = [-float(a.investment_amount)]
    for rev, conv in zip(revenues, cash_conversion(a)):
        flows.append(rev * conv)
    return flows


def cumulative_cash_flows(cash_flows: Iterable[float]) -> List[float]:
    out: List[float] = []
    total = 0.0
    for cf in cash_flows:
        total += cf
        out.append(total)
    return out
