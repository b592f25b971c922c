from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from cam.financial.assumptions import FinancialAssumptions, validate_assumptions
from cam.financial.discount import npv
from cam.financial.irr import irr
from cam.financial.payback import payback_months
from cam.financial.projections import (
    cash_conversion,
    cumulative_cash_flows,
    project_cash_flows,
    project_revenues,
)


@dataclass(frozen=True)
class FinancialResult:
    cash_flows: Tuple[float, ...]        # period 0..5, [0] = -investment_amount
    annual_revenues: Tuple[float, ...]   # years 1..5
    cumulative_cash_flows: Tuple[float, ...]
    monthly_revenue: float
    annual_revenue: float
    total_revenue_5yr: float
    npv: float
    irr: Optional[float]                 # percent; None when undefined
    payback_months: Optional[int]        # None when never paid back
    contribution_margin: float           # steady-state CM% (final-year conversion)


def npv_for(a: FinancialAssumptions) -> float:
    """NPV of the projected cash flows; the replay used by sensitivity analysis."""
    validate_assumptions(a)
    return npv(project_cash_flows(project_revenues(a), a), a.discount_rate)


def evaluate_financials(a: FinancialAssumptions) -> FinancialResult:
    """Project revenue and cash flows, then discount them.

    Raises DomainError for assumptions outside the model's domain. IRR and
    payback are None when the cash-flow shape leaves them undefined.
    """
    validate_assumptions(a)
    revenues = project_revenues(a)
    flows = project_cash_flows(revenues, a)
    return FinancialResult(
        cash_flows=tuple(flows),
        annual_revenues=tuple(revenues),
        cumulative_cash_flows=tuple(cumulative_cash_flows(flows)),
        monthly_revenue=float(a.monthly_price) * float(a.year1_customers),
        annual_revenue=revenues[0],
        total_revenue_5yr=sum(revenues),
        npv=npv(flows, a.discount_rate),
        irr=irr(flows),
        payback_months=payback_months(flows),
        contribution_margin=cash_conversion(a)[-1] * 100.0,
    )
