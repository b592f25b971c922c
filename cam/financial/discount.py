from __future__ import annotations
from typing import Iterable, List

from cam.errors import DomainError


def _base(rate: float) -> float:
    base = 1.0 + rate / 100.0
    if base <= 0.0:
        raise DomainError(f"discount rate must be greater than -100%, got {rate}")
    return base


def discount_factors(rate: float, periods: int) -> List[float]:
    """Return [1/(1+r)^0, ..., 1/(1+r)^periods] for a rate given in percent."""
    base = _base(rate)
    return [1.0 / (base ** t) for t in range(0, periods + 1)]


def npv(cash_flows: Iterable[float], rate: float) -> float:
    """Net present value; cash_flows[0] falls at time 0 and is not discounted."""
    base = _base(rate)
    total = 0.0
    for t, cf in enumerate(cash_flows):
        total += float(cf) / (base ** t)
    return total
