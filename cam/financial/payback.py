from __future__ import annotations
from typing import Optional, Sequence
import math

from cam.financial.projections import cumulative_cash_flows


def payback_months(cash_flows: Sequence[float]) -> Optional[int]:
    """Months until undiscounted cumulative cash flow turns non-negative.

    The crossover year is interpolated linearly; None if the horizon ends first.
    """
    if len(cash_flows) < 2:
        return None
    cumul = cumulative_cash_flows(cash_flows)
    for k in range(1, len(cumul)):
        if cumul[k] >= 0:
            outstanding = -cumul[k - 1]
            if outstanding <= 0:
                return 0
            years = (k - 1) + outstanding / cash_flows[k]
            # half-up, not banker's rounding
            return int(math.floor(years * 12 + 0.5))
    return None
