"""Internal rate of return by bracketed bisection.

A series with several sign changes can have several roots. The root reported
is the first one bracketed when scanning rates from 0% upward to 1000%, then
from 0% downward towards -99%. Rates are in percent, like discount_rate.
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import logging

from cam.financial.discount import npv

logger = logging.getLogger(__name__)

MIN_RATE = -99.0
MAX_RATE = 1000.0
MAX_ITERATIONS = 100
# bisection stops once the bracket is this narrow, in percentage points
RATE_TOLERANCE = 1e-9


def _scan_grid() -> Tuple[List[float], List[float]]:
    upward = [float(r) for r in range(0, 101)] + [float(r) for r in range(110, int(MAX_RATE) + 1, 10)]
    downward = [-float(r) for r in range(0, int(-MIN_RATE) + 1)]
    return upward, downward


UPWARD_GRID, DOWNWARD_GRID = _scan_grid()


def has_sign_change(cash_flows: Sequence[float]) -> bool:
    return any(cf > 0 for cf in cash_flows) and any(cf < 0 for cf in cash_flows)


def _find_bracket(cash_flows: Sequence[float], grid: Sequence[float]) -> Optional[Tuple[float, float, float, float]]:
    prev_rate = grid[0]
    prev_val = npv(cash_flows, prev_rate)
    if prev_val == 0.0:
        return prev_rate, prev_rate, prev_val, prev_val
    for rate in grid[1:]:
        val = npv(cash_flows, rate)
        if val == 0.0 or (val > 0) != (prev_val > 0):
            return prev_rate, rate, prev_val, val
        prev_rate, prev_val = rate, val
    return None


def _bisect(cash_flows: Sequence[float], lo: float, hi: float, f_lo: float,
            max_iterations: int, tolerance: float) -> float:
    mid = (lo + hi) / 2.0
    for _ in range(max_iterations):
        mid = (lo + hi) / 2.0
        f_mid = npv(cash_flows, mid)
        if f_mid == 0.0 or hi - lo < tolerance or mid in (lo, hi):
            return mid
        if (f_mid > 0) == (f_lo > 0):
            lo, f_lo = mid, f_mid
        else:
            hi = mid
    return mid


def irr(cash_flows: Sequence[float], max_iterations: int = MAX_ITERATIONS,
        tolerance: float = RATE_TOLERANCE) -> Optional[float]:
    """Rate r (percent) with npv(cash_flows, r) == 0, or None when undefined.

    None is returned for series without a sign change and for series whose
    NPV never changes sign inside [MIN_RATE, MAX_RATE].
    """
    flows = [float(cf) for cf in cash_flows]
    if len(flows) < 2 or not has_sign_change(flows):
        return None

    for grid in (UPWARD_GRID, DOWNWARD_GRID):
        bracket = _find_bracket(flows, grid)
        if bracket is None:
            continue
        lo, hi, f_lo, f_hi = bracket
        if f_lo == 0.0:
            return lo
        if f_hi == 0.0:
            return hi
        return _bisect(flows, lo, hi, f_lo, max_iterations, tolerance)

    logger.debug("no IRR bracket in [%s, %s] for %d cash flows", MIN_RATE, MAX_RATE, len(flows))
    return None
