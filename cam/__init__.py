"""Capital investment evaluation engine.

Pure functions over immutable records:

- evaluate_financials: cash-flow projection, NPV, IRR, payback
- evaluate_sensitivity: tornado ranking of assumptions by NPV impact
- evaluate_gate: IRR / CM% financial gate by category
- evaluate_score: weighted strategic score, band and recommendation
"""

from cam.errors import DomainError, EngineError, IncompleteScore
from cam.financial.assumptions import FinancialAssumptions
from cam.financial.engine import FinancialResult, evaluate_financials
from cam.financial.sensitivity import SensitivityEntry, SensitivityResult, evaluate_sensitivity
from cam.scoring.gate import CapitalGateInputs, CapitalGateResult, evaluate_gate
from cam.scoring.recommendation import CapitalScoreResult, evaluate_score
from cam.scoring.score import (
    DimensionScore,
    ProvisionalScore,
    final_weighted_score,
    partial_weighted_score,
)

__all__ = [
    "DomainError",
    "EngineError",
    "IncompleteScore",
    "FinancialAssumptions",
    "FinancialResult",
    "evaluate_financials",
    "SensitivityEntry",
    "SensitivityResult",
    "evaluate_sensitivity",
    "CapitalGateInputs",
    "CapitalGateResult",
    "evaluate_gate",
    "CapitalScoreResult",
    "evaluate_score",
    "DimensionScore",
    "ProvisionalScore",
    "partial_weighted_score",
    "final_weighted_score",
]
