from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from cam.scoring.gate import CapitalGateResult
from cam.scoring.score import DimensionScore, final_weighted_score, ordered_scores

# Lower bounds of each band on the final weighted score; below C is band D.
BAND_A_MIN = 4.0
BAND_B_MIN = 3.5
BAND_C_MIN = 3.0

BAND_A = "band_a"
BAND_B = "band_b"
BAND_C = "band_c"
BAND_D = "band_d"

STRONG_GO = "strong_go"
GO = "go"
CONSIDER = "consider"
HOLD = "hold"

_PASSING: Dict[str, str] = {BAND_A: STRONG_GO, BAND_B: GO, BAND_C: CONSIDER, BAND_D: HOLD}
# A failed financial gate caps the outcome at "consider".
_GATE_FAILED: Dict[str, str] = {BAND_A: CONSIDER, BAND_B: CONSIDER, BAND_C: CONSIDER, BAND_D: HOLD}


@dataclass(frozen=True)
class DisplayConfig:
    label: str
    description: str


BAND_CONFIG: Dict[str, DisplayConfig] = {
    BAND_A: DisplayConfig("Band A", "Priority investment - fund immediately"),
    BAND_B: DisplayConfig("Band B", "Conditional investment - fund with conditions"),
    BAND_C: DisplayConfig("Band C", "Deferred - revisit next cycle"),
    BAND_D: DisplayConfig("Band D", "Not recommended - significant gaps"),
}

RECOMMENDATION_CONFIG: Dict[str, DisplayConfig] = {
    STRONG_GO: DisplayConfig("STRONG GO", "Exceeds all thresholds. Highest priority for capital allocation."),
    GO: DisplayConfig("GO", "Meets all thresholds. Approved for capital allocation."),
    CONSIDER: DisplayConfig("CONSIDER", "Mixed results. Requires additional review or conditions."),
    HOLD: DisplayConfig("HOLD", "Below thresholds. Not recommended for capital allocation at this time."),
}


@dataclass(frozen=True)
class CapitalScoreResult:
    weighted_score: float
    band: str
    recommendation: str
    financial_gate_pass: bool
    dimension_scores: Tuple[DimensionScore, ...] = ()


def resolve_band(weighted_score: float) -> str:
    if weighted_score >= BAND_A_MIN:
        return BAND_A
    if weighted_score >= BAND_B_MIN:
        return BAND_B
    if weighted_score >= BAND_C_MIN:
        return BAND_C
    return BAND_D


def resolve_recommendation(weighted_score: float, financial_gate_pass: bool) -> Tuple[str, str]:
    """(band, recommendation) for a complete evaluation's weighted score."""
    band = resolve_band(weighted_score)
    table = _PASSING if financial_gate_pass else _GATE_FAILED
    return band, table[band]


def evaluate_score(dimension_scores: Iterable[DimensionScore], gate: CapitalGateResult) -> CapitalScoreResult:
    """Final weighted score, band and recommendation.

    Raises IncompleteScore unless all five dimensions are scored; use
    partial_weighted_score for a running score.
    """
    dimension_scores = list(dimension_scores)
    weighted = final_weighted_score(dimension_scores)
    band, recommendation = resolve_recommendation(weighted, gate.financial_gate_pass)
    return CapitalScoreResult(
        weighted_score=weighted,
        band=band,
        recommendation=recommendation,
        financial_gate_pass=gate.financial_gate_pass,
        dimension_scores=tuple(ordered_scores(dimension_scores)),
    )
