"""Weighted strategic score over the five rubric dimensions.

Two entry points:

- partial_weighted_score: running score for live feedback; works on any
  subset of dimensions and is flagged provisional
- final_weighted_score: requires every dimension and raises IncompleteScore
  otherwise; this is the only score a recommendation may be built from
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from cam.errors import DomainError, IncompleteScore
from cam.scoring.dimensions import DIMENSIONS, DIMENSION_WEIGHTS

MIN_SCORE = 1
MAX_SCORE = 5
WEIGHT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class DimensionScore:
    dimension_key: str
    weight: float
    score: int  # 1..5
    notes: str = ""

    @classmethod
    def of(cls, dimension_key: str, score: int, notes: str = "") -> "DimensionScore":
        """Build a score carrying the dimension's declared weight."""
        if dimension_key not in DIMENSION_WEIGHTS:
            raise DomainError(f"unknown dimension: {dimension_key!r}")
        return cls(dimension_key, DIMENSION_WEIGHTS[dimension_key], score, notes)


@dataclass(frozen=True)
class ProvisionalScore:
    value: float
    dimensions_scored: int
    dimensions_total: int
    provisional: bool = True

    @property
    def complete(self) -> bool:
        return self.dimensions_scored == self.dimensions_total


def scores_from_mapping(raw: Mapping[str, Any]) -> List[DimensionScore]:
    """{key: score} or {key: {"score": n, "notes": "..."}} -> DimensionScore list.

    Null entries count as not yet scored.
    """
    out: List[DimensionScore] = []
    for key, val in raw.items():
        notes = ""
        if isinstance(val, Mapping):
            notes = str(val.get("notes") or "")
            val = val.get("score")
        if val is None:
            continue
        out.append(DimensionScore.of(key, val, notes))
    return out


def _index(scores: Iterable[DimensionScore]) -> Dict[str, DimensionScore]:
    by_key: Dict[str, DimensionScore] = {}
    for s in scores:
        declared = DIMENSION_WEIGHTS.get(s.dimension_key)
        if declared is None:
            raise DomainError(f"unknown dimension: {s.dimension_key!r}")
        if s.dimension_key in by_key:
            raise DomainError(f"dimension scored twice: {s.dimension_key!r}")
        if isinstance(s.score, bool) or not isinstance(s.score, int):
            raise DomainError(f"score for {s.dimension_key} must be an integer, got {s.score!r}")
        if not MIN_SCORE <= s.score <= MAX_SCORE:
            raise DomainError(f"score for {s.dimension_key} must be {MIN_SCORE}-{MAX_SCORE}, got {s.score}")
        if abs(float(s.weight) - declared) > WEIGHT_TOLERANCE:
            raise DomainError(f"weight for {s.dimension_key} must be {declared}, got {s.weight}")
        by_key[s.dimension_key] = s
    return by_key


def missing_dimensions(scores: Iterable[DimensionScore]) -> List[str]:
    by_key = _index(scores)
    return [d.key for d in DIMENSIONS if d.key not in by_key]


def ordered_scores(scores: Iterable[DimensionScore]) -> List[DimensionScore]:
    """Scores in dimension declaration order, unscored dimensions skipped."""
    by_key = _index(scores)
    return [by_key[d.key] for d in DIMENSIONS if d.key in by_key]


def partial_weighted_score(scores: Iterable[DimensionScore]) -> Optional[ProvisionalScore]:
    """Weighted average over the dimensions scored so far; None if none are."""
    scored = ordered_scores(scores)
    if not scored:
        return None
    total_weight = sum(s.weight for s in scored)
    total = sum(s.score * s.weight for s in scored)
    return ProvisionalScore(
        value=round(total / total_weight, 2),
        dimensions_scored=len(scored),
        dimensions_total=len(DIMENSIONS),
    )


def final_weighted_score(scores: Iterable[DimensionScore]) -> float:
    """Sum of score x weight over all five dimensions, rounded to 2 dp."""
    scores = list(scores)
    missing = missing_dimensions(scores)
    if missing:
        raise IncompleteScore(missing)
    return round(sum(s.score * s.weight for s in ordered_scores(scores)), 2)
