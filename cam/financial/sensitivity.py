"""One-at-a-time ("tornado") sensitivity of NPV to each assumption."""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterator, Tuple

from cam.financial.assumptions import SENSITIVITY_FIELDS, FinancialAssumptions, validate_assumptions
from cam.financial.engine import npv_for

DEFAULT_VARIATION_PCT = 20.0


@dataclass(frozen=True)
class SensitivityEntry:
    assumption_name: str
    label: str
    baseline_npv: float
    low_npv: float    # assumption scaled down by the variation
    high_npv: float   # assumption scaled up by the variation
    low_delta: float
    high_delta: float
    impact_range: float


@dataclass(frozen=True)
class SensitivityResult:
    baseline_npv: float
    entries: Tuple[SensitivityEntry, ...]

    def __iter__(self) -> Iterator[SensitivityEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, idx):
        return self.entries[idx]


def evaluate_sensitivity(a: FinancialAssumptions,
                         variation_pct: float = DEFAULT_VARIATION_PCT) -> SensitivityResult:
    """Replay NPV with each assumption moved by -/+variation_pct, others fixed.

    Entries are ranked by impact_range, largest first; ties keep declaration
    order. low_npv is always the scaled-down run, whether or not NPV moves
    monotonically with the assumption.

    Every perturbed run must itself be valid. A baseline near a domain edge
    (discount_rate=-90 moved by 20% gives -108) raises DomainError for the
    whole analysis; no entry is skipped.
    """
    validate_assumptions(a)
    factor = variation_pct / 100.0
    base_npv = npv_for(a)

    entries = []
    for name, label in SENSITIVITY_FIELDS:
        value = getattr(a, name)
        low_npv = npv_for(replace(a, **{name: value * (1.0 - factor)}))
        high_npv = npv_for(replace(a, **{name: value * (1.0 + factor)}))
        entries.append(SensitivityEntry(
            assumption_name=name,
            label=label,
            baseline_npv=base_npv,
            low_npv=low_npv,
            high_npv=high_npv,
            low_delta=low_npv - base_npv,
            high_delta=high_npv - base_npv,
            impact_range=abs(high_npv - low_npv),
        ))

    # sorted() is stable, so ties stay in declaration order
    ranked = sorted(entries, key=lambda e: e.impact_range, reverse=True)
    return SensitivityResult(baseline_npv=base_npv, entries=tuple(ranked))
