"""Financial gate: IRR and contribution-margin floors by category.

- IRR_THRESHOLDS: minimum / target IRR (percent) per initiative type; a None
  minimum marks the type as IRR-exempt
- CM_THRESHOLDS: minimum CM% per revenue model
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from cam.errors import DomainError


@dataclass(frozen=True)
class IrrThreshold:
    label: str
    min: Optional[float]
    target: Optional[float]
    description: str = ""


@dataclass(frozen=True)
class CmThreshold:
    label: str
    min: float
    description: str = ""


IRR_THRESHOLDS: Dict[str, IrrThreshold] = {
    "new_product_platform": IrrThreshold(
        "New Product / Platform", 25.0, 40.0, "Ground-up product or platform investment"),
    "major_feature_enhancement": IrrThreshold(
        "Major Feature Enhancement", 20.0, 30.0, "Significant enhancement to existing product"),
    "efficiency_automation": IrrThreshold(
        "Efficiency / Automation", 35.0, 50.0, "Operational efficiency or automation project"),
    "compliance_regulatory": IrrThreshold(
        "Compliance / Regulatory", None, None, "Required for regulatory or compliance reasons"),
    "client_retention_defensive": IrrThreshold(
        "Client Retention / Defensive", 15.0, 25.0,
        "Defensive investment to retain clients or market position"),
}

CM_THRESHOLDS: Dict[str, CmThreshold] = {
    "pmpm_subscription": CmThreshold(
        "PMPM (Subscription)", 65.0, "Per-member-per-month recurring subscription"),
    "per_claim_transaction": CmThreshold(
        "Per-Claim Transaction", 55.0, "Transaction-based per-claim pricing"),
    "contingency_savings": CmThreshold(
        "Contingency (% of Savings)", 50.0, "Contingency-based, percentage of savings delivered"),
    "hybrid": CmThreshold(
        "Hybrid", 60.0, "Combination of subscription + transaction or contingency"),
}


@dataclass(frozen=True)
class CapitalGateInputs:
    initiative_type: str
    revenue_model: str
    irr_value: Optional[float]  # percent
    cm_value: float             # percent


@dataclass(frozen=True)
class CapitalGateResult:
    irr_pass: bool
    cm_pass: bool
    irr_exempt: bool
    irr_min: Optional[float] = None
    irr_target: Optional[float] = None
    cm_min: Optional[float] = None

    @property
    def financial_gate_pass(self) -> bool:
        return self.irr_pass and self.cm_pass


def irr_threshold(initiative_type: str) -> IrrThreshold:
    if not isinstance(initiative_type, str) or initiative_type not in IRR_THRESHOLDS:
        raise DomainError(f"unknown initiative type: {initiative_type!r}")
    return IRR_THRESHOLDS[initiative_type]


def cm_threshold(revenue_model: str) -> CmThreshold:
    if not isinstance(revenue_model, str) or revenue_model not in CM_THRESHOLDS:
        raise DomainError(f"unknown revenue model: {revenue_model!r}")
    return CM_THRESHOLDS[revenue_model]


def check_irr_pass(irr_value: Optional[float], initiative_type: str) -> bool:
    """True when IRR meets the type's minimum; exempt types always pass.

    A missing IRR cannot meet a minimum.
    """
    threshold = irr_threshold(initiative_type)
    if threshold.min is None:
        return True
    if irr_value is None:
        return False
    if isinstance(irr_value, bool) or not isinstance(irr_value, (int, float)):
        raise DomainError(f"irr_value must be a number, got {irr_value!r}")
    return float(irr_value) >= threshold.min


def check_cm_pass(cm_value: float, revenue_model: str) -> bool:
    threshold = cm_threshold(revenue_model)
    if isinstance(cm_value, bool) or not isinstance(cm_value, (int, float)):
        raise DomainError(f"cm_value must be a number, got {cm_value!r}")
    return float(cm_value) >= threshold.min


def evaluate_gate(inputs: CapitalGateInputs) -> CapitalGateResult:
    irr_t = irr_threshold(inputs.initiative_type)
    cm_t = cm_threshold(inputs.revenue_model)
    return CapitalGateResult(
        irr_pass=check_irr_pass(inputs.irr_value, inputs.initiative_type),
        cm_pass=check_cm_pass(inputs.cm_value, inputs.revenue_model),
        irr_exempt=irr_t.min is None,
        irr_min=irr_t.min,
        irr_target=irr_t.target,
        cm_min=cm_t.min,
    )
