from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class RubricLevel:
    label: str
    description: str


@dataclass(frozen=True)
class Dimension:
    key: str
    label: str
    weight: float
    description: str
    rubric: Mapping[int, RubricLevel]

    def __post_init__(self):
        object.__setattr__(self, "rubric", MappingProxyType(dict(self.rubric)))


# Rubric text is for display; scoring only uses key and weight.
DIMENSIONS: Tuple[Dimension, ...] = (
    Dimension(
        key="financial_return",
        label="Financial Return",
        weight=0.30,
        description="Projected financial performance including IRR, NPV, and payback period",
        rubric={
            1: RubricLevel("Minimal Return",
                           "IRR below minimum threshold. Negative or break-even NPV. "
                           "Payback period exceeds 5 years. Limited revenue potential."),
            2: RubricLevel("Below Target",
                           "IRR meets minimum but below target. Marginal NPV positive. "
                           "Payback period 3-5 years. Modest revenue contribution."),
            3: RubricLevel("Meets Expectations",
                           "IRR meets target threshold. Solid NPV positive. Payback period 2-3 years. "
                           "Good revenue contribution aligned with plan."),
            4: RubricLevel("Strong Return",
                           "IRR exceeds target by 10%+. Strong NPV. Payback under 2 years. "
                           "Significant revenue contribution with margin expansion."),
            5: RubricLevel("Exceptional Return",
                           "IRR significantly exceeds target. Outstanding NPV. Payback under 1 year. "
                           "Transformative revenue impact with premium margins."),
        },
    ),
    Dimension(
        key="strategic_alignment",
        label="Strategic Alignment",
        weight=0.25,
        description="How well the initiative supports corporate strategy and the business-unit roadmap",
        rubric={
            1: RubricLevel("Misaligned",
                           "Does not support current strategic priorities. Tangential to BU roadmap. "
                           "No connection to corporate OKRs."),
            2: RubricLevel("Loosely Connected",
                           "Indirect connection to one strategic priority. Minor alignment with BU roadmap. "
                           "Could be deferred without strategic impact."),
            3: RubricLevel("Aligned",
                           "Directly supports a strategic priority. Fits BU roadmap. "
                           "Contributes to at least one corporate OKR or growth pillar."),
            4: RubricLevel("Highly Aligned",
                           "Core to a strategic priority. Key to BU roadmap delivery. "
                           "Advances multiple corporate OKRs. Enables other strategic initiatives."),
            5: RubricLevel("Foundational",
                           "Defines or enables a strategic priority. Critical path for BU transformation. "
                           "Board-level visibility. Platform for multiple future initiatives."),
        },
    ),
    Dimension(
        key="competitive_impact",
        label="Competitive Impact",
        weight=0.20,
        description="Competitive differentiation and market positioning impact",
        rubric={
            1: RubricLevel("No Differentiation",
                           "Table stakes feature that competitors already offer. No competitive advantage. "
                           "Easy for competitors to match."),
            2: RubricLevel("Incremental",
                           "Minor competitive improvement. Some competitors have equivalent. "
                           "Short-lived advantage of 6 months or less."),
            3: RubricLevel("Differentiating",
                           "Meaningful competitive advantage. Few competitors offer comparable solution. "
                           "12-18 month advantage window."),
            4: RubricLevel("Market Leading",
                           "First-mover or best-in-class capability. Creates significant competitive moat. "
                           "18-24 month advantage. Potential for market share gains."),
            5: RubricLevel("Category Defining",
                           "Creates a new category or redefines the competitive landscape. "
                           "Multi-year defensible advantage. Forces competitor response."),
        },
    ),
    Dimension(
        key="client_demand",
        label="Client Demand",
        weight=0.15,
        description="Level of client demand, retention impact, and revenue at risk",
        rubric={
            1: RubricLevel("No Demand",
                           "No client requests. No retention risk. "
                           "Nice-to-have with no measurable client impact."),
            2: RubricLevel("Low Demand",
                           "Requested by 1-2 clients. Minor retention factor. "
                           "Would improve satisfaction but not a decision driver."),
            3: RubricLevel("Moderate Demand",
                           "Requested by 3-5 clients or one major account. Notable in RFPs. "
                           "Could influence renewal decisions."),
            4: RubricLevel("High Demand",
                           "Requested by 5+ clients or multiple strategic accounts. Frequently appears in RFPs. "
                           "Revenue at risk without it."),
            5: RubricLevel("Critical Demand",
                           "Top request across client base. Multiple accounts have made it a renewal condition. "
                           "Significant revenue at risk. Deal-breaker in new sales."),
        },
    ),
    Dimension(
        key="execution_feasibility",
        label="Execution Feasibility",
        weight=0.10,
        description="Technical complexity, resource availability, and delivery confidence",
        rubric={
            1: RubricLevel("Very High Risk",
                           "Requires unproven technology. Critical skill gaps. Multiple external dependencies. "
                           "High uncertainty in timeline and scope."),
            2: RubricLevel("High Risk",
                           "Significant technical challenges. Some skill gaps. External dependencies. "
                           "Timeline uncertainty of 50%+."),
            3: RubricLevel("Moderate Risk",
                           "Known technology stack. Team has most required skills. "
                           "Limited external dependencies. Timeline confidence of 70%+."),
            4: RubricLevel("Low Risk",
                           "Proven patterns and technology. Team is experienced. Minimal dependencies. "
                           "Timeline confidence of 85%+. Clear path to delivery."),
            5: RubricLevel("Very Low Risk",
                           "Well-understood scope and technology. Team has deep experience. "
                           "No external dependencies. Timeline confidence of 95%+. Can start immediately."),
        },
    ),
)

DIMENSION_WEIGHTS: Dict[str, float] = {d.key: d.weight for d in DIMENSIONS}

DIMENSIONS_BY_KEY: Dict[str, Dimension] = {d.key: d for d in DIMENSIONS}


def weights_total() -> float:
    return sum(DIMENSION_WEIGHTS.values())
