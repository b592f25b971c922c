from __future__ import annotations
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Iterable, List
import csv
import io

from cam.financial.discount import discount_factors
from cam.financial.engine import FinancialResult
from cam.financial.sensitivity import SensitivityResult
from cam.scoring.gate import CapitalGateResult
from cam.scoring.recommendation import CapitalScoreResult

# Column names are stable identifiers read by external reporting.
SCHEMAS = {
    "cash_flows": [
        "period", "revenue", "cash_flow", "cumulative_cash_flow", "discount_factor", "present_value"
    ],
    "sensitivity": [
        "assumption_name", "label", "baseline_npv", "low_npv", "high_npv", "low_delta", "high_delta", "impact_range"
    ],
    "evaluation": [
        "monthly_revenue", "annual_revenue", "total_revenue_5yr", "npv", "irr", "payback_months",
        "contribution_margin", "irr_pass", "cm_pass", "irr_exempt", "financial_gate_pass",
        "weighted_score", "band", "recommendation"
    ],
}


def to_record(obj: Any) -> Dict[str, Any]:
    """Flatten an engine record into a dict keyed by its field names.

    Tuples become lists; derived gate properties are included.
    """
    if isinstance(obj, SensitivityResult):
        return {"baseline_npv": obj.baseline_npv, "entries": [to_record(e) for e in obj.entries]}
    if not is_dataclass(obj):
        raise TypeError(f"not an engine record: {type(obj).__name__}")
    rec = asdict(obj)
    for k, v in rec.items():
        if isinstance(v, tuple):
            rec[k] = list(v)
    if isinstance(obj, CapitalGateResult):
        rec["financial_gate_pass"] = obj.financial_gate_pass
    return rec


def write_csv(rows: Iterable[Dict[str, Any]], columns: List[str]) -> str:
    buf = io.StringIO()
    w = csv.DictWriter(buf, fieldnames=columns, extrasaction="ignore")
    w.writeheader()
    for r in rows:
        w.writerow({k: r.get(k) for k in columns})
    return buf.getvalue()


def cash_flow_rows(result: FinancialResult, discount_rate: float) -> List[Dict[str, Any]]:
    dfs = discount_factors(discount_rate, len(result.cash_flows) - 1)
    rows: List[Dict[str, Any]] = []
    for t, (cf, df) in enumerate(zip(result.cash_flows, dfs)):
        rows.append({
            "period": t,
            "revenue": result.annual_revenues[t - 1] if t > 0 else 0.0,
            "cash_flow": cf,
            "cumulative_cash_flow": result.cumulative_cash_flows[t],
            "discount_factor": df,
            "present_value": cf * df,
        })
    return rows


def write_cash_flows(result: FinancialResult, discount_rate: float) -> str:
    return write_csv(cash_flow_rows(result, discount_rate), SCHEMAS["cash_flows"])


def write_sensitivity(result: SensitivityResult) -> str:
    return write_csv((to_record(e) for e in result), SCHEMAS["sensitivity"])


def write_evaluation(financials: FinancialResult, gate: CapitalGateResult, score: CapitalScoreResult) -> str:
    row: Dict[str, Any] = {}
    row.update(to_record(financials))
    row.update(to_record(gate))
    row.update({k: v for k, v in to_record(score).items() if k != "dimension_scores"})
    return write_csv([row], SCHEMAS["evaluation"])
