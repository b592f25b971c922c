import csv
import io
import unittest

from cam.config.defaults import DEFAULT_ASSUMPTIONS
from cam.exports.writers import (
    SCHEMAS,
    to_record,
    write_cash_flows,
    write_evaluation,
    write_sensitivity,
)
from cam.financial.engine import evaluate_financials
from cam.financial.sensitivity import evaluate_sensitivity
from cam.scoring.gate import CapitalGateInputs, evaluate_gate
from cam.scoring.recommendation import evaluate_score
from cam.scoring.score import scores_from_mapping


class TestExports(unittest.TestCase):
    def setUp(self):
        self.fin = evaluate_financials(DEFAULT_ASSUMPTIONS)
        self.gate = evaluate_gate(CapitalGateInputs("new_product_platform", "pmpm_subscription", self.fin.irr, 65.0))
        self.score = evaluate_score(scores_from_mapping({
            "financial_return": 5, "strategic_alignment": 4, "competitive_impact": 4,
            "client_demand": 4, "execution_feasibility": 3,
        }), self.gate)

    def test_financial_record_field_names(self):
        rec = to_record(self.fin)
        for k in ("cash_flows", "annual_revenues", "monthly_revenue", "annual_revenue",
                  "total_revenue_5yr", "npv", "irr", "payback_months"):
            self.assertIn(k, rec)
        self.assertIsInstance(rec["cash_flows"], list)
        self.assertEqual(rec["cash_flows"][0], -1800000.0)

    def test_gate_and_score_records(self):
        gate = to_record(self.gate)
        self.assertEqual({"irr_pass", "cm_pass", "irr_exempt", "financial_gate_pass"} - set(gate), set())
        self.assertTrue(gate["financial_gate_pass"])
        score = to_record(self.score)
        self.assertEqual(score["recommendation"], "strong_go")
        self.assertEqual(score["dimension_scores"][0]["dimension_key"], "financial_return")

    def test_to_record_rejects_non_records(self):
        with self.assertRaises(TypeError):
            to_record({"npv": 1})

    def test_cash_flow_csv(self):
        txt = write_cash_flows(self.fin, DEFAULT_ASSUMPTIONS.discount_rate)
        reader = csv.DictReader(io.StringIO(txt))
        rows = list(reader)
        self.assertEqual(reader.fieldnames, SCHEMAS["cash_flows"])
        self.assertEqual(len(rows), 6)
        self.assertEqual(rows[0]["period"], "0")
        pv_total = sum(float(r["present_value"]) for r in rows)
        self.assertAlmostEqual(pv_total, self.fin.npv, places=3)

    def test_sensitivity_csv(self):
        txt = write_sensitivity(evaluate_sensitivity(DEFAULT_ASSUMPTIONS))
        self.assertTrue(txt.startswith("assumption_name,label,baseline_npv"))
        self.assertEqual(len(txt.strip().splitlines()), 7)

    def test_evaluation_csv(self):
        txt = write_evaluation(self.fin, self.gate, self.score)
        rows = list(csv.DictReader(io.StringIO(txt)))
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0]["band"], "band_a")
        self.assertEqual(rows[0]["financial_gate_pass"], "True")
        self.assertEqual(rows[0]["payback_months"], "38")


if __name__ == '__main__':
    unittest.main()
