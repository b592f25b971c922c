import unittest

from cam.errors import DomainError, IncompleteScore
from cam.scoring.dimensions import DIMENSIONS, DIMENSION_WEIGHTS, weights_total
from cam.scoring.gate import CapitalGateInputs, CapitalGateResult, evaluate_gate
from cam.scoring.recommendation import (
    CONSIDER,
    GO,
    HOLD,
    STRONG_GO,
    evaluate_score,
    resolve_band,
    resolve_recommendation,
)
from cam.scoring.score import (
    DimensionScore,
    final_weighted_score,
    partial_weighted_score,
    scores_from_mapping,
)

PASS = CapitalGateResult(irr_pass=True, cm_pass=True, irr_exempt=False)
FAIL = CapitalGateResult(irr_pass=False, cm_pass=True, irr_exempt=False)


def _scores(fr, sa, ci, cd, ef):
    return scores_from_mapping({
        "financial_return": fr,
        "strategic_alignment": sa,
        "competitive_impact": ci,
        "client_demand": cd,
        "execution_feasibility": ef,
    })


class TestDimensions(unittest.TestCase):
    def test_weights_sum_to_one(self):
        self.assertEqual(len(DIMENSIONS), 5)
        self.assertAlmostEqual(weights_total(), 1.0, delta=1e-9)
        for d in DIMENSIONS:
            self.assertTrue(0 < d.weight <= 1)
            self.assertEqual(sorted(d.rubric), [1, 2, 3, 4, 5])

    def test_declared_weights(self):
        self.assertEqual(DIMENSION_WEIGHTS["financial_return"], 0.30)
        self.assertEqual(DIMENSION_WEIGHTS["execution_feasibility"], 0.10)

    def test_rubrics_are_read_only(self):
        with self.assertRaises(TypeError):
            DIMENSIONS[0].rubric[6] = DIMENSIONS[0].rubric[5]


class TestWeightedScore(unittest.TestCase):
    def test_final_score(self):
        self.assertEqual(final_weighted_score(_scores(5, 4, 4, 4, 3)), 4.2)
        self.assertEqual(final_weighted_score(_scores(3, 3, 3, 3, 3)), 3.0)
        self.assertEqual(final_weighted_score(_scores(1, 1, 1, 1, 1)), 1.0)
        self.assertEqual(final_weighted_score(_scores(5, 5, 5, 5, 5)), 5.0)

    def test_final_requires_all_dimensions(self):
        partial = scores_from_mapping({"financial_return": 5, "client_demand": 2})
        with self.assertRaises(IncompleteScore) as ctx:
            final_weighted_score(partial)
        self.assertEqual(ctx.exception.missing,
                         ("strategic_alignment", "competitive_impact", "execution_feasibility"))

    def test_partial_score_is_provisional(self):
        self.assertIsNone(partial_weighted_score([]))
        p = partial_weighted_score(scores_from_mapping({"financial_return": 5, "strategic_alignment": 3}))
        self.assertTrue(p.provisional)
        self.assertFalse(p.complete)
        self.assertEqual(p.dimensions_scored, 2)
        self.assertEqual(p.dimensions_total, 5)
        self.assertEqual(p.value, 4.09)

    def test_partial_with_all_dimensions_matches_final(self):
        scores = _scores(5, 4, 4, 4, 3)
        p = partial_weighted_score(scores)
        self.assertTrue(p.complete)
        self.assertEqual(p.value, final_weighted_score(scores))

    def test_null_entries_are_unscored(self):
        scores = scores_from_mapping({"financial_return": {"score": 4, "notes": "IRR 32%"}, "client_demand": None})
        self.assertEqual(len(scores), 1)
        self.assertEqual(scores[0].notes, "IRR 32%")
        self.assertEqual(scores[0].weight, 0.30)

    def test_validation(self):
        bad = [
            [DimensionScore("unknown", 0.1, 3)],
            [DimensionScore.of("client_demand", 0)],
            [DimensionScore.of("client_demand", 6)],
            [DimensionScore.of("client_demand", 3.5)],
            [DimensionScore("client_demand", 0.5, 3)],
            [DimensionScore.of("client_demand", 3), DimensionScore.of("client_demand", 4)],
        ]
        for scores in bad:
            with self.assertRaises(DomainError):
                partial_weighted_score(scores)
        with self.assertRaises(DomainError):
            DimensionScore.of("unknown", 3)


class TestRecommendation(unittest.TestCase):
    def test_bands(self):
        self.assertEqual(resolve_band(4.0), "band_a")
        self.assertEqual(resolve_band(3.99), "band_b")
        self.assertEqual(resolve_band(3.5), "band_b")
        self.assertEqual(resolve_band(3.49), "band_c")
        self.assertEqual(resolve_band(3.0), "band_c")
        self.assertEqual(resolve_band(2.99), "band_d")

    def test_mapping_with_gate(self):
        self.assertEqual(resolve_recommendation(4.5, True), ("band_a", STRONG_GO))
        self.assertEqual(resolve_recommendation(3.7, True), ("band_b", GO))
        self.assertEqual(resolve_recommendation(3.2, True), ("band_c", CONSIDER))
        self.assertEqual(resolve_recommendation(2.0, True), ("band_d", HOLD))
        self.assertEqual(resolve_recommendation(4.5, False), ("band_a", CONSIDER))
        self.assertEqual(resolve_recommendation(3.7, False), ("band_b", CONSIDER))
        self.assertEqual(resolve_recommendation(3.2, False), ("band_c", CONSIDER))
        self.assertEqual(resolve_recommendation(2.0, False), ("band_d", HOLD))

    def test_failed_gate_caps_recommendation(self):
        for score in range(10, 51):
            _, rec = resolve_recommendation(score / 10, False)
            self.assertNotIn(rec, (STRONG_GO, GO))

    def test_evaluate_score(self):
        scores = _scores(5, 4, 4, 4, 3)
        res = evaluate_score(scores, PASS)
        self.assertEqual(res.weighted_score, 4.2)
        self.assertEqual(res.band, "band_a")
        self.assertEqual(res.recommendation, STRONG_GO)
        self.assertTrue(res.financial_gate_pass)
        self.assertEqual([s.dimension_key for s in res.dimension_scores], [d.key for d in DIMENSIONS])

        capped = evaluate_score(scores, FAIL)
        self.assertEqual(capped.recommendation, CONSIDER)
        self.assertFalse(capped.financial_gate_pass)

    def test_evaluate_score_with_real_gate(self):
        gate = evaluate_gate(CapitalGateInputs("compliance_regulatory", "hybrid", None, 61.0))
        res = evaluate_score(_scores(4, 4, 3, 3, 3), gate)
        self.assertEqual(res.weighted_score, 3.55)
        self.assertEqual(res.recommendation, GO)

    def test_incomplete_raises(self):
        with self.assertRaises(IncompleteScore):
            evaluate_score(scores_from_mapping({"financial_return": 5}), PASS)

    def test_deterministic(self):
        scores = _scores(2, 3, 4, 5, 1)
        self.assertEqual(evaluate_score(scores, PASS), evaluate_score(scores, PASS))


if __name__ == '__main__':
    unittest.main()
