import json
import unittest

from advisor_inputs import snapshot_from_form
from evaluator import evaluate
from render_alerts import ALL_CLEAR_TITLE, alert_style, render_markdown, result_payload


class RenderAlertsTests(unittest.TestCase):
    def test_cards_render_in_match_order_with_level_icons(self) -> None:
        result = evaluate(
            snapshot_from_form(
                {
                    "cyp2d6_status": "Poor Metabolizer",
                    "current_meds": "codeine",
                    "mthfr_status": "Reduced Function",
                }
            )
        )
        markdown = render_markdown(result)
        self.assertIn("### ⚠️ Ineffective Analgesia & Toxicity Risk (PGx-001)", markdown)
        self.assertIn("### 💡 Folate Metabolism Support Required (WL-003)", markdown)
        self.assertLess(markdown.index("PGx-001"), markdown.index("WL-003"))
        self.assertIn("_Background Support: CPIC/PharmGKB Level 1A_", markdown)
        self.assertIn("**Risk Score:** 70 / 130 (54%)", markdown)
        self.assertNotIn(ALL_CLEAR_TITLE, markdown)

    def test_no_matches_renders_all_clear(self) -> None:
        markdown = render_markdown(evaluate(snapshot_from_form({})))
        self.assertIn(ALL_CLEAR_TITLE, markdown)
        self.assertIn("Nominal Risk Profile", markdown)

    def test_payload_is_json_serializable(self) -> None:
        result = evaluate(snapshot_from_form({"adh1b_status": "Fast Metabolizer"}))
        payload = json.loads(json.dumps(result_payload(result)))
        self.assertEqual(payload["matched_rules"], ["WL-004"])
        self.assertEqual(payload["alerts"][0]["css_class"], "alert-warning")
        self.assertEqual(payload["score"], 30)
        self.assertEqual(payload["tier"]["percentage"], 23)
        self.assertEqual(payload["tier"]["severity_class"], "info")

    def test_unknown_level_has_no_style(self) -> None:
        self.assertEqual(alert_style("UNKNOWN"), ("", ""))
        self.assertEqual(alert_style("CRITICAL"), ("⚠️", "alert-danger"))


if __name__ == "__main__":
    unittest.main()
