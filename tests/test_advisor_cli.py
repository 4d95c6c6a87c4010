import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import run_utils
from advisor import main


class AdvisorCliTests(unittest.TestCase):
    def test_prints_report_for_flags(self) -> None:
        with contextlib.redirect_stdout(io.StringIO()) as out:
            exit_code = main(["--cyp1a2", "Slow Metabolizer", "--caffeine", "220"])
        self.assertEqual(exit_code, 0)
        text = out.getvalue()
        self.assertIn("(WL-002)", text)
        self.assertIn("Low Risk, Optimization Recommended", text)

    def test_save_writes_run_outputs(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            runs = Path(tmp) / "runs"
            with mock.patch.object(run_utils, "RUNS_DIR", runs):
                with contextlib.redirect_stdout(io.StringIO()):
                    exit_code = main(
                        ["--cyp2d6", "Poor Metabolizer", "--meds", "Codeine", "--save", "demo"]
                    )
            self.assertEqual(exit_code, 0)
            run_dir = next(runs.glob("*/demo"))
            payload = json.loads((run_dir / "advisor_result.json").read_text(encoding="utf-8"))
            self.assertEqual(payload["matched_rules"], ["PGx-001"])
            self.assertTrue((run_dir / "advisor_report.md").exists())
            summary = json.loads((run_dir / "summary.json").read_text(encoding="utf-8"))
            self.assertEqual(summary["risk_score"], 50)
            self.assertEqual(summary["risk_tier"], "Moderate Wellness Focus")


if __name__ == "__main__":
    unittest.main()
