# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///

from __future__ import annotations

import argparse
from typing import Sequence

from advisor_inputs import CAFFEINE_FIELD, MEDICATIONS_FIELD, STATUS_FIELDS, STATUS_OPTIONS, snapshot_from_form
from evaluator import evaluate
from render_alerts import render_markdown, result_payload
from run_utils import resolve_base_name, run_root, update_summary, write_json


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate one genetic/lifestyle intake against the advisor rules.")
    for gene, options in STATUS_OPTIONS.items():
        parser.add_argument(
            f"--{gene.lower()}",
            dest=STATUS_FIELDS[gene],
            default="",
            help=f"{gene} status ({', '.join(options)})",
        )
    parser.add_argument("--meds", dest=MEDICATIONS_FIELD, default="", help="Current medications (free text)")
    parser.add_argument("--caffeine", dest=CAFFEINE_FIELD, default="", help="Caffeine after 12 PM in mg")
    parser.add_argument("--save", help="Run name; writes JSON and Markdown into the run folder")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    fields = vars(args)

    result = evaluate(snapshot_from_form(fields))
    markdown = render_markdown(result)
    print(markdown)

    if args.save:
        run_dir = run_root(resolve_base_name(args.save))
        result_path = run_dir / "advisor_result.json"
        report_path = run_dir / "advisor_report.md"
        write_json(result_path, result_payload(result))
        report_path.write_text(markdown, encoding="utf-8")
        update_summary(
            run_dir,
            {
                "advisor_result_path": str(result_path),
                "advisor_report_path": str(report_path),
                "risk_score": result.score,
                "risk_tier": result.tier.label,
            },
        )
        print(f"Saved results in {run_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
