# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "polars",
# ]
# ///

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

import polars as pl

from advisor_inputs import FORM_FIELDS, snapshot_from_form
from evaluator import evaluate
from run_utils import resolve_base_name, run_root, update_summary

ID_COLUMN = "respondent_id"
RESULT_SCHEMA = {
    ID_COLUMN: pl.String,
    "matched_rules": pl.String,
    "score": pl.Int64,
    "tier": pl.String,
    "percentage": pl.Int64,
}


def load_intake(path: Path) -> pl.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Intake file not found: {path}")
    if path.suffix == ".parquet":
        df = pl.read_parquet(path)
    else:
        # every column as text; numeric parsing is left to the evaluator
        try:
            df = pl.read_csv(path, infer_schema_length=0)
        except pl.exceptions.NoDataError as exc:
            raise ValueError(f"Intake file is empty: {path}") from exc
    df = df.rename({col: col.strip().lower() for col in df.columns})
    df = df.with_columns(pl.all().cast(pl.String))
    missing = [name for name in (ID_COLUMN, *FORM_FIELDS) if name not in df.columns]
    if missing:
        df = df.with_columns([pl.lit(None, dtype=pl.String).alias(name) for name in missing])
    return df


def evaluate_frame(intake: pl.DataFrame) -> pl.DataFrame:
    rows = []
    for index, row in enumerate(intake.iter_rows(named=True), start=1):
        result = evaluate(snapshot_from_form(row))
        rows.append(
            {
                ID_COLUMN: row.get(ID_COLUMN) or str(index),
                "matched_rules": ";".join(result.matched_ids),
                "score": result.score,
                "tier": result.tier.label,
                "percentage": result.tier.percentage,
            }
        )
    return pl.DataFrame(rows, schema=RESULT_SCHEMA)


def tier_counts(results: pl.DataFrame) -> dict[str, int]:
    if results.is_empty():
        return {}
    counts = results.group_by("tier").len().sort("tier")
    return {row["tier"]: row["len"] for row in counts.iter_rows(named=True)}


def run_batch(intake_path: Path, base_name: str) -> pl.DataFrame:
    print(f"Evaluating intake rows from {intake_path}...")
    results = evaluate_frame(load_intake(intake_path))

    run_dir = run_root(base_name)
    output_path = run_dir / "advisor_batch.csv"
    results.write_csv(output_path)
    counts = tier_counts(results)
    update_summary(
        run_dir,
        {
            "advisor_batch_path": str(output_path),
            "respondent_count": results.height,
            "tier_counts": counts,
        },
    )

    print("\n--- ADVISOR BATCH SUMMARY ---")
    print(f"Respondents evaluated: {results.height}")
    for tier, count in counts.items():
        print(f"{tier}: {count}")
    print("----------------------------\n")
    print(f"Wrote {output_path}")
    return results


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate a table of intake answers against the advisor rules.")
    parser.add_argument("intake", help="CSV or Parquet file, one row per respondent")
    parser.add_argument("--name", help="Run name (defaults to the intake file name)")
    args = parser.parse_args(argv)

    intake_path = Path(args.intake)
    base_name = resolve_base_name(args.name or args.intake)
    try:
        run_batch(intake_path, base_name)
    except (FileNotFoundError, ValueError) as exc:
        print(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
