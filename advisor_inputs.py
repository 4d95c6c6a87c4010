from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Final, Mapping

from rule_catalog import TRACKED_GENES

# Form control ids on the intake page, keyed by the gene they record.
STATUS_FIELDS: Final[dict[str, str]] = {
    "CYP2D6": "cyp2d6_status",
    "CYP1A2": "cyp1a2_status",
    "MTHFR": "mthfr_status",
    "ADH1B": "adh1b_status",
}
MEDICATIONS_FIELD = "current_meds"
CAFFEINE_FIELD = "caffeine_post_12pm"

FORM_FIELDS: Final[tuple[str, ...]] = (
    STATUS_FIELDS["CYP2D6"],
    MEDICATIONS_FIELD,
    STATUS_FIELDS["CYP1A2"],
    CAFFEINE_FIELD,
    STATUS_FIELDS["MTHFR"],
    STATUS_FIELDS["ADH1B"],
)

STATUS_OPTIONS: Final[dict[str, tuple[str, ...]]] = {
    "CYP2D6": ("Normal Metabolizer", "Intermediate Metabolizer", "Poor Metabolizer", "Ultrarapid Metabolizer"),
    "CYP1A2": ("Fast Metabolizer", "Slow Metabolizer"),
    "MTHFR": ("Normal Function", "Reduced Function"),
    "ADH1B": ("Normal Metabolizer", "Fast Metabolizer"),
}

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


@dataclass(frozen=True)
class InputSnapshot:
    statuses: Mapping[str, str] = field(default_factory=dict)
    medications: str = ""
    caffeine_mg: Any = None

    def status(self, gene: str) -> str:
        return self.statuses.get(gene) or ""


def parse_amount(value: Any) -> int | float | None:
    """Read a numeric form value the way the intake page does.

    Strings keep only their leading integer ("250mg" -> 250, "12.9" -> 12).
    Digit runs too long for int() read as signed infinity, like the page.
    Returns None for empty, non-numeric, boolean or non-finite input so a
    threshold check can treat it as not met.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    digits = match.group(1)
    try:
        return int(digits)
    except ValueError:
        return -math.inf if digits.startswith("-") else math.inf


def _clean(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value)


def snapshot_from_form(fields: Mapping[str, Any]) -> InputSnapshot:
    statuses = {gene: _clean(fields.get(STATUS_FIELDS[gene])) for gene in TRACKED_GENES}
    return InputSnapshot(
        statuses=statuses,
        medications=_clean(fields.get(MEDICATIONS_FIELD)).strip(),
        caffeine_mg=fields.get(CAFFEINE_FIELD),
    )
