from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from rule_catalog import MAX_SCORE


@dataclass(frozen=True)
class RiskTier:
    label: str
    severity_class: str
    percentage: int
    color: str


# (inclusive lower bound, label, severity class, gauge color), highest band first
TIER_BANDS: Final[tuple[tuple[int, str, str, str], ...]] = (
    (100, "High Priority Action Required", "danger", "#dc3545"),
    (50, "Moderate Wellness Focus", "warning", "#fd7e14"),
    (1, "Low Risk, Optimization Recommended", "info", "#0dcaf0"),
    (0, "Nominal Risk Profile", "success", "#198754"),
)


def score_percentage(score: int, max_score: int = MAX_SCORE) -> int:
    if max_score <= 0:
        return 0
    # round half up: floor(score * 100 / max_score + 0.5)
    rounded = (score * 200 + max_score) // (2 * max_score)
    return min(100, rounded)


def classify_score(score: int, max_score: int = MAX_SCORE) -> RiskTier:
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"Risk score must be an integer, got {score!r}")
    if score < 0:
        raise ValueError(f"Risk score must be non-negative, got {score}")
    percentage = score_percentage(score, max_score)
    for lower_bound, label, severity_class, color in TIER_BANDS:
        if score >= lower_bound:
            return RiskTier(label, severity_class, percentage, color)
    raise AssertionError("tier bands must cover every non-negative score")


def gauge_degrees(percentage: int) -> float:
    clamped = max(0, min(100, percentage))
    return clamped * 3.6
