from __future__ import annotations

from typing import Any

from evaluator import EvaluationResult
from risk_scoring import gauge_degrees
from rule_catalog import Rule

ALERT_STYLES: dict[str, tuple[str, str]] = {
    "CRITICAL": ("⚠️", "alert-danger"),
    "HIGH_PRIORITY": ("🚨", "alert-warning"),
    "LIFESTYLE_INSIGHT": ("💡", "alert-info"),
}

ALL_CLEAR_TITLE = "✨ All Clear!"
ALL_CLEAR_MESSAGE = (
    "Based on the simulated genetic and lifestyle data, no critical or high-priority alerts "
    "were identified. Excellent wellness profile!"
)


def alert_style(level: str) -> tuple[str, str]:
    return ALERT_STYLES.get(level, ("", ""))


def _alert_card(rule: Rule) -> dict[str, str]:
    icon, css_class = alert_style(rule.level)
    return {
        "rule_id": rule.rule_id,
        "level": rule.level,
        "icon": icon,
        "css_class": css_class,
        "title": rule.title,
        "message": rule.message,
        "citation": rule.citation,
    }


def result_payload(result: EvaluationResult) -> dict[str, Any]:
    return {
        "matched_rules": result.matched_ids,
        "alerts": [_alert_card(rule) for rule in result.matches],
        "score": result.score,
        "max_score": result.max_score,
        "tier": {
            "label": result.tier.label,
            "severity_class": result.tier.severity_class,
            "percentage": result.tier.percentage,
            "color": result.tier.color,
            "gauge_degrees": gauge_degrees(result.tier.percentage),
        },
    }


def render_markdown(result: EvaluationResult) -> str:
    lines = []
    lines.append("# Genetic Wellness Advisor Results")
    lines.append(f"**Risk Tier:** {result.tier.label}  ")
    lines.append(f"**Risk Score:** {result.score} / {result.max_score} ({result.tier.percentage}%)")
    lines.append("")
    if result.matches:
        for card in (_alert_card(rule) for rule in result.matches):
            heading = f"{card['icon']} {card['title']}".strip()
            lines.append(f"### {heading} ({card['rule_id']})")
            lines.append(card["message"])
            lines.append("")
            lines.append(f"_Background Support: {card['citation']}_")
            lines.append("")
    else:
        lines.append(f"### {ALL_CLEAR_TITLE}")
        lines.append(ALL_CLEAR_MESSAGE)
        lines.append("")
    lines.append("---")
    lines.append("* **Not medical advice:** Simulated screening only; confirm with a clinician before changing medications.")
    lines.append("")
    return "\n".join(lines)
