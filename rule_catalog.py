from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

ConditionKind = Literal["allele_substring", "allele_threshold", "allele_only"]

ALERT_LEVELS: Final[tuple[str, ...]] = ("CRITICAL", "HIGH_PRIORITY", "LIFESTYLE_INSIGHT")


@dataclass(frozen=True)
class Condition:
    kind: ConditionKind
    gene: str
    allele: str
    drug: str | None = None
    threshold: int | None = None


@dataclass(frozen=True)
class Rule:
    rule_id: str
    condition: Condition
    level: str
    title: str
    message: str
    citation: str
    score_impact: int


def _allele_substring(gene: str, allele: str, drug: str) -> Condition:
    return Condition("allele_substring", gene, allele, drug=drug)


def _allele_threshold(gene: str, allele: str, threshold: int) -> Condition:
    return Condition("allele_threshold", gene, allele, threshold=threshold)


def _allele_only(gene: str, allele: str) -> Condition:
    return Condition("allele_only", gene, allele)


RULE_CATALOG: Final[tuple[Rule, ...]] = (
    Rule(
        rule_id="PGx-001",
        condition=_allele_substring("CYP2D6", "Poor Metabolizer", "Codeine"),
        level="CRITICAL",
        title="Ineffective Analgesia & Toxicity Risk",
        message=(
            "This genotype prevents the conversion of Codeine to its active form (morphine). "
            "ACTION: Avoid use. Alternative non-opioid or non-CYP2D6 analgesics are recommended."
        ),
        citation="CPIC/PharmGKB Level 1A",
        score_impact=50,
    ),
    Rule(
        rule_id="WL-002",
        # trigger is 200 mg or more after 12 PM
        condition=_allele_threshold("CYP1A2", "Slow Metabolizer", 200),
        level="HIGH_PRIORITY",
        title="Caffeine Metabolism & Sleep Risk",
        message=(
            "Your slow caffeine clearance (CYP1A2) allows high levels to linger in your system. "
            "This dramatically increases the risk of insomnia and anxiety. "
            "ACTION: Shift all caffeine intake (especially >200mg) to before 12 PM."
        ),
        citation="Journal of the American Medical Association, 2023",
        score_impact=30,
    ),
    Rule(
        rule_id="WL-003",
        condition=_allele_only("MTHFR", "Reduced Function"),
        level="LIFESTYLE_INSIGHT",
        title="Folate Metabolism Support Required",
        message=(
            "Your reduced MTHFR enzyme function may affect B-vitamin processing. "
            "ACTION: Focus on a diet rich in natural folate (leafy greens, lentils) and discuss "
            "a bioavailable B-vitamin supplement (methylfolate) with your physician."
        ),
        citation="NIH/CDC Guidance on MTHFR Polymorphisms",
        score_impact=20,
    ),
    Rule(
        rule_id="WL-004",
        condition=_allele_only("ADH1B", "Fast Metabolizer"),
        level="HIGH_PRIORITY",
        title="Alcohol Flush & Discomfort Risk",
        message=(
            "Your genetics cause rapid breakdown of ethanol, leading to a quick buildup of toxic "
            "acetaldehyde. ACTION: Limit intake to 1 drink per sitting to avoid flush, nausea, "
            "and potential increased long-term risk."
        ),
        citation="NIAAA Guidelines on ADH1B Variants",
        score_impact=30,
    ),
)


def _validate_catalog(rules: tuple[Rule, ...]) -> None:
    seen: set[str] = set()
    for rule in rules:
        if rule.rule_id in seen:
            raise ValueError(f"Duplicate rule id in catalog: {rule.rule_id}")
        seen.add(rule.rule_id)
        if rule.level not in ALERT_LEVELS:
            raise ValueError(f"Unknown alert level for {rule.rule_id}: {rule.level}")
        if rule.score_impact < 0:
            raise ValueError(f"Negative score impact for {rule.rule_id}: {rule.score_impact}")
        condition = rule.condition
        if condition.kind == "allele_substring" and not condition.drug:
            raise ValueError(f"{rule.rule_id} needs a drug name")
        if condition.kind == "allele_threshold" and condition.threshold is None:
            raise ValueError(f"{rule.rule_id} needs a threshold")


_validate_catalog(RULE_CATALOG)

MAX_SCORE: Final[int] = sum(rule.score_impact for rule in RULE_CATALOG)

TRACKED_GENES: Final[tuple[str, ...]] = tuple(
    dict.fromkeys(rule.condition.gene for rule in RULE_CATALOG)
)


def rule_by_id(rule_id: str) -> Rule:
    for rule in RULE_CATALOG:
        if rule.rule_id == rule_id:
            return rule
    raise KeyError(rule_id)
