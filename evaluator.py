from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Final

from advisor_inputs import InputSnapshot, parse_amount
from risk_scoring import RiskTier, classify_score
from rule_catalog import MAX_SCORE, RULE_CATALOG, Condition, Rule


@dataclass(frozen=True)
class EvaluationResult:
    matches: tuple[Rule, ...]
    score: int
    tier: RiskTier
    max_score: int = MAX_SCORE

    @property
    def matched_ids(self) -> list[str]:
        return [rule.rule_id for rule in self.matches]


def _allele_matches(condition: Condition, snapshot: InputSnapshot) -> bool:
    return snapshot.status(condition.gene) == condition.allele


def _check_allele_substring(condition: Condition, snapshot: InputSnapshot) -> bool:
    if not _allele_matches(condition, snapshot):
        return False
    drug = (condition.drug or "").lower()
    medications = "" if snapshot.medications is None else str(snapshot.medications)
    return bool(drug) and drug in medications.lower()


def _check_allele_threshold(condition: Condition, snapshot: InputSnapshot) -> bool:
    if not _allele_matches(condition, snapshot):
        return False
    amount = parse_amount(snapshot.caffeine_mg)
    if amount is None or condition.threshold is None:
        return False
    return amount >= condition.threshold


def _check_allele_only(condition: Condition, snapshot: InputSnapshot) -> bool:
    return _allele_matches(condition, snapshot)


CONDITION_CHECKS: Final[dict[str, Callable[[Condition, InputSnapshot], bool]]] = {
    "allele_substring": _check_allele_substring,
    "allele_threshold": _check_allele_threshold,
    "allele_only": _check_allele_only,
}


def matches(rule: Rule, snapshot: InputSnapshot) -> bool:
    check = CONDITION_CHECKS[rule.condition.kind]
    return check(rule.condition, snapshot)


def evaluate(snapshot: InputSnapshot, rules: tuple[Rule, ...] = RULE_CATALOG) -> EvaluationResult:
    """Run every rule against the snapshot, keeping catalog order.

    Each rule is checked on its own; a snapshot can match none, some or all of
    them. The score is the sum of the matched rules' weights.
    """
    matched: list[Rule] = []
    score = 0
    for rule in rules:
        if matches(rule, snapshot):
            matched.append(rule)
            score += rule.score_impact
    max_score = sum(rule.score_impact for rule in rules)
    return EvaluationResult(tuple(matched), score, classify_score(score, max_score), max_score)
