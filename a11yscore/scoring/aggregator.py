# a11yscore/scoring/aggregator.py

import math
from typing import Dict, List, Sequence

from a11yscore.models.aggregate_summary import AggregateSummary, RuleFrequency
from a11yscore.models.scored_violation import ScoredViolation, SeverityLevel

DEFAULT_TOP_N = 10


def summarize(scored: Sequence[ScoredViolation], top_n: int = DEFAULT_TOP_N) -> AggregateSummary:
    """
    Reduce a scored batch into report statistics.

    Order-independent, except that rules with equal counts in top_rules
    keep first-seen order.
    """
    total = len(scored)
    flagged = sum(1 for v in scored if v.flagged_for_review)

    by_severity: Dict[str, int] = {level.value: 0 for level in SeverityLevel}
    rule_counts: Dict[str, int] = {}

    for v in scored:
        by_severity[v.severity.value] = by_severity.get(v.severity.value, 0) + 1
        rule_counts[v.rule_id] = rule_counts.get(v.rule_id, 0) + 1

    # fsum is exact, so the mean does not depend on input order
    average = round(math.fsum(v.confidence for v in scored) / total, 2) if total else 0.0

    # sorted() is stable: ties keep dict insertion (first-seen) order
    ranked = sorted(rule_counts.items(), key=lambda item: -item[1])

    return AggregateSummary(
        total=total,
        flagged_for_review=flagged,
        not_flagged=total - flagged,
        flagged_ratio=round(flagged / total, 2) if total else 0.0,
        average_confidence=average,
        by_severity=by_severity,
        top_rules=[RuleFrequency(rule=r, count=c) for r, c in ranked[:max(top_n, 0)]],
    )


def filter_by_confidence(scored: Sequence[ScoredViolation], threshold: float) -> List[ScoredViolation]:
    return [v for v in scored if v.confidence >= threshold]


def sort_by_confidence(scored: Sequence[ScoredViolation]) -> List[ScoredViolation]:
    """Highest confidence first; equal confidences keep input order."""
    return sorted(scored, key=lambda v: -v.confidence)
