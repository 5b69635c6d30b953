from typing import Any, Dict, List, Sequence

from a11yscore.explainability.view import ExplainableViolation
from a11yscore.models.scored_violation import ScoredViolation
from a11yscore.scoring.aggregator import DEFAULT_TOP_N, sort_by_confidence, summarize
from a11yscore.scoring.thresholds import FACTOR_WEIGHTS


def _top_factor(sv: ScoredViolation) -> str:
    """Name of the factor that pulled confidence down the most."""
    f = sv.factors
    reliability_name = "contextual_score" if f.contextual_score is not None else "detection_reliability"
    reliability_value = f.contextual_score if f.contextual_score is not None else f.detection_reliability

    shortfalls = {
        "severity_weight": FACTOR_WEIGHTS["severity_weight"] * (1.0 - f.severity_weight),
        reliability_name: FACTOR_WEIGHTS["detection_reliability"] * (1.0 - reliability_value),
        "context_clarity": FACTOR_WEIGHTS["context_clarity"] * (1.0 - f.context_clarity),
        "false_positive_risk": FACTOR_WEIGHTS["false_positive_risk"] * f.false_positive_risk,
    }
    # max() keeps the first key on ties
    return max(shortfalls, key=shortfalls.get)


def to_explainable_violation(sv: ScoredViolation) -> ExplainableViolation:
    v = sv.violation
    return ExplainableViolation(
        rule_id=v.id,
        impact=v.known_impact.value if v.known_impact else None,
        help=v.help,
        help_url=v.help_url,
        targets=[t for n in v.nodes for t in n.target],
        confidence=sv.confidence,
        severity=sv.severity.value,
        flagged_for_review=sv.flagged_for_review,
        top_factor=_top_factor(sv),
        reasoning=sv.reasoning,
    )


def explain_violations(scored: Sequence[ScoredViolation]) -> List[ExplainableViolation]:
    """Batch helper, highest confidence first."""
    return [to_explainable_violation(sv) for sv in sort_by_confidence(scored)]


def build_report(scored: Sequence[ScoredViolation], top_n: int = DEFAULT_TOP_N) -> Dict[str, Any]:
    return {
        "violations": [ev.to_dict() for ev in explain_violations(scored)],
        "summary": summarize(scored, top_n=top_n).to_dict(),
    }
