# a11yscore/scoring/engine.py

import logging
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional, Union

from a11yscore.controls.false_positives import calculate_false_positive_risk
from a11yscore.controls.review_list import is_subjective_rule
from a11yscore.models.element_context import ElementContext
from a11yscore.models.scored_violation import ScoredViolation, ScoringFactors, SeverityLevel
from a11yscore.models.violation import RawViolation, ViolationImpact
from a11yscore.scoring.context import apply_contextual_rules
from a11yscore.scoring.factors import calculate_context_clarity, calculate_detection_reliability
from a11yscore.scoring.severity import impact_to_weight
from a11yscore.scoring.thresholds import (
    CRITICAL_REVIEW_THRESHOLD,
    FACTOR_WEIGHTS,
    FALLBACK_CONFIDENCE,
    FALSE_POSITIVE_MAX,
    LOW_CONFIDENCE_MAX,
    MEDIUM_CONFIDENCE_MAX,
    REVIEW_THRESHOLD,
)

logger = logging.getLogger("a11yscore.scoring")

ViolationInput = Union[RawViolation, Mapping]

IMPACT_SEVERITY = {
    ViolationImpact.CRITICAL: SeverityLevel.CRITICAL,
    ViolationImpact.SERIOUS: SeverityLevel.HIGH,
    ViolationImpact.MODERATE: SeverityLevel.MEDIUM,
    ViolationImpact.MINOR: SeverityLevel.LOW,
}


def score_violation(
    violation: RawViolation,
    context: Optional[ElementContext] = None,
) -> ScoredViolation:
    """
    Score a single violation. Pure: same inputs, same ScoredViolation.

    Combination:
        0.30 * severity_weight
      + 0.25 * detection_reliability   (or contextual_score when context is given)
      + 0.20 * context_clarity
      + 0.25 * (1 - false_positive_risk)
    """
    reasoning: List[str] = []

    # 1. Severity weight
    severity_weight = impact_to_weight(violation, reasoning)

    # 2. Detection reliability, superseded by the contextual pass when available
    if context is None:
        detection_reliability = calculate_detection_reliability(violation, reasoning)
        contextual_score = None
        reliability_term = detection_reliability
    else:
        detection_reliability = calculate_detection_reliability(violation, [])
        contextual_score = apply_contextual_rules(violation, context, reasoning)
        reliability_term = contextual_score

    # 3. Context clarity
    context_clarity = calculate_context_clarity(violation, reasoning)

    # 4. False-positive risk
    false_positive_risk = calculate_false_positive_risk(violation, reasoning)

    weighted = (
        FACTOR_WEIGHTS["severity_weight"] * severity_weight
        + FACTOR_WEIGHTS["detection_reliability"] * reliability_term
        + FACTOR_WEIGHTS["context_clarity"] * context_clarity
        + FACTOR_WEIGHTS["false_positive_risk"] * (1.0 - false_positive_risk)
    )
    confidence = round(max(0.0, min(1.0, weighted)), 2)
    reasoning.append(f"Weighted confidence → {confidence}")

    flagged = should_flag_for_review(violation, confidence, reasoning)
    severity = map_severity(violation, confidence)

    return ScoredViolation(
        violation=violation,
        confidence=confidence,
        severity=severity,
        flagged_for_review=flagged,
        factors=ScoringFactors(
            severity_weight=severity_weight,
            detection_reliability=detection_reliability,
            context_clarity=context_clarity,
            false_positive_risk=false_positive_risk,
            contextual_score=contextual_score,
            blend="static" if context is None else "contextual",
        ),
        reasoning=tuple(reasoning),
        context=context,
    )


def should_flag_for_review(
    violation: RawViolation,
    confidence: float,
    reasoning: List[str],
) -> bool:
    """
    Review rules in priority order. Every matching rule is recorded,
    the first match already decides the outcome.
    """
    matched = False

    if confidence < REVIEW_THRESHOLD:
        reasoning.append(f"Confidence {confidence} < {REVIEW_THRESHOLD} → Flag for review")
        matched = True

    if violation.known_impact == ViolationImpact.CRITICAL and confidence < CRITICAL_REVIEW_THRESHOLD:
        reasoning.append(
            f"Critical impact with confidence {confidence} < {CRITICAL_REVIEW_THRESHOLD} → Flag for review"
        )
        matched = True

    if is_subjective_rule(violation.id):
        reasoning.append(f"Subjective rule: {violation.id} → Flag for review")
        matched = True

    return matched


def map_severity(violation: RawViolation, confidence: float) -> SeverityLevel:
    """
    Low confidence caps the displayed severity regardless of impact.
    """
    if confidence < FALSE_POSITIVE_MAX:
        return SeverityLevel.FALSE_POSITIVE
    if confidence < LOW_CONFIDENCE_MAX:
        return SeverityLevel.LOW
    if confidence < MEDIUM_CONFIDENCE_MAX:
        return SeverityLevel.MEDIUM

    return IMPACT_SEVERITY.get(violation.known_impact, SeverityLevel.MEDIUM)


def _placeholder_violation(item: Any) -> RawViolation:
    """Best-effort identity for an item that could not be parsed."""
    if isinstance(item, RawViolation):
        return item

    rule_id = "unknown"
    impact = None
    if isinstance(item, Mapping):
        if isinstance(item.get("id"), str) and item["id"].strip():
            rule_id = item["id"].strip()
        if isinstance(item.get("impact"), str):
            impact = item["impact"]
    return RawViolation(id=rule_id, impact=impact)


def fallback_scored_violation(item: Any, error: Exception) -> ScoredViolation:
    """
    Conservative stand-in for an item that failed to score:
    mid confidence, always flagged for review.
    """
    return ScoredViolation(
        violation=_placeholder_violation(item),
        confidence=FALLBACK_CONFIDENCE,
        severity=SeverityLevel.MEDIUM,
        flagged_for_review=True,
        factors=ScoringFactors(
            severity_weight=FALLBACK_CONFIDENCE,
            detection_reliability=FALLBACK_CONFIDENCE,
            context_clarity=FALLBACK_CONFIDENCE,
            false_positive_risk=FALLBACK_CONFIDENCE,
        ),
        reasoning=(
            f"Error during scoring ({type(error).__name__}: {error}) → default {FALLBACK_CONFIDENCE}",
            "Scoring failed → Flag for review",
        ),
    )


def ensure_sequence(value: Any, name: str) -> None:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise TypeError(f"{name} must be a sequence, got {type(value).__name__}")


def score_violations(
    violations: Sequence[ViolationInput],
    contexts: Optional[Sequence[Optional[ElementContext]]] = None,
) -> List[ScoredViolation]:
    """
    Score a batch. One bad record never aborts the batch: it is replaced
    by a fallback ScoredViolation.

    contexts, when given, is parallel to violations (None = no context).
    """
    ensure_sequence(violations, "violations")
    if contexts is not None:
        ensure_sequence(contexts, "contexts")
        if len(contexts) != len(violations):
            raise ValueError(
                f"contexts length {len(contexts)} does not match violations length {len(violations)}"
            )

    scored: List[ScoredViolation] = []

    for index, item in enumerate(violations):
        try:
            raw = item if isinstance(item, RawViolation) else RawViolation.from_dict(item)
            context = contexts[index] if contexts is not None else None
            scored.append(score_violation(raw, context))
        except Exception as e:
            logger.warning(f"Failed to score violation at index {index}: {e}")
            scored.append(fallback_scored_violation(item, e))

    return scored
