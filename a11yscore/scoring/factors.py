from typing import List

from a11yscore.models.violation import RawViolation
from a11yscore.rules.catalog import (
    DETECTION_FLAKY,
    DETECTION_RELIABLE,
    DETECTION_WCAG_TAGGED,
    classify_detection,
)

DETECTION_RELIABILITY = {
    DETECTION_RELIABLE: 0.95,
    DETECTION_FLAKY: 0.55,
    DETECTION_WCAG_TAGGED: 0.80,
}
NEUTRAL_RELIABILITY = 0.70

CLARITY_INCREMENT = 0.25
NO_CONTEXT_CLARITY = 0.20


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def calculate_detection_reliability(violation: RawViolation, reasoning: List[str]) -> float:
    category = classify_detection(violation.id, violation.tags)
    score = DETECTION_RELIABILITY.get(category, NEUTRAL_RELIABILITY)

    if category == DETECTION_RELIABLE:
        reasoning.append(f"Reliable rule: {violation.id} → {score}")
    elif category == DETECTION_FLAKY:
        reasoning.append(f"Flaky rule: {violation.id} → {score}")
    elif category == DETECTION_WCAG_TAGGED:
        reasoning.append(f"WCAG-tagged rule: {violation.id} → {score}")
    else:
        reasoning.append(f"Unlisted rule: {violation.id} → neutral {score}")

    return _clamp(score)


def calculate_context_clarity(violation: RawViolation, reasoning: List[str]) -> float:
    """
    How much the scanner told us about the affected elements.
    Each fully present property adds a fixed increment.
    """
    nodes = violation.nodes
    if not nodes:
        reasoning.append(f"No context found (no affected nodes) → floor {NO_CONTEXT_CLARITY}")
        return NO_CONTEXT_CLARITY

    dropped = sorted({f for n in nodes for f in n.dropped_fields})
    if dropped:
        reasoning.append(f"Unreadable node field ({', '.join(dropped)}) → treated as missing")

    score = CLARITY_INCREMENT
    present = ["nodes"]

    if all(isinstance(n.failure_summary, str) and n.failure_summary.strip() for n in nodes):
        score += CLARITY_INCREMENT
        present.append("failureSummary")
    if all(any(t.strip() for t in n.target) for n in nodes):
        score += CLARITY_INCREMENT
        present.append("target")
    if all(n.html.strip() for n in nodes):
        score += CLARITY_INCREMENT
        present.append("html")

    score = round(_clamp(score), 2)
    reasoning.append(f"Context clarity ({', '.join(present)}) → {score}")
    return score
