"""
False Positive Control
----------------------
Markup-aware estimate of how likely a finding is a scanner artifact.
"""
from typing import List

from a11yscore.models.violation import RawViolation
from a11yscore.rules.catalog import FLAKY_RULES
from a11yscore.rules.patterns import FALSE_POSITIVE_PATTERNS, MAX_PATTERN_INPUT

BASE_RISK = 0.10
PATTERN_RISK = 0.15
FLAKY_RISK = 0.30
SYSTEMIC_DISCOUNT = 0.05
SYSTEMIC_NODE_COUNT = 3


def match_false_positive_patterns(violation: RawViolation) -> List[str]:
    """Names of the false-positive patterns found in the node markup and summaries."""
    parts = []
    for node in violation.nodes:
        parts.append(node.html)
        if isinstance(node.failure_summary, str):
            parts.append(node.failure_summary)

    text = "\n".join(parts)[:MAX_PATTERN_INPUT]
    if not text:
        return []

    return [name for name, pattern in FALSE_POSITIVE_PATTERNS.items() if pattern.search(text)]


def calculate_false_positive_risk(violation: RawViolation, reasoning: List[str]) -> float:
    risk = BASE_RISK

    matched = match_false_positive_patterns(violation)
    if matched:
        risk += PATTERN_RISK
        reasoning.append(f"False-positive pattern ({', '.join(matched)}) → risk +{PATTERN_RISK}")

    if violation.id in FLAKY_RULES:
        risk += FLAKY_RISK
        reasoning.append(f"Flaky rule risk → +{FLAKY_RISK}")

    # Systemic patterns are less likely to be one-off artifacts
    if len(violation.nodes) >= SYSTEMIC_NODE_COUNT:
        risk -= SYSTEMIC_DISCOUNT
        reasoning.append(
            f"Systemic across {len(violation.nodes)} nodes → risk -{SYSTEMIC_DISCOUNT}"
        )

    return round(max(0.0, min(1.0, risk)), 2)
