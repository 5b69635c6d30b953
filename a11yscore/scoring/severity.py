# a11yscore/scoring/severity.py

from typing import List

from a11yscore.models.violation import RawViolation, ViolationImpact

"""
Centralized impact -> severity weight mapping.

This file must NOT import from any other scoring modules.
"""

IMPACT_WEIGHTS = {
    ViolationImpact.MINOR: 0.60,
    ViolationImpact.MODERATE: 0.75,
    ViolationImpact.SERIOUS: 0.85,
    ViolationImpact.CRITICAL: 0.95,
}

DEFAULT_IMPACT_WEIGHT = 0.70


def impact_to_weight(violation: RawViolation, reasoning: List[str]) -> float:
    """
    Convert the scanner's impact into a severity weight.
    Missing or unknown impact never raises; the substitution is recorded.
    """
    impact = violation.known_impact

    if impact is None:
        if violation.impact is None:
            reasoning.append(f"Impact missing → default {DEFAULT_IMPACT_WEIGHT}")
        else:
            reasoning.append(
                f"Unknown impact {violation.impact!r} → default {DEFAULT_IMPACT_WEIGHT}"
            )
        return DEFAULT_IMPACT_WEIGHT

    weight = IMPACT_WEIGHTS[impact]
    reasoning.append(f"Base impact: {impact.value} → {weight}")
    return weight
