from typing import List, Optional

from a11yscore.models.element_context import ElementContext
from a11yscore.models.violation import RawViolation

CONTEXT_BASELINE = 0.70
CONTEXT_MIN = 0.20
CONTEXT_MAX = 1.00


def primary_selector(violation: RawViolation) -> Optional[str]:
    """First target selector of the first node, the element context is looked up by."""
    if not violation.nodes:
        return None
    for selector in violation.nodes[0].target:
        if selector.strip():
            return selector
    return None


def apply_contextual_rules(
    violation: RawViolation,
    context: ElementContext,
    reasoning: List[str],
) -> float:
    """
    In-context score for the element. Replaces detection reliability
    in the weighted sum when available.
    """
    boost = 0.0

    if context.is_hidden:
        boost -= 0.4
        reasoning.append("Element hidden → -0.4")

    if violation.id == "color-contrast" and context.is_in_modal:
        boost -= 0.2
        reasoning.append("Color contrast in modal → -0.2")

    if context.has_complex_descendants:
        boost -= 0.15
        reasoning.append("Complex descendants → -0.15")

    if context.is_in_viewport and not context.has_complex_descendants:
        boost += 0.1
        reasoning.append("In viewport + simple → +0.1")

    if context.aria_attributes:
        boost += 0.05
        reasoning.append("ARIA attributes present → +0.05")

    score = round(max(CONTEXT_MIN, min(CONTEXT_MAX, CONTEXT_BASELINE + boost)), 2)
    reasoning.append(f"Contextual score → {score} (replaces detection reliability)")
    return score
