"""
Rule Catalog
------------
Curated rule-id tables, built once at import.

RELIABLE_RULES and FLAKY_RULES must stay disjoint; detection reliability
relies on exactly one classification applying.
"""
import re
from typing import FrozenSet, Iterable

RELIABLE_RULES: FrozenSet[str] = frozenset({
    "image-alt",
    "html-lang",
    "document-title",
    "frame-title",
    "form-field-multiple-labels",
    "duplicate-id",
})

# High false-positive rate on decorative or custom markup
FLAKY_RULES: FrozenSet[str] = frozenset({
    "color-contrast",
    "aria-hidden-focus",
    "aria-allowed-attr",
    "heading-order",
    "label-content-name-mismatch",
    "scrollable-region-focusable",
    "region",
})

# Always routed to a human; trailing "*" is a prefix wildcard
SUBJECTIVE_RULES: FrozenSet[str] = frozenset({
    "color-contrast",
    "aria-*",
    "heading-order",
    "label-content-name-mismatch",
})

# axe-core tags such as wcag2a, wcag21aa, wcag143
WCAG_TAG_PATTERN = re.compile(r"^wcag\d{1,4}a{0,3}$", re.IGNORECASE)

DETECTION_RELIABLE = "reliable"
DETECTION_FLAKY = "flaky"
DETECTION_WCAG_TAGGED = "wcag-tagged"
DETECTION_NEUTRAL = "neutral"


def matches_rule_pattern(rule_id: str, pattern: str) -> bool:
    if pattern.endswith("*"):
        return rule_id.startswith(pattern[:-1])
    return rule_id == pattern


def has_wcag_tag(tags: Iterable[str]) -> bool:
    return any(WCAG_TAG_PATTERN.match(t) for t in tags)


def classify_detection(rule_id: str, tags: Iterable[str]) -> str:
    """
    Exactly one classification, checked in priority order:
    reliable, flaky, wcag-tagged, neutral.
    """
    if rule_id in RELIABLE_RULES:
        return DETECTION_RELIABLE
    if rule_id in FLAKY_RULES:
        return DETECTION_FLAKY
    if has_wcag_tag(tags):
        return DETECTION_WCAG_TAGGED
    return DETECTION_NEUTRAL
