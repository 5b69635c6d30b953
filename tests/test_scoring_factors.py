from a11yscore.controls.false_positives import (
    calculate_false_positive_risk,
    match_false_positive_patterns,
)
from a11yscore.models.violation import RawViolation, ViolationNode
from a11yscore.scoring.factors import (
    NO_CONTEXT_CLARITY,
    calculate_context_clarity,
    calculate_detection_reliability,
)
from a11yscore.scoring.severity import DEFAULT_IMPACT_WEIGHT, impact_to_weight


def _violation(rule_id="button-name", impact="serious", nodes=(), tags=()):
    return RawViolation(id=rule_id, impact=impact, tags=frozenset(tags), nodes=tuple(nodes))


def test_impact_weights():
    reasoning = []
    assert impact_to_weight(_violation(impact="critical"), reasoning) == 0.95
    assert impact_to_weight(_violation(impact="minor"), reasoning) == 0.60
    assert impact_to_weight(_violation(impact="Serious"), reasoning) == 0.85


def test_unknown_impact_uses_default_and_says_so():
    reasoning = []
    assert impact_to_weight(_violation(impact="catastrophic"), reasoning) == DEFAULT_IMPACT_WEIGHT
    assert impact_to_weight(_violation(impact=None), reasoning) == DEFAULT_IMPACT_WEIGHT
    assert impact_to_weight(_violation(impact=7), reasoning) == DEFAULT_IMPACT_WEIGHT
    assert "Unknown impact 'catastrophic'" in reasoning[0]
    assert "Impact missing" in reasoning[1]


def test_detection_reliability_ordering():
    reliable = calculate_detection_reliability(_violation("image-alt"), [])
    wcag = calculate_detection_reliability(_violation("button-name", tags=["wcag2a"]), [])
    neutral = calculate_detection_reliability(_violation("button-name"), [])
    flaky = calculate_detection_reliability(_violation("region"), [])

    assert reliable > wcag > neutral > flaky


def test_context_clarity_floor_without_nodes():
    reasoning = []
    assert calculate_context_clarity(_violation(nodes=()), reasoning) == NO_CONTEXT_CLARITY
    assert "No context found" in reasoning[0]


def test_context_clarity_counts_each_property():
    bare = ViolationNode(html="", target=(), failure_summary=None)
    full = ViolationNode(html="<a></a>", target=("a",), failure_summary="Fix it")

    assert calculate_context_clarity(_violation(nodes=[bare]), []) == 0.25
    assert calculate_context_clarity(_violation(nodes=[full]), []) == 1.0
    # "every node" means one incomplete node withholds the increment
    assert calculate_context_clarity(_violation(nodes=[full, bare]), []) == 0.25


def test_false_positive_patterns_detected():
    node = ViolationNode(
        html='<div style="display: none" role="presentation"><span aria-label=""></span></div>',
        target=("div",),
    )
    matched = match_false_positive_patterns(_violation(nodes=[node]))

    assert "DISPLAY_NONE" in matched
    assert "PRESENTATION_ROLE" in matched
    assert "EMPTY_ARIA_LABEL" in matched


def test_false_positive_patterns_read_failure_summary():
    node = ViolationNode(html="<p>x</p>", target=("p",), failure_summary="Parent has visibility:hidden")
    assert match_false_positive_patterns(_violation(nodes=[node])) == ["VISIBILITY_HIDDEN"]


def test_false_positive_risk_components():
    clean = ViolationNode(html="<p>x</p>", target=("p",))
    hidden = ViolationNode(html='<p aria-hidden="true">x</p>', target=("p",))

    assert calculate_false_positive_risk(_violation(nodes=[clean]), []) == 0.1
    assert calculate_false_positive_risk(_violation(nodes=[hidden]), []) == 0.25
    assert calculate_false_positive_risk(_violation("region", nodes=[clean]), []) == 0.4
    # Systemic discount from three nodes on
    assert calculate_false_positive_risk(_violation(nodes=[clean] * 3), []) == 0.05


def test_false_positive_risk_is_bounded_on_large_input():
    huge = ViolationNode(html="<div>" + "a" * 100_000 + "</div>", target=("div",))
    risk = calculate_false_positive_risk(_violation(nodes=[huge]), [])
    assert 0.0 <= risk <= 1.0
