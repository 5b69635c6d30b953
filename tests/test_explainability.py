from a11yscore.explainability.mapper import build_report, explain_violations, to_explainable_violation
from a11yscore.models.violation import RawViolation
from a11yscore.scoring.engine import score_violation, score_violations

from fixtures.axe_violations import (
    COLOR_CONTRAST_SERIOUS,
    IMAGE_ALT_CRITICAL,
    MODAL_CONTEXT,
    NO_NODES_SERIOUS,
    REGION_MINOR,
)


def test_explainability_projection():
    sv = score_violation(RawViolation.from_dict(IMAGE_ALT_CRITICAL))

    ev = to_explainable_violation(sv)

    assert ev.rule_id == "image-alt"
    assert ev.impact == "critical"
    assert ev.targets == ["#hero", ".logo > img", "#chart"]
    assert ev.confidence == sv.confidence
    assert ev.severity == "critical"
    assert ev.reasoning == sv.reasoning


def test_top_factor_points_at_weakest_input():
    # No nodes: clarity at its floor dominates the shortfall
    ev = to_explainable_violation(score_violation(RawViolation.from_dict(NO_NODES_SERIOUS)))
    assert ev.top_factor == "context_clarity"


def test_top_factor_names_contextual_score_when_used():
    sv = score_violation(RawViolation.from_dict(COLOR_CONTRAST_SERIOUS), MODAL_CONTEXT)

    ev = to_explainable_violation(sv)

    assert ev.top_factor in ("contextual_score", "severity_weight", "context_clarity", "false_positive_risk")
    assert ev.top_factor != "detection_reliability"


def test_explain_violations_orders_by_confidence():
    scored = score_violations([REGION_MINOR, IMAGE_ALT_CRITICAL, COLOR_CONTRAST_SERIOUS])

    ordered = [ev.rule_id for ev in explain_violations(scored)]

    assert ordered == ["image-alt", "color-contrast", "region"]


def test_build_report_shape():
    report = build_report(score_violations([REGION_MINOR, IMAGE_ALT_CRITICAL]), top_n=1)

    assert set(report) == {"violations", "summary"}
    assert report["violations"][0]["id"] == "image-alt"
    assert "topFactor" in report["violations"][0]
    assert report["summary"]["total"] == 2
    assert len(report["summary"]["topRules"]) == 1
