import pytest

from a11yscore.models.scored_violation import SeverityLevel
from a11yscore.models.violation import MalformedViolationError, RawViolation
from a11yscore.scoring.engine import score_violations
from a11yscore.scoring.thresholds import FALLBACK_CONFIDENCE

from fixtures.axe_violations import (
    BUTTON_NAME_MODERATE,
    COLOR_CONTRAST_SERIOUS,
    IMAGE_ALT_CRITICAL,
    MODAL_CONTEXT,
    NO_NODES_SERIOUS,
    REGION_MINOR,
)


def test_malformed_impact_does_not_abort_batch():
    batch = [
        IMAGE_ALT_CRITICAL,
        REGION_MINOR,
        dict(BUTTON_NAME_MODERATE, impact={"level": "very bad"}),
        COLOR_CONTRAST_SERIOUS,
        NO_NODES_SERIOUS,
    ]

    scored = score_violations(batch)

    assert len(scored) == 5
    odd = scored[2]
    assert odd.rule_id == "button-name"
    assert odd.factors.severity_weight == 0.7
    assert any("Unknown impact" in r for r in odd.reasoning)


def test_structurally_broken_item_gets_fallback():
    batch = [
        IMAGE_ALT_CRITICAL,
        {"id": "bypass", "impact": "serious", "nodes": "not-a-list"},
        "garbage",
        {"impact": "minor"},
        REGION_MINOR,
    ]

    scored = score_violations(batch)

    assert len(scored) == 5
    for fallback in scored[1:4]:
        assert fallback.confidence == FALLBACK_CONFIDENCE
        assert fallback.flagged_for_review is True
        assert fallback.severity == SeverityLevel.MEDIUM
        assert "Error during scoring" in fallback.reasoning[0]

    assert scored[1].rule_id == "bypass"
    assert scored[2].rule_id == "unknown"
    assert scored[0].confidence != FALLBACK_CONFIDENCE


def test_raw_violation_objects_and_dicts_mix():
    scored = score_violations([RawViolation.from_dict(REGION_MINOR), REGION_MINOR])
    assert scored[0] == scored[1]


def test_contexts_are_parallel_to_violations():
    scored = score_violations([COLOR_CONTRAST_SERIOUS, REGION_MINOR], [MODAL_CONTEXT, None])

    assert scored[0].factors.blend == "contextual"
    assert scored[1].factors.blend == "static"


def test_contexts_length_mismatch_is_a_programmer_error():
    with pytest.raises(ValueError):
        score_violations([REGION_MINOR], [])


@pytest.mark.parametrize("bad_input", [None, 42, "image-alt", b"bytes", {"id": "image-alt"}])
def test_non_sequence_input_raises_immediately(bad_input):
    with pytest.raises(TypeError):
        score_violations(bad_input)


def test_empty_batch():
    assert score_violations([]) == []


def test_from_dict_rejects_structural_problems():
    with pytest.raises(MalformedViolationError):
        RawViolation.from_dict({"impact": "minor"})
    with pytest.raises(MalformedViolationError):
        RawViolation.from_dict({"id": "x", "nodes": [1, 2]})
    with pytest.raises(MalformedViolationError):
        RawViolation.from_dict(["id", "x"])


def test_non_text_failure_summary_is_read_as_missing():
    raw = dict(
        BUTTON_NAME_MODERATE,
        nodes=[{"html": "<button></button>", "target": ["button"], "failureSummary": ["a", "b"]}],
    )

    violation = RawViolation.from_dict(raw)
    assert violation.nodes[0].failure_summary is None

    scored = score_violations([raw])[0]

    assert scored.confidence != FALLBACK_CONFIDENCE
    assert scored.factors.context_clarity == 0.75
    assert any("Unreadable node field (failureSummary)" in r for r in scored.reasoning)
    assert not any("Error during scoring" in r for r in scored.reasoning)


def test_non_list_tags_are_malformed():
    with pytest.raises(MalformedViolationError):
        RawViolation.from_dict(dict(REGION_MINOR, tags=5))

    scored = score_violations([dict(REGION_MINOR, tags=5)])[0]
    assert "MalformedViolationError" in scored.reasoning[0]
