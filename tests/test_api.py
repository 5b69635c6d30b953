from unittest.mock import patch

from fastapi.testclient import TestClient

from a11yscore.api.main import app
from a11yscore.audit.system_config import compute_scoring_config_hash

from fixtures.axe_violations import COLOR_CONTRAST_SERIOUS, IMAGE_ALT_CRITICAL, REGION_MINOR

client = TestClient(app)


def test_health_check():
    """Verify the API is alive."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "online"


def test_score_endpoint():
    """Score a mixed batch, including one record that cannot be parsed."""
    payload = {"violations": [IMAGE_ALT_CRITICAL, REGION_MINOR, {"impact": "serious"}]}

    response = client.post("/score", json=payload)
    assert response.status_code == 200

    data = response.json()
    assert len(data["violations"]) == 3
    assert data["violations"][0]["id"] == "image-alt"
    assert data["violations"][2]["confidence"] == 0.5
    assert data["violations"][2]["flaggedForReview"] is True
    assert data["summary"]["total"] == 3
    assert data["summary"]["flaggedForReview"] == 2
    assert data["scoring_config_hash"] == compute_scoring_config_hash()


def test_score_endpoint_with_contexts():
    payload = {
        "violations": [COLOR_CONTRAST_SERIOUS],
        "contexts": {
            ".modal .muted": {"isInViewport": True, "isInModal": True, "tagName": "span"},
        },
    }

    response = client.post("/score", json=payload)
    assert response.status_code == 200

    scored = response.json()["violations"][0]
    assert scored["factors"]["blend"] == "contextual"
    assert scored["evidence"]["context"]["isInModal"] is True


def test_score_endpoint_notifies_reviewers():
    payload = {"violations": [REGION_MINOR], "audit_id": "audit-42", "notify_reviewers": True}

    with patch("a11yscore.api.main.trigger_review_alert") as mock_alert:
        response = client.post("/score", json=payload)

    assert response.status_code == 200
    assert mock_alert.called
    assert mock_alert.call_args[1]["audit_id"] == "audit-42"


def test_score_endpoint_rejects_non_list():
    response = client.post("/score", json={"violations": "image-alt"})
    assert response.status_code == 422


def test_engine_failure_is_a_500():
    with patch("a11yscore.api.main.summarize", side_effect=RuntimeError("boom")):
        response = client.post("/score", json={"violations": [REGION_MINOR]})

    assert response.status_code == 500
