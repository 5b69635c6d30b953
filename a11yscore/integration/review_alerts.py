import logging
from typing import Optional

import requests

from a11yscore.config import get_review_webhook_url
from a11yscore.models.aggregate_summary import AggregateSummary

logger = logging.getLogger("a11yscore.integration")


def trigger_review_alert(summary: AggregateSummary, audit_id: str = "Unknown") -> Optional[int]:
    """
    Notify the manual-review queue when a batch has flagged violations.

    Returns the HTTP status code, or None when nothing was sent.
    Failures are logged, never raised: alerting must not break scoring.
    """
    if summary.flagged_for_review == 0:
        return None

    webhook_url = get_review_webhook_url()
    if not webhook_url:
        logger.warning("Review alert triggered but A11YSCORE_REVIEW_WEBHOOK_URL is not set.")
        return None

    # Counts only: no markup or selectors leave the process
    payload = {
        "alert_level": "MANUAL_REVIEW",
        "audit_id": audit_id,
        "total": summary.total,
        "flagged_for_review": summary.flagged_for_review,
        "average_confidence": summary.average_confidence,
        "by_severity": dict(summary.by_severity),
        "top_rules": [r.rule for r in summary.top_rules],
    }

    try:
        response = requests.post(
            webhook_url,
            json=payload,
            timeout=2.0,
            headers={"Content-Type": "application/json"}
        )
        response.raise_for_status()
        logger.info(f"Review alert sent for audit {audit_id}. Status: {response.status_code}")
        return response.status_code

    except requests.exceptions.RequestException as e:
        logger.error(f"Failed to send review alert: {e}")
        return None
