"""
Scoring telemetry.

Counts and scores only. No markup, selectors, URLs or failure text.
"""
import logging
from typing import Literal

from opentelemetry.trace import get_current_span

from a11yscore.config import get_telemetry_connection_string

logger = logging.getLogger("a11yscore.telemetry")


def init_telemetry():
    """
    Initialize Azure Application Insights via OpenTelemetry.
    No-op when no connection string is configured (local / tests).
    """
    connection_string = get_telemetry_connection_string()

    if not connection_string:
        return

    from azure.monitor.opentelemetry import configure_azure_monitor

    configure_azure_monitor(connection_string=connection_string)


def emit_scoring_telemetry(
    batch_size: int,
    flagged_count: int,
    average_confidence: float,
    context_path: Literal["static", "contextual", "mixed"],
):
    """
    Emit a single telemetry event per scored batch. Attributes are locked.
    """
    assert isinstance(batch_size, int), "batch_size must be int"
    assert isinstance(flagged_count, int), "flagged_count must be int"
    assert isinstance(average_confidence, float), "average_confidence must be float"
    assert context_path in ("static", "contextual", "mixed"), (
        f"context_path must be one of ('static', 'contextual', 'mixed'), got {context_path}"
    )

    span = get_current_span()
    if not span:
        return

    span.add_event(
        name="a11yscore.batch_scored",
        attributes={
            "batch_size": batch_size,
            "flagged_count": flagged_count,
            "average_confidence": average_confidence,
            "context_path": context_path,
        }
    )


def scrub_exception_for_telemetry(exception: Exception) -> str:
    """Exception messages may contain markup; only the class name leaves the process."""
    return type(exception).__name__


def emit_exception_telemetry(exception: Exception):
    span = get_current_span()
    if not span:
        return

    span.add_event(
        name="a11yscore.exception",
        attributes={
            "exception_type": scrub_exception_for_telemetry(exception)
        }
    )
