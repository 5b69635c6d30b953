import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("a11yscore.config")

DEFAULT_MAX_CONCURRENCY = 5
DEFAULT_CONTEXT_TIMEOUT_SECONDS = 10.0


def get_max_concurrency() -> int:
    """Simultaneous element-context lookups allowed per batch."""
    raw = os.getenv("A11YSCORE_MAX_CONCURRENCY")
    if raw is None:
        return DEFAULT_MAX_CONCURRENCY
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid A11YSCORE_MAX_CONCURRENCY={raw!r}; using {DEFAULT_MAX_CONCURRENCY}")
        return DEFAULT_MAX_CONCURRENCY
    return value if value > 0 else DEFAULT_MAX_CONCURRENCY


def get_context_timeout() -> float:
    raw = os.getenv("A11YSCORE_CONTEXT_TIMEOUT_SECONDS")
    if raw is None:
        return DEFAULT_CONTEXT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        logger.warning(
            f"Invalid A11YSCORE_CONTEXT_TIMEOUT_SECONDS={raw!r}; using {DEFAULT_CONTEXT_TIMEOUT_SECONDS}"
        )
        return DEFAULT_CONTEXT_TIMEOUT_SECONDS
    return value if value > 0 else DEFAULT_CONTEXT_TIMEOUT_SECONDS


def get_review_webhook_url() -> Optional[str]:
    return os.getenv("A11YSCORE_REVIEW_WEBHOOK_URL") or None


def get_telemetry_connection_string() -> Optional[str]:
    return os.getenv("APPLICATIONINSIGHTS_CONNECTION_STRING") or None
