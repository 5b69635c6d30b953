import logging
import time
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from a11yscore.audit.system_config import compute_scoring_config_hash
from a11yscore.context.provider import StaticContextProvider
from a11yscore.context.resolver import score_violations_async
from a11yscore.integration.review_alerts import trigger_review_alert
from a11yscore.models.element_context import ElementContext
from a11yscore.scoring.aggregator import summarize
from a11yscore.telemetry import emit_exception_telemetry, emit_scoring_telemetry, init_telemetry

# --- 1. REQUEST LOGGING ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
api_logger = logging.getLogger("a11yscore.api")

tags_metadata = [
    {
        "name": "Scoring",
        "description": "Scores raw scanner violations: confidence, severity and review flag.",
    },
    {
        "name": "System",
        "description": "Health checks and operational metadata.",
    },
]

app = FastAPI(
    title="a11yscore",
    description="""
    **Confidence scoring** for automated accessibility-scanner findings.

    * **Scoring:** severity weight, detection reliability, context clarity, false-positive risk.
    * **Triage:** manual-review flag with a full reasoning trail.
    * **Summary:** batch statistics for reporting.
    """,
    version="1.0.0",
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc"
)

init_telemetry()


@app.middleware("http")
async def request_log_middleware(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    client = request.client.host if request.client else "unknown"
    api_logger.info(
        f"METHOD={request.method} PATH={request.url.path} "
        f"STATUS={response.status_code} CLIENT={client} "
        f"DURATION={process_time:.4f}s"
    )
    return response


# --- DATA MODELS ---
class ContextModel(BaseModel):
    isInViewport: bool = False
    isHidden: bool = False
    isInModal: bool = False
    hasComplexDescendants: bool = False
    tagName: str = ""
    ariaAttributes: Dict[str, str] = {}
    screenshotPath: Optional[str] = None


class ScoreRequest(BaseModel):
    violations: List[Any]
    contexts: Dict[str, ContextModel] = {}
    audit_id: Optional[str] = None
    notify_reviewers: bool = False


class ScoreResponse(BaseModel):
    violations: List[Dict[str, Any]]
    summary: Dict[str, Any]
    scoring_config_hash: str


def _context_path(scored) -> str:
    blends = {sv.factors.blend for sv in scored}
    if blends == {"contextual"}:
        return "contextual"
    if "contextual" in blends:
        return "mixed"
    return "static"


# --- ENDPOINTS ---

@app.post("/score", response_model=ScoreResponse, tags=["Scoring"])
async def score_batch(request: ScoreRequest):
    """
    Score a batch of scanner violations. Element contexts, when known,
    are passed keyed by selector.
    """
    try:
        provider = None
        if request.contexts:
            provider = StaticContextProvider({
                selector: ElementContext.from_dict(ctx.model_dump())
                for selector, ctx in request.contexts.items()
            })

        scored = await score_violations_async(request.violations, provider)
        summary = summarize(scored)

        emit_scoring_telemetry(
            batch_size=summary.total,
            flagged_count=summary.flagged_for_review,
            average_confidence=float(summary.average_confidence),
            context_path=_context_path(scored),
        )

        if request.notify_reviewers:
            trigger_review_alert(summary, audit_id=request.audit_id or "Unknown")

        return {
            "violations": [sv.to_dict() for sv in scored],
            "summary": summary.to_dict(),
            "scoring_config_hash": compute_scoring_config_hash(),
        }

    except Exception as e:
        api_logger.error(f"ENGINE_ERROR: {e}")
        emit_exception_telemetry(e)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/health", tags=["System"])
def health():
    return {
        "status": "online",
        "modules": ["Scoring", "Aggregator", "ContextResolver", "ReviewAlerts"]
    }
