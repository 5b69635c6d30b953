from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from a11yscore.models.element_context import ElementContext
from a11yscore.models.violation import RawViolation


class SeverityLevel(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    FALSE_POSITIVE = "false_positive"


@dataclass(frozen=True)
class ScoringFactors:
    """
    Sub-scores that fed the final confidence, kept for audit.

    blend:
        "static"     -> detection_reliability was used
        "contextual" -> contextual_score replaced detection_reliability
    """
    severity_weight: float
    detection_reliability: float
    context_clarity: float
    false_positive_risk: float
    contextual_score: Optional[float] = None
    blend: str = "static"

    def to_dict(self) -> dict:
        return {
            "severityWeight": self.severity_weight,
            "detectionReliability": self.detection_reliability,
            "contextClarity": self.context_clarity,
            "falsePositiveRisk": self.false_positive_risk,
            "contextualScore": self.contextual_score,
            "blend": self.blend,
        }


@dataclass(frozen=True)
class ScoredViolation:
    """
    Terminal scoring artifact. Re-scoring produces a new instance.
    """
    violation: RawViolation
    confidence: float
    severity: SeverityLevel
    flagged_for_review: bool
    factors: ScoringFactors
    reasoning: Tuple[str, ...]
    context: Optional[ElementContext] = None

    @property
    def rule_id(self) -> str:
        return self.violation.id

    def to_dict(self) -> dict:
        payload = self.violation.to_dict()
        payload.update({
            "confidence": self.confidence,
            "severity": self.severity.value,
            "flaggedForReview": self.flagged_for_review,
            "factors": self.factors.to_dict(),
            "reasoning": list(self.reasoning),
            "evidence": {
                "screenshotPath": self.context.screenshot_path if self.context else None,
                "context": self.context.to_dict() if self.context else None,
            },
        })
        return payload
