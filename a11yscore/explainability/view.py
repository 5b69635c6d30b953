from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class ExplainableViolation:
    """
    Read-only projection for dashboards and CLIs.
    No logic. No mutation. No inference.
    """

    rule_id: str
    impact: Optional[str]
    help: str
    help_url: str
    targets: List[str]

    confidence: float
    severity: str
    flagged_for_review: bool

    top_factor: str
    reasoning: Tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "id": self.rule_id,
            "impact": self.impact,
            "help": self.help,
            "helpUrl": self.help_url,
            "targets": list(self.targets),
            "confidence": self.confidence,
            "severity": self.severity,
            "flaggedForReview": self.flagged_for_review,
            "topFactor": self.top_factor,
            "reasoning": list(self.reasoning),
        }
