from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class RuleFrequency:
    rule: str
    count: int


@dataclass(frozen=True)
class AggregateSummary:
    """
    Batch statistics over scored violations. Plain value object.
    """
    total: int
    flagged_for_review: int
    not_flagged: int
    flagged_ratio: float
    average_confidence: float
    by_severity: Dict[str, int] = field(default_factory=dict)
    top_rules: List[RuleFrequency] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "flaggedForReview": self.flagged_for_review,
            "notFlagged": self.not_flagged,
            "flaggedRatio": self.flagged_ratio,
            "averageConfidence": self.average_confidence,
            "bySeverity": dict(self.by_severity),
            "topRules": [{"rule": r.rule, "count": r.count} for r in self.top_rules],
        }
