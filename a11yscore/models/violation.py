from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Mapping, Optional, Tuple


class ViolationImpact(str, Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    SERIOUS = "serious"
    CRITICAL = "critical"


class MalformedViolationError(ValueError):
    """Raised when a scanner record cannot be read as a violation at all."""


@dataclass(frozen=True)
class ViolationNode:
    html: str = ""
    target: Tuple[str, ...] = ()
    failure_summary: Optional[str] = None
    # Scanner fields present but unusable, read as missing
    dropped_fields: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ViolationNode":
        if not isinstance(raw, Mapping):
            raise MalformedViolationError(
                f"Node must be an object, got {type(raw).__name__}"
            )

        target = raw.get("target") or ()
        if isinstance(target, str):
            target = (target,)
        elif not isinstance(target, (list, tuple)):
            raise MalformedViolationError("Node target must be a list of selectors")

        failure_summary = raw.get("failureSummary")
        dropped = ()
        if failure_summary is not None and not isinstance(failure_summary, str):
            failure_summary = None
            dropped = ("failureSummary",)

        return cls(
            html=str(raw.get("html") or ""),
            target=tuple(str(t) for t in target),
            failure_summary=failure_summary,
            dropped_fields=dropped,
        )


@dataclass(frozen=True)
class RawViolation:
    """
    One rule violation as reported by the scanner.

    `impact` is kept verbatim (it may be missing or not one of the known
    values); the scoring engine decides how to treat it.
    """
    id: str
    impact: Optional[str]
    tags: FrozenSet[str] = frozenset()
    nodes: Tuple[ViolationNode, ...] = ()
    description: str = ""
    help: str = ""
    help_url: str = ""

    @property
    def known_impact(self) -> Optional[ViolationImpact]:
        if isinstance(self.impact, ViolationImpact):
            return self.impact
        if not isinstance(self.impact, str):
            return None
        try:
            return ViolationImpact(self.impact.strip().lower())
        except ValueError:
            return None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "RawViolation":
        """
        Parse one axe-core style violation object.
        """
        if not isinstance(raw, Mapping):
            raise MalformedViolationError(
                f"Violation must be an object, got {type(raw).__name__}"
            )

        rule_id = raw.get("id")
        if not isinstance(rule_id, str) or not rule_id.strip():
            raise MalformedViolationError("Violation is missing a rule id")

        nodes = raw.get("nodes", [])
        if nodes is None:
            nodes = []
        if not isinstance(nodes, (list, tuple)):
            raise MalformedViolationError(f"Violation '{rule_id}' nodes must be a list")

        tags = raw.get("tags") or []
        if isinstance(tags, str):
            tags = [tags]
        elif not isinstance(tags, (list, tuple, set, frozenset)):
            raise MalformedViolationError(f"Violation '{rule_id}' tags must be a list")

        return cls(
            id=rule_id.strip(),
            impact=raw.get("impact"),
            tags=frozenset(str(t) for t in tags),
            nodes=tuple(ViolationNode.from_dict(n) for n in nodes),
            description=str(raw.get("description") or ""),
            help=str(raw.get("help") or ""),
            help_url=str(raw.get("helpUrl") or ""),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "impact": self.impact if self.known_impact is None else self.known_impact.value,
            "tags": sorted(self.tags),
            "description": self.description,
            "help": self.help,
            "helpUrl": self.help_url,
            "nodes": [
                {
                    "html": n.html,
                    "target": list(n.target),
                    "failureSummary": n.failure_summary,
                }
                for n in self.nodes
            ],
        }
