from typing import Any, Dict, Iterable, List, Sequence, Tuple

from a11yscore.audit.hash_utils import compute_record_hash
from a11yscore.audit.system_config import compute_scoring_config_hash
from a11yscore.models.scored_violation import ScoredViolation

RecordKey = Tuple[str, str, int]


def record_key(record: Dict[str, Any]) -> RecordKey:
    return (record["audit_id"], record["violation_id"], record["node_index"])


def build_violation_records(audit_id: str, scored: Sequence[ScoredViolation]) -> List[Dict[str, Any]]:
    """
    Flatten a scored batch into storage-ready records, one per
    (audit_id, violation id, node index). Violations without nodes
    produce a single record at index 0.

    Building records does not write anything; storage is the caller's concern.
    """
    if not audit_id or not audit_id.strip():
        raise ValueError("audit_id is required")

    config_hash = compute_scoring_config_hash()
    records: List[Dict[str, Any]] = []

    for sv in scored:
        nodes = sv.violation.nodes or (None,)
        for index, node in enumerate(nodes):
            payload = {
                "audit_id": audit_id,
                "violation_id": sv.rule_id,
                "node_index": index,
                "target": list(node.target) if node else [],
                "impact": sv.violation.impact if isinstance(sv.violation.impact, str) else None,
                "confidence": sv.confidence,
                "severity": sv.severity.value,
                "flagged_for_review": sv.flagged_for_review,
                "factors": sv.factors.to_dict(),
                "reasoning": list(sv.reasoning),
                "scoring_config_hash": config_hash,
            }
            payload["record_hash"] = compute_record_hash(payload)
            records.append(payload)

    return records


def _violation_identity(record: Dict[str, Any]) -> Tuple[str, int]:
    return (record["violation_id"], record["node_index"])


def compare_audits(
    previous: Iterable[Dict[str, Any]],
    current: Iterable[Dict[str, Any]],
) -> Dict[str, List[Tuple[str, int]]]:
    """
    Compare two audits by (violation id, node index).

    Returns new, resolved and persisting identities, each in first-seen order.
    """
    before = list(dict.fromkeys(_violation_identity(r) for r in previous))
    after = list(dict.fromkeys(_violation_identity(r) for r in current))
    before_set = set(before)
    after_set = set(after)

    return {
        "new": [k for k in after if k not in before_set],
        "resolved": [k for k in before if k not in after_set],
        "persisting": [k for k in after if k in before_set],
    }
