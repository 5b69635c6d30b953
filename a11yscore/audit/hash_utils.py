import hashlib
import json
from typing import Any, Dict

EXCLUDED_HASH_FIELDS = {
    "record_hash",
}


def compute_record_hash(payload: Dict[str, Any]) -> str:
    """
    Deterministically compute a SHA-256 hash over a record,
    excluding self-referential hash fields.
    """
    canonical_payload = {
        k: payload[k]
        for k in sorted(payload.keys())
        if k not in EXCLUDED_HASH_FIELDS
    }

    serialized = json.dumps(
        canonical_payload,
        sort_keys=True,
        separators=(",", ":")
    )

    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()
