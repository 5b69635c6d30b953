import hashlib
import json

from a11yscore.controls import false_positives
from a11yscore.rules.catalog import FLAKY_RULES, RELIABLE_RULES, SUBJECTIVE_RULES
from a11yscore.rules.patterns import FALSE_POSITIVE_PATTERNS
from a11yscore.scoring import context, factors, thresholds
from a11yscore.scoring.severity import DEFAULT_IMPACT_WEIGHT, IMPACT_WEIGHTS


def compute_scoring_config_hash() -> str:
    """
    Fingerprint of everything that can change a score.
    Stored with each record so historical comparisons can tell
    a real change from a re-tuned engine.
    """
    relevant = {
        "factor_weights": thresholds.FACTOR_WEIGHTS,
        "thresholds": {
            "review": thresholds.REVIEW_THRESHOLD,
            "critical_review": thresholds.CRITICAL_REVIEW_THRESHOLD,
            "false_positive_max": thresholds.FALSE_POSITIVE_MAX,
            "low_max": thresholds.LOW_CONFIDENCE_MAX,
            "medium_max": thresholds.MEDIUM_CONFIDENCE_MAX,
            "fallback": thresholds.FALLBACK_CONFIDENCE,
        },
        "impact_weights": {k.value: v for k, v in IMPACT_WEIGHTS.items()},
        "default_impact_weight": DEFAULT_IMPACT_WEIGHT,
        "detection_reliability": factors.DETECTION_RELIABILITY,
        "neutral_reliability": factors.NEUTRAL_RELIABILITY,
        "clarity": [factors.CLARITY_INCREMENT, factors.NO_CONTEXT_CLARITY],
        "false_positive_risk": [
            false_positives.BASE_RISK,
            false_positives.PATTERN_RISK,
            false_positives.FLAKY_RISK,
            false_positives.SYSTEMIC_DISCOUNT,
            false_positives.SYSTEMIC_NODE_COUNT,
        ],
        "context": [context.CONTEXT_BASELINE, context.CONTEXT_MIN, context.CONTEXT_MAX],
        "reliable_rules": sorted(RELIABLE_RULES),
        "flaky_rules": sorted(FLAKY_RULES),
        "subjective_rules": sorted(SUBJECTIVE_RULES),
        "patterns": {name: p.pattern for name, p in FALSE_POSITIVE_PATTERNS.items()},
    }

    payload = json.dumps(relevant, sort_keys=True).encode("utf-8")
    return hashlib.sha256(payload).hexdigest()
