# Deterministic scoring policy. Confidence is on a 0.0 - 1.0 scale.
# Changing any value here changes compute_scoring_config_hash().

# Flagging
REVIEW_THRESHOLD = 0.85
CRITICAL_REVIEW_THRESHOLD = 0.95

# Severity bands
FALSE_POSITIVE_MAX = 0.60
LOW_CONFIDENCE_MAX = 0.75
MEDIUM_CONFIDENCE_MAX = 0.85

# Factor weights. The contextual score takes the detection reliability slot.
FACTOR_WEIGHTS = {
    "severity_weight": 0.30,
    "detection_reliability": 0.25,
    "context_clarity": 0.20,
    "false_positive_risk": 0.25,
}

assert round(sum(FACTOR_WEIGHTS.values()), 10) == 1.0, "Factor weights must sum to 1.0"

# Used when scoring a single item fails inside a batch
FALLBACK_CONFIDENCE = 0.50

# Interpretation:
# < 0.60        -> false_positive
# 0.60 - 0.75   -> low
# 0.75 - 0.85   -> medium
# >= 0.85       -> derived from impact
