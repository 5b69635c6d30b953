"""
Review List Control
-------------------
Rules whose findings always need a human, regardless of confidence.
"""
from a11yscore.rules.catalog import SUBJECTIVE_RULES, matches_rule_pattern


def is_subjective_rule(rule_id: str) -> bool:
    if not rule_id:
        return False

    for pattern in SUBJECTIVE_RULES:
        if matches_rule_pattern(rule_id, pattern):
            return True
    return False
