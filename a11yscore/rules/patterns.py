"""
Markup patterns that commonly accompany scanner false positives.

Every pattern is linear: no nested quantifiers, bounded repetition only.
Input is also truncated to MAX_PATTERN_INPUT before matching.
"""
import re

MAX_PATTERN_INPUT = 20_000

FALSE_POSITIVE_PATTERNS = {
    "EMPTY_ARIA_LABEL": re.compile(
        r"""aria-label\s{0,5}=\s{0,5}(?:""|'')""",
        re.IGNORECASE,
    ),
    "DISPLAY_NONE": re.compile(r"display\s{0,5}:\s{0,5}none", re.IGNORECASE),
    "VISIBILITY_HIDDEN": re.compile(r"visibility\s{0,5}:\s{0,5}hidden", re.IGNORECASE),
    "PRESENTATION_ROLE": re.compile(
        r"""role\s{0,5}=\s{0,5}["']?(?:presentation|none)\b""",
        re.IGNORECASE,
    ),
    "ARIA_HIDDEN": re.compile(
        r"""aria-hidden\s{0,5}=\s{0,5}["']?true\b""",
        re.IGNORECASE,
    ),
}
