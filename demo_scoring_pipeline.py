import asyncio
import shutil

from a11yscore.context.provider import StaticContextProvider
from a11yscore.context.resolver import score_violations_async
from a11yscore.explainability.mapper import explain_violations
from a11yscore.models.element_context import ElementContext
from a11yscore.scoring.aggregator import summarize

# --- AUDIT-STYLE UI THEME ---
class Colors:
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'

    HEADER = '\033[1m'
    MUTED = '\033[90m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    BORDER = MUTED
    LABEL = ENDC
    VALUE = BOLD

def print_separator(char="-"):
    width = shutil.get_terminal_size().columns
    print(Colors.BORDER + (char * width) + Colors.ENDC)

def print_section(title):
    print("\n")
    print_separator("=")
    print(f"  {Colors.HEADER}{title.upper()}{Colors.ENDC}")
    print_separator("=")

def print_kv(key, value, color=Colors.VALUE):
    print(f"{Colors.LABEL}{key:<25}{Colors.ENDC} : {color}{value}{Colors.ENDC}")

def confidence_color(confidence):
    if confidence >= 0.85:
        return Colors.OKGREEN
    if confidence >= 0.6:
        return Colors.WARNING
    return Colors.FAIL

# --- SAMPLE SCAN ---
SCAN_RESULTS = [
    {
        "id": "image-alt",
        "impact": "critical",
        "tags": ["wcag2a", "wcag111"],
        "help": "Images must have alternate text",
        "nodes": [
            {"html": "<img src=\"hero.png\">", "target": ["#hero"], "failureSummary": "Element does not have an alt attribute"},
            {"html": "<img src=\"logo.png\">", "target": [".logo > img"], "failureSummary": "Element does not have an alt attribute"},
        ],
    },
    {
        "id": "color-contrast",
        "impact": "serious",
        "tags": ["wcag2aa", "wcag143"],
        "help": "Elements must have sufficient color contrast",
        "nodes": [
            {"html": "<span class=\"muted\">Terms apply</span>", "target": [".modal .muted"], "failureSummary": "Insufficient contrast of 3.2"},
        ],
    },
    {
        "id": "region",
        "impact": "minor",
        "tags": ["best-practice"],
        "help": "All page content should be contained by landmarks",
        "nodes": [{"html": "", "target": ["body > div.banner"]}],
    },
    {
        "id": "button-name",
        "impact": "very-bad",
        "tags": ["wcag2a"],
        "help": "Buttons must have discernible text",
        "nodes": [{"html": "<button aria-label=\"\"></button>", "target": ["button.icon"]}],
    },
]

KNOWN_CONTEXTS = {
    ".modal .muted": ElementContext(is_in_viewport=True, is_in_modal=True, tag_name="span"),
}

# --- MAIN DEMO ---
def run_demo():
    print_section("Scan Input")
    print_kv("Violations", len(SCAN_RESULTS))
    print_kv("Known Element Contexts", len(KNOWN_CONTEXTS))

    print_section("Step 1: Confidence Scoring")
    scored = asyncio.run(score_violations_async(SCAN_RESULTS, StaticContextProvider(KNOWN_CONTEXTS)))

    for idx, ev in enumerate(explain_violations(scored), 1):
        color = confidence_color(ev.confidence)
        review = f"{Colors.WARNING}REVIEW{Colors.ENDC}" if ev.flagged_for_review else f"{Colors.OKGREEN}AUTO{Colors.ENDC}"
        print(f"{idx}. {Colors.BOLD}{ev.rule_id}{Colors.ENDC}  [{review}]")
        print(f"   ├─ Confidence : {color}{ev.confidence:.2f}{Colors.ENDC}")
        print(f"   ├─ Severity   : {ev.severity}")
        print(f"   ├─ Weakest    : {ev.top_factor}")
        print(f"   └─ Reasoning  : {Colors.MUTED}{' | '.join(ev.reasoning)}{Colors.ENDC}")

    print_section("Step 2: Batch Summary")
    summary = summarize(scored)

    print_kv("Total", summary.total)
    print_kv("Flagged For Review", summary.flagged_for_review, Colors.WARNING + Colors.BOLD)
    print_kv("Average Confidence", f"{summary.average_confidence:.2f}", confidence_color(summary.average_confidence))
    for level, count in summary.by_severity.items():
        print_kv(f"  {level}", count)

    print_separator("=")
    print("\n")

if __name__ == "__main__":
    run_demo()
