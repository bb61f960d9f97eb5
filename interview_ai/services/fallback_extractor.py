"""
Best-effort recovery of an evaluation from model output that is not JSON.

Only the overall score is mandatory. Category scores that cannot be found get
the neutral placeholder ``FALLBACK_CATEGORY_SCORE``; summary, strengths and
improvements fall back to fixed placeholder text. Results from this path are
coarser than the structured path.
"""
import logging
import re
from typing import Dict, List, Optional
from ..config import FALLBACK_CATEGORY_SCORE

logger = logging.getLogger(__name__)

OVERALL_PATTERN = re.compile(r"overall\s+score:?\s*(\d+)", re.IGNORECASE)

CATEGORY_PATTERNS = {
    "technicalAcumen": re.compile(r"technical\s+acumen:?\s*(\d+)", re.IGNORECASE),
    "codingProficiency": re.compile(r"coding\s+proficiency:?\s*(\d+)", re.IGNORECASE),
    "communicationSkills": re.compile(r"communication\s+skills:?\s*(\d+)", re.IGNORECASE),
    "responsivenessAgility": re.compile(r"responsiveness:?\s*(\d+)", re.IGNORECASE),
    "problemSolvingAdaptability": re.compile(r"problem.?solving:?\s*(\d+)", re.IGNORECASE),
    "culturalFitSoftSkills": re.compile(r"cultural\s+fit:?\s*(\d+)", re.IGNORECASE),
}

SUMMARY_LABEL = "summary:"
STRENGTHS_LABEL = re.compile(r"(?:key\s+)?strengths:", re.IGNORECASE)
IMPROVEMENTS_LABEL = re.compile(r"(?:areas\s+for\s+)?improvements?:", re.IGNORECASE)
NEXT_SECTION_LABEL = re.compile(r"(?:key\s+)?strengths:|(?:areas\s+for\s+)?improvements?:", re.IGNORECASE)
LIST_ITEM_PATTERN = re.compile(r"^(?:[-*•]|\d+[.)])\s+(.*)$")

DEFAULT_SUMMARY = "Analysis extracted from unstructured text."
DEFAULT_STRENGTHS = ["Technical knowledge", "Communication approach"]
DEFAULT_IMPROVEMENTS = ["Could be more specific", "Response timing"]

def extract_summary(text: str) -> str:
    start = text.lower().find(SUMMARY_LABEL)
    if start < 0:
        return ""
    rest = text[start + len(SUMMARY_LABEL):]
    next_section = NEXT_SECTION_LABEL.search(rest)
    if next_section:
        rest = rest[:next_section.start()]
    return rest.strip()

def extract_list(text: str, label: re.Pattern, stop_label: Optional[re.Pattern] = None) -> List[str]:
    header = label.search(text)
    if not header:
        return []

    items = []
    for line in text[header.end():].split('\n')[1:]:
        line = line.strip()
        if stop_label and stop_label.search(line):
            break
        match = LIST_ITEM_PATTERN.match(line)
        if match and match.group(1).strip():
            items.append(match.group(1).strip())
    return items

def extract_evaluation(text: str) -> Optional[Dict]:
    """Pull scores and lists out of free text; None when no overall score is present."""
    overall = OVERALL_PATTERN.search(text)
    if not overall:
        logger.warning("No overall score found in model output")
        return None

    categories = {}
    for name, pattern in CATEGORY_PATTERNS.items():
        match = pattern.search(text)
        categories[name] = int(match.group(1)) if match else FALLBACK_CATEGORY_SCORE

    return {
        "overallScore": int(overall.group(1)),
        "categories": categories,
        "summary": extract_summary(text) or DEFAULT_SUMMARY,
        "strengths": extract_list(text, STRENGTHS_LABEL, stop_label=IMPROVEMENTS_LABEL) or list(DEFAULT_STRENGTHS),
        "improvements": extract_list(text, IMPROVEMENTS_LABEL) or list(DEFAULT_IMPROVEMENTS)
    }
