import re
from typing import Optional, Sequence, Tuple
from ..models import Category

TAG_PATTERN = re.compile(r"\[(coding|technical|experience|soft_skills)\]", re.IGNORECASE)

CODING_KEYWORDS = (
    "write a function",
    "implement",
    "code",
    "algorithm",
    "programming",
    "write code",
    "solve this problem",
)

# Tested top to bottom, first hit wins
KEYWORD_TABLE: Sequence[Tuple[Tuple[str, ...], Category]] = (
    (CODING_KEYWORDS, Category.CODING),
    (("explain", "difference between", "how does", "what is", "describe"), Category.TECHNICAL),
    (("tell me about a time", "previous experience", "project", "worked on", "your role"), Category.EXPERIENCE),
)

def parse_category(value) -> Optional[Category]:
    """Return the Category named by value, or None when it is not one of the four."""
    try:
        return Category(str(value).strip().lower())
    except ValueError:
        return None

def match_keywords(text: str, table=KEYWORD_TABLE) -> Optional[Category]:
    lowered = text.lower()
    for keywords, category in table:
        if any(keyword in lowered for keyword in keywords):
            return category
    return None

def classify(question: str) -> Category:
    """Map question text to its category.

    An explicit bracket tag wins; otherwise the keyword table decides and
    anything unmatched is a soft skills question.
    """
    lowered = question.lower()
    for category in Category:
        if f"[{category.value}]" in lowered:
            return category
    return match_keywords(question) or Category.SOFT_SKILLS

def format_question_text(question: str) -> str:
    """Strip category tags for display."""
    return TAG_PATTERN.sub("", question).strip()

def mentions_coding(question: str) -> bool:
    lowered = question.lower()
    return "[coding]" in lowered or any(keyword in lowered for keyword in CODING_KEYWORDS)
