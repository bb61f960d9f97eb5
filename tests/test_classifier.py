import pytest

from interview_ai.models import Category
from interview_ai.services.classifier import classify, format_question_text, mentions_coding, parse_category


def test_tag_wins_over_keywords():
    assert classify("[coding] anything") == Category.CODING
    assert classify("[soft_skills] Explain how you implement code reviews") == Category.SOFT_SKILLS


def test_tags_are_case_insensitive():
    assert classify("[TECHNICAL] Tell me about a time") == Category.TECHNICAL
    assert classify("[Experience] What is a monad?") == Category.EXPERIENCE


@pytest.mark.parametrize("question, expected", [
    ("Explain how binary search works", Category.TECHNICAL),
    ("Tell me about your role on your last project", Category.EXPERIENCE),
    ("How do you handle conflict in a team?", Category.SOFT_SKILLS),
    ("Write a function to merge two sorted lists", Category.CODING),
    ("Describe an algorithm for cycle detection", Category.CODING),
    ("What is the difference between a process and a thread?", Category.TECHNICAL),
])
def test_keyword_classification(question, expected):
    assert classify(question) == expected


def test_format_question_text_strips_tags_only():
    original = "  [Coding] Implement an LRU cache  "
    assert format_question_text(original) == "Implement an LRU cache"
    assert classify(original) == Category.CODING


def test_mentions_coding():
    assert mentions_coding("[technical] How would you implement retries?")
    assert mentions_coding("[coding] Reverse a list")
    assert not mentions_coding("Tell me about a time you led a team")


def test_parse_category():
    assert parse_category(" Soft_Skills ") == Category.SOFT_SKILLS
    assert parse_category("behavioral") is None
    assert parse_category(None) is None
