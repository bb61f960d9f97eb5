import json

import pytest

from interview_ai import config
from interview_ai.errors import GenerationError
from interview_ai.services.question_generator import (
    extract_questions_from_text,
    generate_questions,
    parse_questions,
)


def test_tagged_objects_become_tagged_strings(fake_llm):
    fake_llm.queue(json.dumps([
        {"question": "Implement a rate limiter.", "type": "coding"},
        {"question": "Tell me about your last team.", "type": "experience"},
    ]))

    questions = generate_questions("Backend engineer, Python", "Five years of Django")

    assert questions == [
        "[coding] Implement a rate limiter.",
        "[experience] Tell me about your last team.",
    ]


def test_prompt_includes_inputs_and_coding_minimum(fake_llm):
    fake_llm.queue('["What is a closure?"]')

    generate_questions("Frontend role using React", "Built dashboards in Vue")

    prompt = fake_llm.last_prompt
    assert "Frontend role using React" in prompt
    assert "Built dashboards in Vue" in prompt
    assert f"at least {config.MIN_CODING_QUESTIONS} coding-specific questions" in prompt
    assert fake_llm.request_history[-1]["temperature"] == config.GENERATION_TEMPERATURE


def test_plain_string_array_is_returned_as_is():
    assert parse_questions('["What is a closure?", "Why Python?"]') == ["What is a closure?", "Why Python?"]


def test_items_without_question_text_are_skipped():
    content = json.dumps([{"text": "What is a closure?"}, {"question": "", "type": "coding"}, 42, "  "])
    assert parse_questions(content) == []


def test_mixed_array_keeps_usable_items():
    content = json.dumps([{"prompt": "ignored"}, "Why Python?", {"question": "Explain event loops.", "type": "technical"}])
    assert parse_questions(content) == ["Why Python?", "[technical] Explain event loops."]


def test_unknown_type_is_replaced_by_classification():
    content = json.dumps([{"question": "Explain event loops.", "type": "trivia"}])
    assert parse_questions(content) == ["[technical] Explain event loops."]


def test_code_fenced_json_is_parsed():
    content = '```json\n[{"question": "Write code to sort a list.", "type": "coding"}]\n```'
    assert parse_questions(content) == ["[coding] Write code to sort a list."]


def test_numbered_list_fallback():
    content = "1. What is a closure?\n2. Explain your last project.\n"
    assert parse_questions(content) == ["What is a closure?", "Explain your last project."]


def test_numbered_list_with_parentheses_does_not_bleed():
    content = "Here you go:\n1) First question about caching?\n2) Second question\nabout queues?\n"
    assert extract_questions_from_text(content) == [
        "First question about caching?",
        "Second question",
    ]


def test_question_line_fallback():
    content = (
        "Sure! Here are some questions.\n"
        "How would you design a URL shortener?\n"
        "{\"broken\": \"json?\"\n"
        "Short one?\n"
        "Can you walk me through your testing strategy?"
    )
    assert extract_questions_from_text(content) == [
        "How would you design a URL shortener?",
        "Can you walk me through your testing strategy?",
    ]


def test_non_question_text_yields_empty_list(fake_llm):
    fake_llm.queue("I cannot help with that.")
    assert generate_questions("jd", "cv") == []


def test_json_object_falls_back_to_text_extraction():
    assert parse_questions('{"questions": []}') == []


def test_model_failure_raises_generation_error(fake_llm):
    fake_llm.queue(RuntimeError("401 Unauthorized"))

    with pytest.raises(GenerationError) as excinfo:
        generate_questions("jd", "cv")
    assert isinstance(excinfo.value.__cause__, RuntimeError)
