from types import SimpleNamespace

from interview_ai.services import llm
from interview_ai.services.question_generator import generate_questions


def test_message_text_variants():
    assert llm.message_text(None) == ""
    assert llm.message_text("plain") == "plain"
    assert llm.message_text([
        SimpleNamespace(type="text", text="[\"What is "),
        {"type": "text", "text": "a closure?\"]"},
        SimpleNamespace(type="image_url", image_url="http://example.invalid/x.png"),
    ]) == '["What is a closure?"]'


def test_complete_sends_system_and_user_messages(fake_llm):
    fake_llm.queue("ok")

    assert llm.complete("the prompt", "the system", temperature=0.3) == "ok"

    request = fake_llm.request_history[-1]
    assert request["messages"] == [
        {"role": "system", "content": "the system"},
        {"role": "user", "content": "the prompt"},
    ]
    assert request["temperature"] == 0.3


def test_chunked_content_reaches_question_parsing(fake_llm):
    fake_llm.queue([
        SimpleNamespace(type="text", text='[{"question": "Write a function that '),
        SimpleNamespace(type="text", text='reverses a list.", "type": "coding"}]'),
    ])

    assert generate_questions("jd", "cv") == ["[coding] Write a function that reverses a list."]
