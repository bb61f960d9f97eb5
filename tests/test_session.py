import pytest

from interview_ai.models import Category, CodeSubmission
from interview_ai.services.session import InterviewSession
from interview_ai.services.transcript import reconcile

QUESTIONS = [
    "[coding] Write a function that checks for palindromes.",
    "[soft_skills] How do you give feedback?",
]


def test_full_interview_reconciles():
    session = InterviewSession(QUESTIONS)
    started = session.start()

    assert [m.id for m in started] == ["welcome", "q-0"]
    assert started[1].questionType == Category.CODING
    assert session.current_question == QUESTIONS[0]

    next_message = session.submit_answer(
        "Here is my solution.",
        response_time_ms=4200,
        code_submission=CodeSubmission(code="def p(s): return s == s[::-1]", language="python", output="True")
    )
    assert next_message.id == "q-1"

    final = session.submit_answer("Directly and kindly.", response_time_ms=1500)
    assert final.id == "final"
    assert session.finished
    assert session.current_question is None
    assert session.response_times == {0: 4200, 1: 1500}

    transcript = reconcile(session.messages, session.response_times)
    assert [entry.responseTime for entry in transcript] == [4200, 1500]
    assert transcript[0].answer == (
        "Here is my solution.\n\n```python\ndef p(s): return s == s[::-1]\n```\n\nOutput:\n```\nTrue\n```"
    )


def test_code_is_ignored_for_non_coding_questions():
    session = InterviewSession(["[soft_skills] How do you plan your week?"])
    session.start()
    session.submit_answer("With a list.", response_time_ms=10, code_submission=CodeSubmission(code="x", language="python"))

    answer = session.messages[-2]
    assert answer.content == "With a list."
    assert answer.codeSubmission is None


def test_response_time_is_measured_when_not_given():
    session = InterviewSession(["Q?"])
    session.start()
    session.submit_answer("A")
    assert session.response_times[0] >= 0


def test_invalid_use():
    with pytest.raises(ValueError):
        InterviewSession([])

    session = InterviewSession(["Q?"])
    with pytest.raises(RuntimeError):
        session.submit_answer("too early")

    session.start()
    with pytest.raises(ValueError):
        session.submit_answer("   ")
    session.submit_answer("done", response_time_ms=1)
    with pytest.raises(RuntimeError):
        session.submit_answer("too late")
