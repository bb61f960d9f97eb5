import os
import tempfile
from types import SimpleNamespace
from typing import List, Union

import pytest

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="interview-ai-logs-"))

from interview_ai import config  # noqa: E402
from interview_ai.models import Message  # noqa: E402
from interview_ai.services import llm  # noqa: E402


class FakeChat:
    def __init__(self, owner: "FakeMistralClient"):
        self.owner = owner

    def complete(self, model: str, messages: list, temperature: float = 0.0, **kwargs):
        self.owner.request_history.append({
            "model": model,
            "messages": messages,
            "temperature": temperature
        })
        if not self.owner.responses:
            raise AssertionError("No more fake LLM responses queued")
        response = self.owner.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=response))])


class FakeMistralClient:
    """Stands in for the Mistral client: returns queued responses and records prompts."""

    def __init__(self):
        self.responses: List[Union[str, Exception]] = []
        self.request_history = []
        self.chat = FakeChat(self)

    def queue(self, *responses):
        self.responses.extend(responses)

    @property
    def last_prompt(self) -> str:
        return self.request_history[-1]["messages"][-1]["content"]


@pytest.fixture
def fake_llm(monkeypatch):
    fake = FakeMistralClient()
    monkeypatch.setattr(llm, "client", fake)
    return fake


@pytest.fixture(autouse=True)
def no_code_run_delay(monkeypatch):
    monkeypatch.setattr(config, "CODE_RUN_DELAY_SECONDS", 0)


@pytest.fixture
def interview_messages():
    return [
        Message(id="welcome", role="assistant", content="Welcome to your AI interview."),
        Message(id="q-0", role="assistant", content="[coding] Write a function that reverses a string."),
        Message(id="user-1", role="user", content="def reverse(s): return s[::-1]"),
        Message(id="q-1", role="assistant", content="[technical] Explain the GIL."),
        Message(id="user-2", role="user", content="It serializes bytecode execution."),
        Message(id="q-2", role="assistant", content="How do you handle disagreements?"),
        Message(id="user-3", role="user", content="I listen first."),
        Message(id="final", role="assistant", content="Thank you for completing the interview."),
    ]


@pytest.fixture
def response_times():
    return {0: 1000, 1: 3000, 2: 2000}
