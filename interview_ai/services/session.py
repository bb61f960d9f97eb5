import logging
import time
from typing import Dict, List, Optional
from ..models import Category, CodeSubmission, Message
from .classifier import classify

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Welcome to your AI interview. I'll be asking you a series of questions based on the job "
    "description and your CV. Please answer each question as thoroughly as possible."
)
FINAL_MESSAGE = "Thank you for completing the interview. I'll now analyze your responses and provide feedback."


class InterviewSession:
    """Message log and response times of one interview, driven by the caller.

    Questions are asked strictly in order; every answer closes the current
    question and either opens the next one or ends the interview.
    """

    def __init__(self, questions: List[str]):
        if not questions:
            raise ValueError("An interview needs at least one question")
        self.questions = list(questions)
        self.messages: List[Message] = []
        self.response_times: Dict[int, int] = {}
        self.current_index = 0
        self.finished = False
        self._asked_at: Optional[float] = None

    @property
    def current_question(self) -> Optional[str]:
        if self.finished or not self.messages:
            return None
        return self.questions[self.current_index]

    def _now_ms(self) -> float:
        return time.time() * 1000

    def _ask(self, index: int) -> Message:
        question = self.questions[index]
        message = Message(
            id=f"q-{index}",
            role="assistant",
            content=question,
            timestamp=self._now_ms(),
            questionType=classify(question)
        )
        self.messages.append(message)
        self._asked_at = time.monotonic()
        return message

    def start(self) -> List[Message]:
        if self.messages:
            raise RuntimeError("Interview already started")
        self.messages.append(Message(id="welcome", role="assistant", content=WELCOME_MESSAGE, timestamp=self._now_ms()))
        self._ask(0)
        logger.info(f"Interview started with {len(self.questions)} questions")
        return list(self.messages)

    def submit_answer(self, content: str, response_time_ms: Optional[int] = None,
                      code_submission: Optional[CodeSubmission] = None) -> Message:
        """Record an answer and return the next assistant message."""
        if not self.messages:
            raise RuntimeError("Interview not started")
        if self.finished:
            raise RuntimeError("Interview already finished")

        # Code is only attached to answers of coding questions
        is_coding = self.messages[-1].questionType == Category.CODING
        if not (is_coding and code_submission and code_submission.code.strip()):
            code_submission = None
        if not content.strip() and code_submission is None:
            raise ValueError("An answer needs text or code")

        if response_time_ms is None:
            response_time_ms = int((time.monotonic() - self._asked_at) * 1000)
        self.response_times[self.current_index] = max(int(response_time_ms), 0)

        self.messages.append(Message(
            id=f"user-{int(self._now_ms())}-{self.current_index}",
            role="user",
            content=self._answer_content(content, code_submission),
            timestamp=self._now_ms(),
            codeSubmission=code_submission
        ))

        if self.current_index < len(self.questions) - 1:
            self.current_index += 1
            return self._ask(self.current_index)

        self.finished = True
        final = Message(id="final", role="assistant", content=FINAL_MESSAGE, timestamp=self._now_ms())
        self.messages.append(final)
        logger.info("Interview finished")
        return final

    @staticmethod
    def _answer_content(content: str, code_submission: Optional[CodeSubmission]) -> str:
        answer = content.strip()
        if code_submission is None:
            return answer
        if answer:
            answer += "\n\n"
        answer += f"```{code_submission.language}\n{code_submission.code}\n```"
        if code_submission.output:
            answer += f"\n\nOutput:\n```\n{code_submission.output}\n```"
        return answer
