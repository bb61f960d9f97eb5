import logging
import re
from typing import List, Mapping, Optional, Sequence
from ..models import Message, TranscriptEntry
from .classifier import classify

logger = logging.getLogger(__name__)

NON_QUESTION_IDS = {"welcome", "final"}
QUESTION_ID_PATTERN = re.compile(r"^q-(\d+)")

def question_index(message_id: Optional[str]) -> Optional[int]:
    """Index encoded in a ``q-<n>`` message id."""
    if not message_id:
        return None
    match = QUESTION_ID_PATTERN.match(message_id)
    return int(match.group(1)) if match else None

def reconcile(messages: Sequence[Message], response_times: Mapping[int, int]) -> List[TranscriptEntry]:
    """Pair each assistant question with the user answer that follows it.

    The response time is looked up through the id of the message right before
    the answer; answers that arrive with no pending question are dropped.
    """
    transcript = []
    pending_question = None

    for i, message in enumerate(messages):
        if message.role == "assistant" and message.id not in NON_QUESTION_IDS:
            pending_question = message.content
        elif message.role == "user" and pending_question:
            index = question_index(messages[i - 1].id) if i > 0 else None
            response_time = response_times.get(index, 0) if index is not None else 0
            transcript.append(TranscriptEntry(
                question=pending_question,
                answer=message.content,
                responseTime=max(int(response_time or 0), 0),
                type=classify(pending_question)
            ))
            pending_question = None

    logger.debug(f"Reconciled {len(transcript)} answers from {len(messages)} messages")
    return transcript
