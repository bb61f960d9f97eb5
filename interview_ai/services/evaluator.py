import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence
from pydantic import ValidationError as ModelValidationError
from .. import config
from ..errors import AnalysisError, ParseFallbackExhausted
from ..models import CategoryScores, EvaluationResult, Message, ResponseTimeStats, TranscriptEntry
from ..prompts import EVALUATION_PROMPT, EVALUATION_SYSTEM_PROMPT
from . import llm
from .classifier import mentions_coding
from .fallback_extractor import extract_evaluation
from .transcript import reconcile

logger = logging.getLogger(__name__)

CODE_FENCE_PATTERN = re.compile(r"```json|```")
# A newline that is neither after an opening bracket or comma nor before a closing bracket
LOOSE_NEWLINE_PATTERN = re.compile(r"(?<![{\[,])\n(?![\]}])")

@dataclass
class ParseOutcome:
    """Result of one parser stage: either a result dict or the reason it failed."""
    result: Optional[Dict] = None
    failure: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None

def normalize_model_text(text: str) -> str:
    text = CODE_FENCE_PATTERN.sub("", text)
    text = LOOSE_NEWLINE_PATTERN.sub(" ", text)
    return text.strip()

def summarize_response_times(response_times: Mapping[int, int]) -> ResponseTimeStats:
    """Mean, minimum and maximum of the recorded times.

    An empty mapping yields NaN for every field; callers reject empty input
    before getting here.
    """
    times = list(response_times.values())
    if not times:
        return ResponseTimeStats(average=math.nan, fastest=math.nan, slowest=math.nan)
    return ResponseTimeStats(
        average=sum(times) / len(times),
        fastest=min(times),
        slowest=max(times)
    )

def parse_structured(raw_text: str) -> ParseOutcome:
    try:
        parsed = json.loads(normalize_model_text(raw_text))
    except json.JSONDecodeError as e:
        return ParseOutcome(failure=f"invalid JSON: {e}")
    if not isinstance(parsed, dict):
        return ParseOutcome(failure="JSON is not an object")
    return ParseOutcome(result=parsed)

def parse_heuristic(raw_text: str) -> ParseOutcome:
    extracted = extract_evaluation(raw_text)
    if extracted is None:
        return ParseOutcome(failure="no overall score in text")
    return ParseOutcome(result=extracted)

EVALUATION_PARSERS: Sequence[Callable[[str], ParseOutcome]] = (parse_structured, parse_heuristic)

def as_score(value) -> Optional[float]:
    """Numeric value of a model-reported number, or None if it is unusable."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number

def fill_response_times(reported, response_times: Mapping[int, int]) -> Dict:
    """Keep the model's stats where usable and derive the rest from recorded times."""
    derived = summarize_response_times(response_times).model_dump()
    if not isinstance(reported, dict):
        return derived
    filled = {}
    for key, value in derived.items():
        number = as_score(reported.get(key))
        filled[key] = value if number is None else number
    return filled

def fill_categories(reported) -> Dict:
    reported = reported if isinstance(reported, dict) else {}
    filled = {}
    for name, field in CategoryScores.model_fields.items():
        number = as_score(reported.get(name))
        if number is None and field.is_required():
            logger.warning(f"Model omitted category {name}, using {config.FALLBACK_CATEGORY_SCORE}")
            number = config.FALLBACK_CATEGORY_SCORE
        filled[name] = number
    return filled

def build_result(data: Dict, transcript: List[TranscriptEntry], response_times: Mapping[int, int]) -> EvaluationResult:
    # Null fields fall back to the model defaults
    data = {key: value for key, value in data.items() if value is not None}
    data["responseTimes"] = fill_response_times(data.get("responseTimes"), response_times)
    data["categories"] = fill_categories(data.get("categories"))
    # The model's own transcript echo is never trusted
    data["transcript"] = [entry.model_dump() for entry in transcript]
    return EvaluationResult.model_validate(data)

def parse_evaluation(raw_text: str, transcript: List[TranscriptEntry], response_times: Mapping[int, int]) -> EvaluationResult:
    failures = []
    for parser in EVALUATION_PARSERS:
        outcome = parser(raw_text)
        if outcome.ok:
            try:
                return build_result(outcome.result, transcript, response_times)
            except ModelValidationError as e:
                outcome = ParseOutcome(failure=f"unexpected evaluation shape: {e.error_count()} errors")
        logger.warning(f"{parser.__name__} failed: {outcome.failure}")
        failures.append(f"{parser.__name__}: {outcome.failure}")

    logger.error(f"Could not parse evaluation. Raw content: {raw_text}")
    raise ParseFallbackExhausted(
        "Failed to parse interview analysis and could not extract structured data "
        f"({'; '.join(failures)})"
    )

def build_evaluation_prompt(transcript: List[TranscriptEntry], response_times: Mapping[int, int],
                            job_description: str, cv_content: str) -> str:
    coding_questions = sum(1 for entry in transcript if mentions_coding(entry.question))
    return EVALUATION_PROMPT.format(
        job_description=job_description,
        cv_content=cv_content,
        transcript=json.dumps([entry.model_dump(mode="json") for entry in transcript]),
        response_times=json.dumps({str(k): v for k, v in response_times.items()}),
        coding_questions=coding_questions
    )

def evaluate_interview(messages: Sequence[Message], response_times: Mapping[int, int],
                       job_description: str, cv_content: str) -> EvaluationResult:
    """Score a finished interview from its message log and response times."""
    transcript = reconcile(messages, response_times)
    prompt = build_evaluation_prompt(transcript, response_times, job_description, cv_content)

    try:
        response_text = llm.complete(
            prompt,
            EVALUATION_SYSTEM_PROMPT,
            temperature=config.EVALUATION_TEMPERATURE
        )
    except Exception as e:
        logger.error(f"Error analyzing interview: {str(e)}")
        raise AnalysisError(f"Interview analysis failed: {str(e)}") from e

    result = parse_evaluation(response_text, transcript, response_times)
    logger.info(f"Evaluated interview with {len(transcript)} answers, overall score {result.overallScore}")
    return result
