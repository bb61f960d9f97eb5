import json
import logging
import re
from typing import List
from .. import config
from ..errors import GenerationError
from ..prompts import QUESTION_GENERATION_PROMPT, QUESTION_GENERATION_SYSTEM_PROMPT
from . import llm
from .classifier import classify, parse_category

logger = logging.getLogger(__name__)

NUMBERED_LINE_PATTERN = re.compile(r"^\s*\d+[.)]\s*(.+)$")
CODE_FENCE_PATTERN = re.compile(r"```(?:json)?", re.IGNORECASE)

def strip_code_fences(content: str) -> str:
    return CODE_FENCE_PATTERN.sub("", content).strip()

def tag_question(item: dict) -> str:
    question = str(item["question"]).strip()
    category = parse_category(item.get("type")) or classify(question)
    return f"[{category.value}] {question}"

def extract_questions_from_text(content: str) -> List[str]:
    """Recover questions from free text when the model did not return JSON.

    Numbered list items are matched one line at a time so a question never
    runs into the next one. Without any numbered items, lines that look like
    questions are kept instead.
    """
    lines = content.split('\n')

    numbered = []
    for line in lines:
        match = NUMBERED_LINE_PATTERN.match(line)
        if match and match.group(1).strip():
            numbered.append(match.group(1).strip())
    if numbered:
        return numbered

    questions = []
    for line in lines:
        line = line.strip()
        if len(line) > 20 and '?' in line and not line.startswith(('{', '[', '```')):
            questions.append(line)
    return questions

def parse_questions(content: str) -> List[str]:
    try:
        parsed = json.loads(strip_code_fences(content))
    except json.JSONDecodeError:
        logger.warning("Question response is not valid JSON, using text extraction")
        return extract_questions_from_text(content)

    if not isinstance(parsed, list):
        logger.warning("Question response is not a JSON array, using text extraction")
        return extract_questions_from_text(content)

    questions = []
    for item in parsed:
        if isinstance(item, dict) and item.get("question"):
            questions.append(tag_question(item))
        elif isinstance(item, str) and item.strip():
            questions.append(item.strip())
        else:
            logger.warning(f"Skipping unusable question item: {item!r}")
    return questions

def generate_questions(job_description: str, cv_content: str) -> List[str]:
    """Generate tagged interview questions for a job description and CV."""
    prompt = QUESTION_GENERATION_PROMPT.format(
        n=config.QUESTION_COUNT,
        min_coding=config.MIN_CODING_QUESTIONS,
        job_description=job_description,
        cv_content=cv_content
    )

    try:
        response_text = llm.complete(
            prompt,
            QUESTION_GENERATION_SYSTEM_PROMPT,
            temperature=config.GENERATION_TEMPERATURE
        )
    except Exception as e:
        logger.error(f"Error generating questions: {str(e)}")
        raise GenerationError(f"Question generation failed: {str(e)}") from e

    questions = parse_questions(response_text)
    logger.info(f"Generated {len(questions)} interview questions")
    return questions
