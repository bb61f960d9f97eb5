import asyncio
import logging
from fastapi import APIRouter, HTTPException, Body
from ..errors import GenerationError
from ..models import QuestionGenerationRequest, QuestionGenerationResponse
from ..services.question_generator import generate_questions

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/generate-questions", response_model=QuestionGenerationResponse)
async def generate_interview_questions(request: QuestionGenerationRequest = Body(...)):
    if not request.jobDescription.strip() or not request.cvContent.strip():
        raise HTTPException(status_code=400, detail="Job description and CV content are required")

    try:
        questions = await asyncio.to_thread(generate_questions, request.jobDescription, request.cvContent)
    except GenerationError as e:
        logger.error(f"Error generating questions: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to generate interview questions")

    if not questions:
        logger.error("Model response contained no questions")
        raise HTTPException(status_code=500, detail="No interview questions could be generated")

    return QuestionGenerationResponse(questions=questions)
