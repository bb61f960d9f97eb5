from pydantic import BaseModel
from typing import List
from enum import Enum

class Category(str, Enum):
    CODING = "coding"
    TECHNICAL = "technical"
    EXPERIENCE = "experience"
    SOFT_SKILLS = "soft_skills"

class QuestionGenerationRequest(BaseModel):
    jobDescription: str = ""
    cvContent: str = ""

class QuestionGenerationResponse(BaseModel):
    success: bool = True
    questions: List[str]
