from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional
from .message_models import Message
from .question_models import Category

def _clamp_score(value: float) -> float:
    return max(0.0, min(float(value), 100.0))

class TranscriptEntry(BaseModel):
    question: str
    answer: str
    responseTime: int = Field(ge=0)
    type: Category

class ResponseTimeStats(BaseModel):
    average: float
    fastest: float
    slowest: float

class CategoryScores(BaseModel):
    technicalAcumen: float
    communicationSkills: float
    responsivenessAgility: float
    problemSolvingAdaptability: float
    culturalFitSoftSkills: float
    codingProficiency: Optional[float] = None

    @field_validator("*")
    @classmethod
    def clamp(cls, value):
        return None if value is None else _clamp_score(value)

class EvaluationResult(BaseModel):
    overallScore: float
    categories: CategoryScores
    responseTimes: Optional[ResponseTimeStats] = None
    summary: str = ""
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    transcript: List[TranscriptEntry] = Field(default_factory=list)

    @field_validator("overallScore")
    @classmethod
    def clamp(cls, value: float) -> float:
        return _clamp_score(value)

class AnalysisRequest(BaseModel):
    messages: List[Message] = Field(default_factory=list)
    responseTimes: Dict[int, int] = Field(default_factory=dict)
    jobDescription: str = ""
    cvContent: str = ""

class AnalysisResponse(BaseModel):
    success: bool = True
    results: EvaluationResult

class ExportRequest(BaseModel):
    results: EvaluationResult
