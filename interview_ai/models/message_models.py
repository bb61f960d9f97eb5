from pydantic import BaseModel
from typing import Literal, Optional
from .question_models import Category

class CodeSubmission(BaseModel):
    code: str
    language: str
    output: Optional[str] = None

class Message(BaseModel):
    id: str
    role: Literal["assistant", "user"]
    content: str
    timestamp: Optional[float] = None
    questionType: Optional[Category] = None
    codeSubmission: Optional[CodeSubmission] = None
