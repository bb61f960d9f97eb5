from .question_models import (
    Category,
    QuestionGenerationRequest,
    QuestionGenerationResponse
)
from .message_models import (
    CodeSubmission,
    Message
)
from .evaluation_models import (
    TranscriptEntry,
    ResponseTimeStats,
    CategoryScores,
    EvaluationResult,
    AnalysisRequest,
    AnalysisResponse,
    ExportRequest
)
from .code_models import CodeRunRequest, CodeRunResult
from .document_models import ParsedCVResponse

__all__ = [
    'Category',
    'QuestionGenerationRequest',
    'QuestionGenerationResponse',
    'CodeSubmission',
    'Message',
    'TranscriptEntry',
    'ResponseTimeStats',
    'CategoryScores',
    'EvaluationResult',
    'AnalysisRequest',
    'AnalysisResponse',
    'ExportRequest',
    'CodeRunRequest',
    'CodeRunResult',
    'ParsedCVResponse'
]
