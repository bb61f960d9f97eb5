class InterviewError(Exception):
    """Base class for errors raised by the interview core."""
    status_code = 500


class ValidationError(InterviewError):
    """A required request field is missing or empty."""
    status_code = 400


class UnsupportedFileType(InterviewError):
    status_code = 400


class DocumentParseError(InterviewError):
    pass


class GenerationError(InterviewError):
    """The language model call for question generation failed."""


class AnalysisError(InterviewError):
    """The language model call or the result parsing failed during evaluation."""


class ParseFallbackExhausted(AnalysisError):
    """Neither the structured parser nor the text fallback produced a result."""
