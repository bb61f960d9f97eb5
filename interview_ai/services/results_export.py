import datetime
from typing import Optional
from ..models import EvaluationResult

def results_filename(day: Optional[datetime.date] = None) -> str:
    day = day or datetime.datetime.now(datetime.timezone.utc).date()
    return f"interview-results-{day.isoformat()}.json"

def export_results(result: EvaluationResult) -> str:
    return result.model_dump_json(indent=2)

def load_results(content: str) -> EvaluationResult:
    return EvaluationResult.model_validate_json(content)
