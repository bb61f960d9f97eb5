import asyncio
import logging
from fastapi import APIRouter, HTTPException, Body
from fastapi.responses import Response
from ..errors import AnalysisError
from ..models import AnalysisRequest, AnalysisResponse, ExportRequest
from ..services.evaluator import evaluate_interview
from ..services.results_export import export_results, results_filename

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/analyze-interview", response_model=AnalysisResponse)
async def analyze_interview(request: AnalysisRequest = Body(...)):
    if not request.messages or not request.responseTimes:
        raise HTTPException(status_code=400, detail="Interview messages and response times are required")

    try:
        results = await asyncio.to_thread(
            evaluate_interview,
            request.messages,
            request.responseTimes,
            request.jobDescription,
            request.cvContent
        )
    except AnalysisError as e:
        logger.error(f"Error analyzing interview: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to analyze the interview")

    return AnalysisResponse(results=results)

@router.post("/export-results")
async def download_results(request: ExportRequest = Body(...)):
    filename = results_filename()
    return Response(
        content=export_results(request.results),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )
