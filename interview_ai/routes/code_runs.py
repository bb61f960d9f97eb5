import asyncio
from fastapi import APIRouter, HTTPException, Body
from ..errors import ValidationError
from ..models import CodeRunRequest, CodeRunResult
from ..services.code_runner import run_code

router = APIRouter()

@router.post("/run-code", response_model=CodeRunResult)
async def run_submitted_code(request: CodeRunRequest = Body(...)):
    try:
        return await asyncio.to_thread(run_code, request.code, request.language)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
