import asyncio
import logging
from fastapi import APIRouter, HTTPException, UploadFile, File
from ..errors import DocumentParseError, UnsupportedFileType
from ..models import ParsedCVResponse
from ..services.document_parser import SUPPORTED_MEDIA_TYPES, extract_text

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/parse-cv", response_model=ParsedCVResponse)
async def parse_cv(file: UploadFile = File(None)):
    if file is None:
        raise HTTPException(status_code=400, detail="No file provided")

    if file.content_type not in SUPPORTED_MEDIA_TYPES:
        raise HTTPException(status_code=400, detail="Invalid file type. Please upload a PDF, DOCX, or TXT file")

    file_content = await file.read()
    try:
        content = await asyncio.to_thread(extract_text, file_content, file.content_type)
    except UnsupportedFileType as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DocumentParseError as e:
        logger.error(f"Error parsing CV {file.filename}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    logger.info(f"Parsed CV {file.filename} ({len(content)} characters)")
    return ParsedCVResponse(fileName=file.filename or "", content=content)
