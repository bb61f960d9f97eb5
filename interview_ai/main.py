from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from .errors import InterviewError
from .routes import questions, analysis, cv_parsing, code_runs
import logging

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application server")
    yield
    logger.info("Shutting down application server")

app = FastAPI(title="AI Interview Service", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})

@app.exception_handler(InterviewError)
async def interview_error_handler(request: Request, exc: InterviewError):
    logger.error(f"Unhandled {type(exc).__name__} on {request.url.path}: {str(exc)}")
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

@app.get("/health")
async def health():
    return {"status": "ok"}

app.include_router(questions.router)
app.include_router(analysis.router)
app.include_router(cv_parsing.router)
app.include_router(code_runs.router)

if __name__ == "__main__":
    import uvicorn
    logger.info("Starting development server")
    uvicorn.run(app, host="0.0.0.0", port=8000)
