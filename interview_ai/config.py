import os
import logging
from logging.handlers import RotatingFileHandler
import pathlib
from dotenv import load_dotenv
from mistralai import Mistral

load_dotenv()

log_dir = pathlib.Path(os.getenv("LOG_DIR", pathlib.Path(__file__).parent / "logs"))
log_dir.mkdir(parents=True, exist_ok=True)

log_file = log_dir / "server.log"

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        RotatingFileHandler(
            log_file,
            maxBytes=10485760,
            backupCount=5,
            encoding='utf-8'
        ),
        logging.StreamHandler()
    ]
)

MISTRAL_API_KEY = os.getenv("MISTRAL_API_KEY", "")
LLM_TIMEOUT_MS = int(os.getenv("LLM_TIMEOUT_MS", "120000"))
client = Mistral(api_key=MISTRAL_API_KEY, timeout_ms=LLM_TIMEOUT_MS)
model = os.getenv("MISTRAL_MODEL", "mistral-large-latest")

# Question generation
QUESTION_COUNT = int(os.getenv("QUESTION_COUNT", "8"))
MIN_CODING_QUESTIONS = int(os.getenv("MIN_CODING_QUESTIONS", "2"))
GENERATION_TEMPERATURE = float(os.getenv("GENERATION_TEMPERATURE", "0.7"))

# Evaluation
EVALUATION_TEMPERATURE = float(os.getenv("EVALUATION_TEMPERATURE", "0.9"))
# Score used by the text fallback for any category label it cannot find
FALLBACK_CATEGORY_SCORE = 70

# Code runner
CODE_RUN_TIMEOUT_SECONDS = float(os.getenv("CODE_RUN_TIMEOUT_SECONDS", "5"))
CODE_RUN_DELAY_SECONDS = float(os.getenv("CODE_RUN_DELAY_SECONDS", "1.5"))
CODE_RUN_MEMORY_LIMIT_MB = int(os.getenv("CODE_RUN_MEMORY_LIMIT_MB", "256"))

# uvicorn interview_ai.main:app --reload
# python -m uvicorn interview_ai.main:app --host 0.0.0.0 --port 8000
