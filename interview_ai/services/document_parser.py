import io
import logging
import re
import PyPDF2
from docx import Document
from ..errors import DocumentParseError, UnsupportedFileType

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MEDIA_TYPE = "text/plain"

SUPPORTED_MEDIA_TYPES = (PDF_MEDIA_TYPE, DOCX_MEDIA_TYPE, TEXT_MEDIA_TYPE)

def normalize_text(raw_text: str) -> str:
    """Repair line breaks injected by text extraction.

    A single break between two lines becomes a space, blank-line separated
    paragraphs keep one newline, and runs of spaces collapse to one.
    """
    text = raw_text.replace('\r\n', '\n').replace('\r', '\n')
    text = re.sub(r'[ \t\f\v]+\n', '\n', text)
    text = re.sub(r'\n[ \t\f\v]+', '\n', text)
    text = re.sub(r'(?<=[^\n])\n(?=[^\n])', ' ', text)
    text = re.sub(r'\n{2,}', '\n', text)
    text = re.sub(r'[ \t\f\v]{2,}', ' ', text)
    return text.strip()

def extract_pdf_text(content: bytes) -> str:
    pdf_reader = PyPDF2.PdfReader(io.BytesIO(content))
    return "\n\n".join(page.extract_text() or "" for page in pdf_reader.pages)

def extract_docx_text(content: bytes) -> str:
    document = Document(io.BytesIO(content))
    return "\n\n".join(paragraph.text for paragraph in document.paragraphs if paragraph.text.strip())

def extract_plain_text(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")

EXTRACTORS = {
    PDF_MEDIA_TYPE: extract_pdf_text,
    DOCX_MEDIA_TYPE: extract_docx_text,
    TEXT_MEDIA_TYPE: extract_plain_text,
}

def extract_text(content: bytes, media_type: str) -> str:
    """Extract normalized plain text from an uploaded CV."""
    extractor = EXTRACTORS.get(media_type)
    if extractor is None:
        raise UnsupportedFileType(f"Unsupported file type: {media_type}")

    try:
        raw_text = extractor(content)
    except Exception as e:
        logger.error(f"Error parsing file: {str(e)}")
        raise DocumentParseError(f"Failed to extract text from the file: {str(e)}") from e

    text = normalize_text(raw_text)
    if not text:
        raise DocumentParseError("No text could be extracted from the file")
    return text
