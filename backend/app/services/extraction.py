"""
Upload Text Extraction

Turns an uploaded file into plain text for the material store.

- Plain text and source files are decoded verbatim
- Word documents (.docx) go through LangChain's Docx2txtLoader
- PDFs go through LangChain's PyMuPDFLoader (one document per page)
- Anything else yields empty content

Loaders read from disk, so binary uploads are written to the upload
directory first and removed once parsed.
"""

import logging
import os
import uuid
from pathlib import Path

import aiofiles
from langchain_community.document_loaders import Docx2txtLoader, PyMuPDFLoader
from starlette.concurrency import run_in_threadpool

from app.core.config import get_settings
from app.core.errors import ExtractionError

logger = logging.getLogger(__name__)

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PDF_MIME = "application/pdf"

# Read verbatim regardless of the MIME type the browser reports
TEXT_SUFFIXES = {".txt", ".py", ".md", ".js", ".ts", ".java", ".c", ".cpp", ".h"}


def detect_kind(filename: str, content_type: str | None) -> str:
    """Classify an upload as "text", "docx", "pdf" or "unknown"."""
    suffix = Path(filename or "").suffix.lower()
    content_type = (content_type or "").lower()

    if content_type == "text/plain" or suffix in TEXT_SUFFIXES:
        return "text"
    if content_type == DOCX_MIME or suffix == ".docx":
        return "docx"
    if content_type == PDF_MIME or suffix == ".pdf":
        return "pdf"
    return "unknown"


def _load_pages(loader_cls, path: str) -> str:
    try:
        docs = loader_cls(path).load()
    except Exception as e:
        raise ExtractionError("Failed to parse document", str(e)) from e
    return "\n\n".join(doc.page_content for doc in docs).strip()


async def _extract_with_loader(loader_cls, data: bytes, suffix: str) -> str:
    settings = get_settings()
    os.makedirs(settings.upload_dir, exist_ok=True)
    path = os.path.join(settings.upload_dir, f"{uuid.uuid4()}{suffix}")

    async with aiofiles.open(path, "wb") as f:
        await f.write(data)

    try:
        return await run_in_threadpool(_load_pages, loader_cls, path)
    finally:
        if os.path.exists(path):
            os.remove(path)


async def extract_text(filename: str, content_type: str | None, data: bytes) -> str:
    """
    Extract plain text from an uploaded file.

    Args:
        filename: Original file name (used for the suffix)
        content_type: MIME type reported by the client
        data: Raw file bytes

    Returns:
        The extracted text. Empty for unsupported types and for documents
        that fail to parse; extraction never raises.
    """
    kind = detect_kind(filename, content_type)

    if kind == "text":
        return data.decode("utf-8", errors="replace")

    try:
        if kind == "docx":
            return await _extract_with_loader(Docx2txtLoader, data, ".docx")
        if kind == "pdf":
            return await _extract_with_loader(PyMuPDFLoader, data, ".pdf")
    except ExtractionError as e:
        logger.warning("Could not extract text from %r: %s", filename, e.details)
        return ""

    logger.warning("Unsupported upload type for %r (%s); storing empty content", filename, content_type)
    return ""
