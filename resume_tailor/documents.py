"""Read plain text out of resume and job description files."""
from __future__ import annotations

from pathlib import Path
from typing import Union

from .exceptions import DocumentExtractionError
from .logger import get_logger

log = get_logger("documents")

SUPPORTED_SUFFIXES = (".txt", ".pdf", ".docx")


def _coerce_path(path: Union[str, Path]) -> Path:
    if isinstance(path, Path):
        return path
    return Path(path)


def extract_text_from_pdf(path: Path) -> str:
    """Extract raw text from a PDF file with pdfminer.six."""

    try:
        from pdfminer.high_level import extract_text  # type: ignore
    except ImportError as exc:  # pragma: no cover - import error is environment specific
        raise DocumentExtractionError(
            "Failed to import pdfminer.six. Install it with 'pip install pdfminer.six'."
        ) from exc

    try:
        return extract_text(str(path))
    except Exception as exc:  # pragma: no cover - pdfminer errors difficult to trigger reliably
        raise DocumentExtractionError(f"Failed to extract text from {path}") from exc


def extract_text_from_docx(path: Path) -> str:
    """Join the paragraphs of a Word document with newlines."""

    try:
        from docx import Document
    except ImportError as exc:  # pragma: no cover - dependency guard
        raise DocumentExtractionError(
            "python-docx is required to read Word documents. Install it with 'pip install python-docx'."
        ) from exc

    try:
        document = Document(str(path))
    except Exception as exc:
        raise DocumentExtractionError(f"Failed to open Word document {path}") from exc
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def extract_text_from_txt(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentExtractionError(
            f"Could not decode {path}. Please ensure it is UTF-8 encoded."
        ) from exc


def read_document(path: Union[str, Path]) -> str:
    """Return the text content of a ``.txt``, ``.pdf`` or ``.docx`` file.

    Raises
    ------
    DocumentExtractionError
        If the file is missing, has an unsupported extension, cannot be
        parsed, or contains no text.
    """

    doc_path = _coerce_path(path)
    if not doc_path.exists():
        raise DocumentExtractionError(f"File not found: {doc_path}")

    suffix = doc_path.suffix.lower()
    if suffix == ".pdf":
        text = extract_text_from_pdf(doc_path)
    elif suffix == ".docx":
        text = extract_text_from_docx(doc_path)
    elif suffix == ".txt":
        text = extract_text_from_txt(doc_path)
    else:
        raise DocumentExtractionError(
            f"Unsupported file type '{suffix}'. Use one of: {', '.join(SUPPORTED_SUFFIXES)}."
        )

    if not text.strip():
        raise DocumentExtractionError(f"No text could be extracted from {doc_path}")

    log.debug(f"Read {len(text)} characters from {doc_path.name}")
    return text
