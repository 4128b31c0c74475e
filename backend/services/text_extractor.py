"""Plain-text extraction from uploaded resume documents.

Works on in-memory bytes only; nothing is written to disk.
"""

import io
import logging
from collections.abc import Callable
from enum import Enum

import pdfplumber
from docx import Document

from services.errors import DocumentParseError, UnsupportedFormatError

logger = logging.getLogger(__name__)


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"


def format_from_filename(filename: str | None) -> str:
    """Lower-cased extension after the last dot, or "" when there is none."""
    if not filename or "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def supported_format(fmt: str | None) -> DocumentFormat:
    """Resolve a format tag, raising UnsupportedFormatError for anything but pdf/docx."""
    try:
        return DocumentFormat((fmt or "").lower())
    except ValueError:
        raise UnsupportedFormatError() from None


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract raw paragraph text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


_EXTRACTORS: dict[DocumentFormat, Callable[[bytes], str]] = {
    DocumentFormat.PDF: extract_text_pdf,
    DocumentFormat.DOCX: extract_text_docx,
}


def extract_text(data: bytes, fmt: str | None) -> str:
    """Convert document bytes of the given format tag into plain text.

    Raises UnsupportedFormatError for any tag other than pdf/docx, and
    DocumentParseError when a supported document cannot be parsed. An empty
    result is returned as-is.
    """
    document_format = supported_format(fmt)

    try:
        text = _EXTRACTORS[document_format](data)
    except Exception as e:
        logger.warning("Failed to parse %s document: %s", document_format.value, e)
        raise DocumentParseError() from e

    logger.debug("Extracted %d chars from %s document", len(text), document_format.value)
    return text
