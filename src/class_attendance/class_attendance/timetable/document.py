from __future__ import annotations

import io
from typing import BinaryIO, Optional, Union

import pdfplumber

from ..core.exceptions import ValidationError

PDF_MAGIC = b"%PDF"


def extract_pdf_text(source: Union[str, BinaryIO]) -> str:
    """Concatenate the text of every page, pages joined with a single space."""
    parts: list[str] = []
    with pdfplumber.open(source) as pdf:
        for page in pdf.pages:
            text = page.extract_text()
            if not text:
                continue
            parts.append(text)
    return " ".join(parts)


def extract_document_text(data: bytes, *, filename: Optional[str] = None) -> str:
    """Text of an uploaded timetable (PDF, or plain UTF-8 text)."""
    if not data:
        raise ValidationError("Timetable file is empty")

    if data.startswith(PDF_MAGIC) or (filename or "").lower().endswith(".pdf"):
        try:
            return extract_pdf_text(io.BytesIO(data))
        except Exception as e:
            raise ValidationError(f"Failed to process PDF. {e}")

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raise ValidationError("Unsupported timetable file")
