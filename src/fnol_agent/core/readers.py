"""Document readers: decode uploaded bytes into a field source.

PDF intake forms are read through their AcroForm fields; a PDF without a
form falls back to its page text.  Plain-text files are decoded as UTF-8.
"""

from __future__ import annotations

from io import BytesIO
from pathlib import PurePath
from typing import Any

from loguru import logger
from PyPDF2 import PdfReader
from PyPDF2.generic import NameObject

from fnol_agent.extraction.source import FieldSource, FormFields, RawText

SUPPORTED_SUFFIXES = (".pdf", ".txt")


class DocumentRejectedError(ValueError):
    """The upload is not something the pipeline can be run on."""


class EmptyDocumentError(DocumentRejectedError):
    pass


class UnsupportedDocumentError(DocumentRejectedError):
    pass


def read_document(filename: str, content: bytes) -> FieldSource:
    """Turn an uploaded file into :class:`FormFields` or :class:`RawText`.

    Raises
    ------
    EmptyDocumentError
        If *content* is empty.
    UnsupportedDocumentError
        If the extension is not ``.pdf`` or ``.txt``.
    """
    if not content:
        raise EmptyDocumentError("File is empty")

    suffix = PurePath(filename or "").suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedDocumentError("Invalid file type. Only PDF and TXT files are supported.")

    if suffix == ".txt":
        text = content.decode("utf-8", errors="replace")
        logger.info("Read text document {name} ({n} chars)", name=filename, n=len(text))
        return RawText(text)

    return _read_pdf(filename, content)


def _read_pdf(filename: str, content: bytes) -> FieldSource:
    reader = PdfReader(BytesIO(content))
    fields = reader.get_fields() or {}

    if fields:
        form = {name: value for name, field in fields.items() if (value := _field_value(field))}
        logger.info(
            "Read PDF form {name}: {n} filled of {total} fields",
            name=filename,
            n=len(form),
            total=len(fields),
        )
        return FormFields(form)

    pages = [page.extract_text() or "" for page in reader.pages]
    text = "\n".join(p for p in pages if p.strip())
    logger.info(
        "PDF {name} has no form fields; using page text ({n} chars)",
        name=filename,
        n=len(text),
    )
    return RawText(text)


def _field_value(field: Any) -> str:
    """Stripped ``/V`` value of a form field; checkbox names lose their slash."""
    value = field.get("/V") if hasattr(field, "get") else None
    if value is None:
        return ""
    if isinstance(value, NameObject):
        return str(value).lstrip("/")
    if isinstance(value, list):
        return ", ".join(str(v) for v in value).strip()
    return str(value).strip()
