"""FNOL intake routes.

Endpoints
---------
POST /api/v1/fnol/process
    Multipart upload of a PDF or TXT intake document.

POST /api/v1/fnol/process/fields
    JSON body carrying already-decoded form fields or raw text.

GET  /api/v1/health
    Lightweight health-check.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, Field, model_validator

from fnol_agent.core.readers import DocumentRejectedError, read_document
from fnol_agent.core.result import failed_result
from fnol_agent.extraction.source import FieldSource, FormFields, RawText
from fnol_agent.schemas.result import ProcessingResult, ProcessingStatus

router = APIRouter()


class DecodedDocument(BaseModel):
    """A document the caller has already decoded: form fields or raw text."""

    fields: Optional[dict[str, str]] = Field(default=None, description="Form label -> value")
    text: Optional[str] = Field(default=None, description="Raw document text")

    @model_validator(mode="after")
    def _exactly_one(self) -> DecodedDocument:
        if (self.fields is None) == (self.text is None):
            raise ValueError("Provide exactly one of 'fields' or 'text'")
        return self

    def to_source(self) -> FieldSource:
        if self.fields is not None:
            return FormFields(self.fields)
        return RawText(self.text or "")


def _respond(result: ProcessingResult, status_code: Optional[int] = None) -> JSONResponse:
    if status_code is None:
        status_code = 500 if result.status is ProcessingStatus.FAILED else 200
    return JSONResponse(status_code=status_code, content=result.to_payload())


# ---------------------------------------------------------------------------
# POST /fnol/process
# ---------------------------------------------------------------------------


@router.post(
    "/fnol/process",
    response_model=ProcessingResult,
    response_model_exclude_none=True,
    summary="Process FNOL document",
    description=(
        "Upload a First Notice of Loss document (PDF or TXT). Extracts key fields, "
        "lists missing information and routes the claim."
    ),
)
async def process_document(request: Request, file: UploadFile = File(...)) -> JSONResponse:
    filename = file.filename or ""
    limit: int = request.app.state.cfg.server.max_upload_bytes

    # Never hold more than limit + 1 bytes, whether or not the size is known.
    size = file.size
    content = b"" if size is not None and size > limit else await file.read(limit + 1)
    if size is None or len(content) > limit:
        size = len(content)
    logger.info("API: received {name} ({n} bytes)", name=filename, n=size)

    if size > limit:
        logger.warning(
            "API: rejected {name}, {n} bytes exceeds {limit}",
            name=filename,
            n=size,
            limit=limit,
        )
        return _respond(failed_result(f"File exceeds the {limit} byte upload limit"), 413)

    try:
        source = read_document(filename, content)
    except DocumentRejectedError as exc:
        logger.warning("API: rejected {name}: {err}", name=filename, err=exc)
        return _respond(failed_result(str(exc)), 400)

    result = request.app.state.processor.process(source)
    logger.info(
        "API: {name} processed, status={status}",
        name=filename,
        status=result.status.value,
    )
    return _respond(result)


# ---------------------------------------------------------------------------
# POST /fnol/process/fields
# ---------------------------------------------------------------------------


@router.post(
    "/fnol/process/fields",
    response_model=ProcessingResult,
    response_model_exclude_none=True,
    summary="Process a decoded FNOL document",
    description="Run the pipeline on form fields or text the caller has already extracted.",
)
async def process_decoded(document: DecodedDocument, request: Request) -> JSONResponse:
    result = request.app.state.processor.process(document.to_source())
    return _respond(result)


# ---------------------------------------------------------------------------
# GET /health
# ---------------------------------------------------------------------------


@router.get("/health", summary="Health check")
async def health() -> dict:
    return {"status": "healthy", "service": "fnol-intake"}
