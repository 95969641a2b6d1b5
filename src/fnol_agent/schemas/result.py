"""Pydantic models for the externally visible processing result."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RoutingDecision(str, Enum):
    """Where a claim goes next."""

    FAST_TRACK = "FAST_TRACK"
    MANUAL_REVIEW = "MANUAL_REVIEW"
    INVESTIGATION = "INVESTIGATION"
    SPECIALIST_QUEUE = "SPECIALIST_QUEUE"
    STANDARD_PROCESSING = "STANDARD_PROCESSING"

    @property
    def label(self) -> str:
        return _ROUTE_LABELS[self]


_ROUTE_LABELS = {
    RoutingDecision.FAST_TRACK: "Fast-track processing - low damage amount",
    RoutingDecision.MANUAL_REVIEW: "Manual review required - missing or incomplete information",
    RoutingDecision.INVESTIGATION: "Investigation required - fraud indicators detected",
    RoutingDecision.SPECIALIST_QUEUE: "Specialist queue - injury claim",
    RoutingDecision.STANDARD_PROCESSING: "Standard processing workflow",
}


class ProcessingStatus(str, Enum):
    SUCCESS = "SUCCESS"
    PARTIAL = "PARTIAL"
    INCOMPLETE = "INCOMPLETE"
    FAILED = "FAILED"


class ProcessingResult(BaseModel):
    """Response payload for one processed document.

    ``None`` members are dropped on serialization: ``warnings`` disappears
    when there is nothing to warn about and a FAILED result carries only
    ``status`` and ``errors``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    extracted_fields: Optional[dict[str, Any]] = Field(
        default=None, description="Flattened claim groups, only non-empty ones"
    )
    missing_fields: Optional[list[str]] = Field(
        default=None, description="Dotted paths of missing mandatory attributes"
    )
    recommended_route: Optional[RoutingDecision] = None
    reasoning: Optional[str] = None
    status: ProcessingStatus
    warnings: Optional[list[str]] = None
    errors: Optional[list[str]] = None

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready camelCase payload."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
