"""Result assembler: flatten the aggregate and routing outcome into the payload."""

from __future__ import annotations

from typing import Any

from fnol_agent.core.routing import RoutingOutcome
from fnol_agent.schemas.claim import FNOLDocument
from fnol_agent.schemas.result import ProcessingResult, ProcessingStatus

# Output order of the extracted-field groups.
_GROUPS = (
    "policyInformation",
    "incidentInformation",
    "involvedParties",
    "assetDetails",
    "claimType",
    "initialEstimate",
    "attachments",
)

PARTIAL_LIMIT = 3


def determine_status(missing_fields: list[str]) -> ProcessingStatus:
    """0 missing -> SUCCESS, 1-3 -> PARTIAL, 4 or more -> INCOMPLETE."""
    if not missing_fields:
        return ProcessingStatus.SUCCESS
    if len(missing_fields) <= PARTIAL_LIMIT:
        return ProcessingStatus.PARTIAL
    return ProcessingStatus.INCOMPLETE


def extracted_fields(document: FNOLDocument) -> dict[str, Any]:
    """Key-ordered map of the non-null, non-empty claim groups."""
    dumped = document.model_dump(mode="json", by_alias=True, exclude_none=True)
    return {key: dumped[key] for key in _GROUPS if dumped.get(key) not in (None, [])}


def build_result(
    document: FNOLDocument,
    missing_fields: list[str],
    outcome: RoutingOutcome,
) -> ProcessingResult:
    return ProcessingResult(
        extracted_fields=extracted_fields(document),
        missing_fields=list(missing_fields),
        recommended_route=outcome.decision,
        reasoning=outcome.reasoning,
        status=determine_status(missing_fields),
        # Empty warning lists are dropped from the payload.
        warnings=list(outcome.warnings) or None,
    )


def failed_result(error: BaseException | str) -> ProcessingResult:
    """FAILED result with one error message and no partial fields."""
    message = error if isinstance(error, str) else f"Error processing document: {error}"
    return ProcessingResult(status=ProcessingStatus.FAILED, errors=[message])
