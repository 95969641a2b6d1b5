"""Pydantic schemas for the FNOL intake pipeline."""

from fnol_agent.schemas.claim import (
    AssetDetails,
    ClaimType,
    FNOLDocument,
    IncidentInformation,
    InvolvedParty,
    PhoneType,
    PolicyInformation,
)
from fnol_agent.schemas.result import ProcessingResult, ProcessingStatus, RoutingDecision

__all__ = [
    "AssetDetails",
    "ClaimType",
    "FNOLDocument",
    "IncidentInformation",
    "InvolvedParty",
    "PhoneType",
    "PolicyInformation",
    "ProcessingResult",
    "ProcessingStatus",
    "RoutingDecision",
]
