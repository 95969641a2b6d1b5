"""Completeness checker: report missing mandatory attributes as dotted paths.

Group order and attribute order are fixed so the output is deterministic:
policy, incident, involved parties, asset, claim type, initial estimate.
"""

from __future__ import annotations

from typing import Any, Optional

from fnol_agent.schemas.claim import FNOLDocument


def _missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _group(
    prefix: str,
    record: Optional[Any],
    attributes: tuple[tuple[str, str], ...],
) -> list[str]:
    if record is None:
        return [prefix]
    return [f"{prefix}.{path}" for path, attr in attributes if _missing(getattr(record, attr))]


def find_missing_fields(document: FNOLDocument) -> list[str]:
    """Return the dotted paths of every missing mandatory attribute, in fixed order."""
    missing: list[str] = []

    missing += _group(
        "policyInformation",
        document.policy_information,
        (
            ("policyNumber", "policy_number"),
            ("policyholderName", "policyholder_name"),
            ("effectiveDate", "effective_date"),
        ),
    )
    missing += _group(
        "incidentInformation",
        document.incident_information,
        (
            ("incidentDate", "incident_date"),
            ("location", "location"),
            ("description", "description"),
        ),
    )

    if document.claimant is None:
        missing.append("involvedParties.claimant")

    missing += _group(
        "assetDetails",
        document.asset_details,
        (
            ("assetType", "asset_type"),
            ("assetId", "asset_id"),
            ("estimatedDamage", "estimated_damage"),
        ),
    )

    if document.claim_type is None:
        missing.append("claimType")
    if document.initial_estimate is None:
        missing.append("initialEstimate")

    return missing
