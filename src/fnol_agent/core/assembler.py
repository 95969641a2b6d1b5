"""Claim assembler: build the FNOL aggregate from an extraction strategy."""

from __future__ import annotations

from loguru import logger

from fnol_agent.extraction.base import ExtractionStrategy
from fnol_agent.extraction.fields import FIELDS, PARTIES
from fnol_agent.schemas.claim import (
    ROLE_CLAIMANT,
    ROLE_THIRD_PARTY_DRIVER,
    ROLE_THIRD_PARTY_OWNER,
    AssetDetails,
    ClaimType,
    FNOLDocument,
    IncidentInformation,
    InvolvedParty,
    PolicyInformation,
)


def assemble_document(strategy: ExtractionStrategy) -> FNOLDocument:
    """Build one :class:`FNOLDocument` from whatever *strategy* can find.

    Missing values stay ``None``; completeness is judged afterwards by
    :func:`fnol_agent.core.completeness.find_missing_fields`.
    """
    asset = build_asset(strategy)
    document = FNOLDocument(
        policy_information=build_policy(strategy),
        incident_information=build_incident(strategy),
        involved_parties=build_parties(strategy),
        asset_details=asset,
        claim_type=classify_claim(strategy),
        # Single source of truth: the estimate is the asset's damage figure.
        initial_estimate=asset.estimated_damage,
        attachments=strategy.attachments(),
    )
    logger.info(
        "Assembled FNOL document: parties={parties} claim_type={ct} attachments={att}",
        parties=len(document.involved_parties),
        ct=document.claim_type.value if document.claim_type else None,
        att=len(document.attachments),
    )
    return document


# ---------------------------------------------------------------------------
# Sub-records
# ---------------------------------------------------------------------------


def build_policy(strategy: ExtractionStrategy) -> PolicyInformation:
    return PolicyInformation(
        policy_number=strategy.value(FIELDS["policy_number"]),
        policyholder_name=strategy.value(FIELDS["policyholder_name"]),
        agency_customer_id=strategy.value(FIELDS["agency_customer_id"]),
        effective_date=strategy.value(FIELDS["effective_date"]),
    )


def build_incident(strategy: ExtractionStrategy) -> IncidentInformation:
    return IncidentInformation(
        incident_date=strategy.value(FIELDS["incident_date"]),
        incident_time=strategy.value(FIELDS["incident_time"]),
        location=strategy.location(),
        description=strategy.value(FIELDS["incident_description"]),
    )


def build_parties(strategy: ExtractionStrategy) -> list[InvolvedParty]:
    """Claimant always; owner when named; driver when named and not the owner."""
    claimant = strategy.party(PARTIES[ROLE_CLAIMANT])
    owner = strategy.party(PARTIES[ROLE_THIRD_PARTY_OWNER])
    driver = strategy.party(PARTIES[ROLE_THIRD_PARTY_DRIVER])

    parties = [claimant]
    if owner.name:
        parties.append(owner)
    if driver.name:
        if strategy.driver_same_as_owner(owner, driver):
            logger.debug("Driver is the owner; skipping duplicate party")
        else:
            parties.append(driver)
    return parties


def build_asset(strategy: ExtractionStrategy) -> AssetDetails:
    return AssetDetails(
        asset_type=strategy.asset_type(),
        asset_id=strategy.asset_id(),
        estimated_damage=strategy.value(FIELDS["estimated_damage"]),
        description=strategy.value(FIELDS["damage_description"]),
    )


def classify_claim(strategy: ExtractionStrategy) -> ClaimType:
    if strategy.value(FIELDS["injury_reported"]):
        return ClaimType.INJURY
    if strategy.value(FIELDS["property_damage"]):
        return ClaimType.PROPERTY
    return ClaimType.VEHICLE
