"""Tests for missing-field detection."""

from __future__ import annotations

from typing import Callable

from fnol_agent.core.completeness import find_missing_fields
from fnol_agent.schemas.claim import (
    AssetDetails,
    FNOLDocument,
    IncidentInformation,
    InvolvedParty,
    PolicyInformation,
)


class TestFindMissingFields:
    def test_complete_document(self, make_document: Callable[..., FNOLDocument]) -> None:
        assert find_missing_fields(make_document()) == []

    def test_blank_policy_number(self, make_document: Callable[..., FNOLDocument]) -> None:
        doc = make_document(
            policy_information=PolicyInformation(
                policy_number="  ", policyholder_name="Jane Doe", effective_date="2024-01-01"
            )
        )
        assert find_missing_fields(doc) == ["policyInformation.policyNumber"]

    def test_absent_record_reported_once(self, make_document: Callable[..., FNOLDocument]) -> None:
        assert find_missing_fields(make_document(policy_information=None)) == ["policyInformation"]

    def test_no_claimant(self, make_document: Callable[..., FNOLDocument]) -> None:
        doc = make_document(involved_parties=[InvolvedParty(name="Bob", role="WITNESS")])
        assert find_missing_fields(doc) == ["involvedParties.claimant"]

    def test_optional_fields_not_required(self, make_document: Callable[..., FNOLDocument]) -> None:
        doc = make_document(
            incident_information=IncidentInformation(
                incident_date="2024-02-01", location="Elm St", description="Hit a pole"
            ),
            attachments=[],
        )
        assert find_missing_fields(doc) == []

    def test_fixed_order(self) -> None:
        doc = FNOLDocument(
            policy_information=PolicyInformation(),
            incident_information=IncidentInformation(),
            asset_details=AssetDetails(),
        )
        assert find_missing_fields(doc) == [
            "policyInformation.policyNumber",
            "policyInformation.policyholderName",
            "policyInformation.effectiveDate",
            "incidentInformation.incidentDate",
            "incidentInformation.location",
            "incidentInformation.description",
            "involvedParties.claimant",
            "assetDetails.assetType",
            "assetDetails.assetId",
            "assetDetails.estimatedDamage",
            "claimType",
            "initialEstimate",
        ]

    def test_empty_document(self) -> None:
        assert find_missing_fields(FNOLDocument()) == [
            "policyInformation",
            "incidentInformation",
            "involvedParties.claimant",
            "assetDetails",
            "claimType",
            "initialEstimate",
        ]
