"""Tests for building the FNOL aggregate from an extraction strategy."""

from __future__ import annotations

from decimal import Decimal

from fnol_agent.core.assembler import assemble_document, build_parties, classify_claim
from fnol_agent.extraction import FormFields, FreeTextStrategy, RawText, StructuredStrategy
from fnol_agent.schemas.claim import (
    ROLE_CLAIMANT,
    ROLE_THIRD_PARTY_DRIVER,
    ROLE_THIRD_PARTY_OWNER,
    ClaimType,
)


class TestAssembleDocument:
    def test_structured_document(self, form_source: FormFields) -> None:
        doc = assemble_document(StructuredStrategy(form_source))
        assert doc.policy_information is not None
        assert doc.policy_information.policy_number == "POL-100"
        assert doc.incident_information is not None
        assert doc.incident_information.incident_time == "10:30 AM"
        assert doc.asset_details is not None
        assert doc.asset_details.asset_id == "ABC-1234"
        assert doc.claim_type is ClaimType.VEHICLE
        assert doc.attachments == []

    def test_initial_estimate_mirrors_asset_damage(self, form_source: FormFields) -> None:
        doc = assemble_document(StructuredStrategy(form_source))
        assert doc.initial_estimate == Decimal("18500.00")
        assert doc.initial_estimate == doc.estimated_damage

    def test_free_text_document(self, text_source: RawText) -> None:
        doc = assemble_document(FreeTextStrategy(text_source))
        assert [p.role for p in doc.involved_parties] == [ROLE_CLAIMANT, ROLE_THIRD_PARTY_OWNER]
        assert doc.attachments == ["Photos of damage", "Police report"]
        assert doc.asset_details is not None
        assert doc.asset_details.asset_id == "1HGCM82633A004352"

    def test_empty_form_still_has_records(self) -> None:
        doc = assemble_document(StructuredStrategy(FormFields({})))
        assert doc.policy_information is not None
        assert doc.policy_information.policy_number is None
        assert doc.claimant is not None
        assert doc.claimant.name is None
        assert doc.initial_estimate is None


class TestBuildParties:
    def test_claimant_always_present(self) -> None:
        parties = build_parties(StructuredStrategy(FormFields({})))
        assert [p.role for p in parties] == [ROLE_CLAIMANT]

    def test_owner_then_driver(self, form_values: dict[str, str]) -> None:
        form_values.update({"Text48": "John Roe", "Text81": "Rick Roe"})
        parties = build_parties(StructuredStrategy(FormFields(form_values)))
        assert [(p.role, p.name) for p in parties] == [
            (ROLE_CLAIMANT, "Jane Doe"),
            (ROLE_THIRD_PARTY_OWNER, "John Roe"),
            (ROLE_THIRD_PARTY_DRIVER, "Rick Roe"),
        ]

    def test_driver_skipped_when_same_as_owner(self, form_values: dict[str, str]) -> None:
        form_values.update({"Text48": "John Roe", "Text81": "John Roe", "Check Box55": "Yes"})
        parties = build_parties(StructuredStrategy(FormFields(form_values)))
        assert [p.role for p in parties] == [ROLE_CLAIMANT, ROLE_THIRD_PARTY_OWNER]

    def test_free_text_driver_with_owner_name_skipped(self) -> None:
        strategy = FreeTextStrategy(
            RawText("Claimant: Jane Doe\n\nThird Party Name: John Roe\n\nDriver Name: John Roe\n")
        )
        assert [p.role for p in build_parties(strategy)] == [
            ROLE_CLAIMANT,
            ROLE_THIRD_PARTY_OWNER,
        ]


class TestClassifyClaim:
    def test_injury_wins_over_property(self) -> None:
        strategy = StructuredStrategy(
            FormFields({"NAME  ADDRESSRow1": "Bob Smith", "Check Box46": "Yes"})
        )
        assert classify_claim(strategy) is ClaimType.INJURY

    def test_property(self) -> None:
        assert classify_claim(StructuredStrategy(FormFields({"Check Box46": "Yes"}))) is (
            ClaimType.PROPERTY
        )

    def test_vehicle_default(self) -> None:
        assert classify_claim(StructuredStrategy(FormFields({}))) is ClaimType.VEHICLE

    def test_free_text_injury(self) -> None:
        strategy = FreeTextStrategy(RawText("Driver sustained an injury to the neck."))
        assert classify_claim(strategy) is ClaimType.INJURY
