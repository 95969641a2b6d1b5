"""Tests for result assembly and status determination."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

import pytest

from fnol_agent.core.result import build_result, determine_status, extracted_fields, failed_result
from fnol_agent.core.routing import RoutingEngine
from fnol_agent.schemas.claim import FNOLDocument
from fnol_agent.schemas.result import ProcessingStatus, RoutingDecision


class TestDetermineStatus:
    @pytest.mark.parametrize(
        ("count", "expected"),
        [
            (0, ProcessingStatus.SUCCESS),
            (1, ProcessingStatus.PARTIAL),
            (3, ProcessingStatus.PARTIAL),
            (4, ProcessingStatus.INCOMPLETE),
            (9, ProcessingStatus.INCOMPLETE),
        ],
    )
    def test_thresholds(self, count: int, expected: ProcessingStatus) -> None:
        assert determine_status([f"field{i}" for i in range(count)]) is expected


class TestExtractedFields:
    def test_group_order_and_aliases(self, make_document: Callable[..., FNOLDocument]) -> None:
        fields = extracted_fields(make_document())
        assert list(fields) == [
            "policyInformation",
            "incidentInformation",
            "involvedParties",
            "assetDetails",
            "claimType",
            "initialEstimate",
            "attachments",
        ]
        assert fields["policyInformation"]["effectiveDate"] == "2024-01-01"
        assert fields["assetDetails"]["estimatedDamage"] == "18500.00"
        assert fields["involvedParties"][0]["primaryPhoneType"] == "CELL"

    def test_empty_groups_dropped(self) -> None:
        assert extracted_fields(FNOLDocument()) == {}

    def test_null_members_dropped(self, make_document: Callable[..., FNOLDocument]) -> None:
        party = extracted_fields(make_document())["involvedParties"][0]
        assert "secondaryPhone" not in party


class TestBuildResult:
    def test_success_payload(self, make_document: Callable[..., FNOLDocument]) -> None:
        doc = make_document()
        outcome = RoutingEngine().decide(doc, [])
        payload = build_result(doc, [], outcome).to_payload()
        assert payload["status"] == "SUCCESS"
        assert payload["recommendedRoute"] == "FAST_TRACK"
        assert payload["missingFields"] == []
        assert "warnings" not in payload
        assert "errors" not in payload

    def test_warnings_kept(self, make_document: Callable[..., FNOLDocument]) -> None:
        doc = make_document(damage=Decimal("250000"))
        result = build_result(doc, [], RoutingEngine().decide(doc, []))
        assert result.recommended_route is RoutingDecision.STANDARD_PROCESSING
        assert result.warnings == ["High damage amount - may require additional approval"]


class TestFailedResult:
    def test_from_exception(self) -> None:
        result = failed_result(RuntimeError("disk on fire"))
        assert result.to_payload() == {
            "status": "FAILED",
            "errors": ["Error processing document: disk on fire"],
        }

    def test_from_message(self) -> None:
        assert failed_result("File is empty").errors == ["File is empty"]
