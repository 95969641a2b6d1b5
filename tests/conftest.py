"""Shared fixtures for the FNOL intake test suite."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Callable

import pytest
from omegaconf import OmegaConf

from fnol_agent.core.rules import RuleTable
from fnol_agent.extraction.fields import FIELDS
from fnol_agent.extraction.source import FormFields, RawText
from fnol_agent.schemas.claim import (
    ROLE_CLAIMANT,
    AssetDetails,
    ClaimType,
    FNOLDocument,
    IncidentInformation,
    InvolvedParty,
    PhoneType,
    PolicyInformation,
)

DESCRIPTION_LABEL = FIELDS["incident_description"].form_label

# ---------------------------------------------------------------------------
# Structured form fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def form_values() -> dict[str, str]:
    """A fully filled automobile loss notice, keyed by exact form label."""
    return {
        "Text7": "POL-100",
        "NAME OF INSURED First Middle Last": "Jane Doe",
        "EFFECTIVE DATE": "2024-01-01",
        "Text3": "2024-02-01",
        "Text4": "10:30",
        "Check Box5": "Yes",
        "STREET LOCATION OF LOSS": "12 Elm St",
        "CITY STATE ZIP": "Springfield, IL 62704",
        "COUNTRY": "USA",
        DESCRIPTION_LABEL: "Rear-end collision at a stop light",
        "PHONE  CELL HOME BUS PRIMARY": "555-123-4567",
        "Check Box12": "Yes",
        "PRIMARY EMAIL ADDRESS": "jane.doe@example.com",
        "PLATE NUMBER": "ABC-1234",
        "Text45": "18,500.00",
    }


@pytest.fixture()
def form_source(form_values: dict[str, str]) -> FormFields:
    return FormFields(form_values)


# ---------------------------------------------------------------------------
# Free-text fixtures
# ---------------------------------------------------------------------------

SAMPLE_TEXT = """FIRST NOTICE OF LOSS
Policy Number: POL-2024-001
Policyholder Name: Jane Doe
Effective Date: 01/01/2024
Incident Date: 02/01/2024
Incident Time: 10:30 AM
Location: 12 Elm St, Springfield, IL 62704
Description: Rear-end collision at a stop light, bumper damaged.

Claimant Name: Jane Doe
Phone: 555-123-4567
Email: jane.doe@example.com

Third Party Name: John Roe
Phone: 555.987.6543
Email: john.roe@example.com

VIN: 1HGCM82633A004352
Estimated Damage: $18,500.00
Attachments: Photos of damage, Police report
"""


@pytest.fixture()
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture()
def text_source(sample_text: str) -> RawText:
    return RawText(sample_text)


# ---------------------------------------------------------------------------
# Rule table fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def strict_rules() -> RuleTable:
    """Lower fast-track line and a custom fraud vocabulary."""
    return RuleTable(
        fast_track_threshold=Decimal("10000"),
        high_value_threshold=Decimal("50000"),
        fraud_keywords=("collusion", "staged"),
    )


# ---------------------------------------------------------------------------
# Document factory
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_document() -> Callable[..., FNOLDocument]:
    """Return a builder for a complete FNOL document with per-test overrides.

    Keyword overrides replace whole sub-records (``policy_information=...``)
    or top-level values (``claim_type=...``, ``damage=...``,
    ``description=...``).
    """

    def _make(
        damage: Decimal = Decimal("18500.00"),
        description: str = "Rear-end collision at a stop light",
        **overrides: Any,
    ) -> FNOLDocument:
        values: dict[str, Any] = {
            "policy_information": PolicyInformation(
                policy_number="POL-100",
                policyholder_name="Jane Doe",
                effective_date=date(2024, 1, 1),
            ),
            "incident_information": IncidentInformation(
                incident_date=date(2024, 2, 1),
                incident_time="10:30 AM",
                location="12 Elm St, Springfield, IL 62704, USA",
                description=description,
            ),
            "involved_parties": [
                InvolvedParty(
                    name="Jane Doe",
                    role=ROLE_CLAIMANT,
                    primary_phone="555-123-4567",
                    primary_phone_type=PhoneType.CELL,
                )
            ],
            "asset_details": AssetDetails(
                asset_type="VEHICLE", asset_id="ABC-1234", estimated_damage=damage
            ),
            "claim_type": ClaimType.VEHICLE,
            "initial_estimate": damage,
            "attachments": ["photos.zip"],
        }
        values.update(overrides)
        return FNOLDocument(**values)

    return _make


# ---------------------------------------------------------------------------
# Hydra config fixture (test overrides)
# ---------------------------------------------------------------------------


@pytest.fixture()
def test_cfg() -> Any:
    """Return a minimal OmegaConf DictConfig with test overrides."""
    cfg_dict = {
        "logging": {
            "level": "WARNING",
            "colored": False,
            "format": "pretty",
        },
        "server": {
            "host": "127.0.0.1",
            "port": 8000,
            "debug": False,
            "cors_origins": ["http://localhost:3000"],
            "max_upload_bytes": 1_048_576,
        },
        "rules": {
            "fast_track_threshold": 25000,
            "high_value_threshold": 100000,
            "fraud_keywords": ["fraud", "inconsistent", "staged", "suspicious", "fake"],
        },
    }
    return OmegaConf.create(cfg_dict)
