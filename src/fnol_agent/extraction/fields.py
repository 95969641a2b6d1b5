"""Declarative field table shared by the structured and free-text strategies.

Each logical field names the exact label used on the fillable form and the
label pattern that introduces it in free text.  The strategies interpret the
same table; the claim assembler only ever refers to logical field names.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional

from fnol_agent.schemas.claim import (
    ROLE_CLAIMANT,
    ROLE_THIRD_PARTY_DRIVER,
    ROLE_THIRD_PARTY_OWNER,
)


class FieldKind(str, Enum):
    """Selects the accessor :meth:`ExtractionStrategy.value` reads a field with."""

    TEXT = "text"
    NAME = "name"
    DATE = "date"
    TIME = "time"
    AMOUNT = "amount"
    CHECKBOX = "checkbox"
    PRESENCE = "presence"


@dataclass(frozen=True)
class FieldSpec:
    """How one logical field is found in either source variant.

    ``text_label`` is a regex for the label that precedes the value in free
    text.  ``window`` bounds the scan after that label for dates, times and
    amounts.  ``text_exclude`` vetoes a free-text flag when it also matches.
    ``text_pattern`` names a dedicated :class:`PatternLibrary` pattern used
    instead of the generic label scan.
    """

    name: str
    kind: FieldKind
    form_label: Optional[str] = None
    text_label: Optional[str] = None
    window: int = 200
    text_exclude: Optional[str] = None
    text_pattern: Optional[str] = None


@dataclass(frozen=True)
class PartySpec:
    """Where a party's details live, on the form and in free text."""

    role: str
    name_label: str
    primary_phone_label: str
    primary_type_labels: tuple[str, str, str]  # home, bus, cell
    secondary_phone_label: str
    secondary_type_labels: tuple[str, str, str]
    primary_email_label: str
    secondary_email_label: str
    section_pattern: str
    section_window: int
    name_pattern: str
    name_in_section: bool = True


_DESCRIPTION_LABEL = (
    "DESCRIPTION OF ACCIDENT ACORD 101 Additional Remarks Schedule may be attached "
    "if more space is required"
)

_SPECS = (
    # Policy
    FieldSpec(
        "policy_number", FieldKind.TEXT, form_label="Text7", text_pattern="policy_number"
    ),
    FieldSpec(
        "policyholder_name",
        FieldKind.NAME,
        form_label="NAME OF INSURED First Middle Last",
        text_pattern="policyholder",
    ),
    FieldSpec(
        "agency_customer_id",
        FieldKind.TEXT,
        form_label="AGENCY CUSTOMER ID",
        text_label=r"(?:Agency\s+Customer\s+ID|Customer\s+ID)",
    ),
    FieldSpec(
        "effective_date",
        FieldKind.DATE,
        form_label="EFFECTIVE DATE",
        text_label=r"Effective\s+Dates?",
    ),
    # Incident
    FieldSpec(
        "incident_date",
        FieldKind.DATE,
        form_label="Text3",
        text_label=r"(?:Incident\s+Date|Date\s+of\s+Loss)",
    ),
    FieldSpec(
        "incident_time",
        FieldKind.TIME,
        form_label="Text4",
        text_label=r"(?:Incident\s+Time|Time)",
        window=100,
    ),
    FieldSpec("time_am", FieldKind.CHECKBOX, form_label="Check Box5"),
    FieldSpec("time_pm", FieldKind.CHECKBOX, form_label="Check Box6"),
    FieldSpec(
        "loss_street",
        FieldKind.TEXT,
        form_label="STREET LOCATION OF LOSS",
        text_label=r"Street(?:\s+Address)?",
    ),
    FieldSpec(
        "loss_city_state_zip",
        FieldKind.TEXT,
        form_label="CITY STATE ZIP",
        text_label=r"City(?:[\s,/]+State)?(?:[\s,/]+Zip)?",
    ),
    FieldSpec("loss_country", FieldKind.TEXT, form_label="COUNTRY", text_label=r"Country"),
    FieldSpec(
        "loss_location_described",
        FieldKind.TEXT,
        form_label="DESCRIBE LOCATION OF LOSS IF NOT AT SPECIFIC STREET ADDRESS",
        text_label=r"(?:Loss\s+Location|Location|Scene)",
    ),
    FieldSpec(
        "incident_description",
        FieldKind.TEXT,
        form_label=_DESCRIPTION_LABEL,
        text_pattern="description",
    ),
    # Parties
    FieldSpec(
        "driver_same_as_owner",
        FieldKind.CHECKBOX,
        form_label="Check Box55",
        text_label=r"same\s+as\s+owner",
    ),
    # Asset
    FieldSpec("vin", FieldKind.TEXT, text_pattern="vin"),
    FieldSpec(
        "plate_number",
        FieldKind.TEXT,
        form_label="PLATE NUMBER",
        text_label=r"(?:Plate\s+Number|License\s+Plate)",
    ),
    FieldSpec(
        "estimated_damage",
        FieldKind.AMOUNT,
        form_label="Text45",
        text_label=r"(?:Estimated\s+Damage|Damage\s+Estimate)",
        window=100,
    ),
    FieldSpec(
        "damage_description",
        FieldKind.TEXT,
        form_label="DESCRIBE DAMAGE",
        text_label=r"(?:Describe\s+Damage|Damage\s+Description)",
    ),
    # Claim classification
    FieldSpec(
        "injury_reported",
        FieldKind.PRESENCE,
        form_label="NAME  ADDRESSRow1",
        text_label=r"(?:injury|bodily\s+harm)",
    ),
    FieldSpec(
        "property_damage",
        FieldKind.CHECKBOX,
        form_label="Check Box46",
        text_label=r"property\s+damage",
        text_exclude=r"vehicle",
    ),
    FieldSpec(
        "attachments",
        FieldKind.TEXT,
        text_label=r"(?:Attachments|Supporting\s+Documents)",
        window=200,
    ),
)

FIELDS = MappingProxyType({spec.name: spec for spec in _SPECS})


PARTY_SPECS = (
    PartySpec(
        role=ROLE_CLAIMANT,
        name_label="NAME OF INSURED First Middle Last",
        primary_phone_label="PHONE  CELL HOME BUS PRIMARY",
        primary_type_labels=("Check Box10", "Check Box11", "Check Box12"),
        secondary_phone_label="PHONE  SECONDARY CELL HOME BUS",
        secondary_type_labels=("Check Box13", "Check Box14", "Check Box15"),
        primary_email_label="PRIMARY EMAIL ADDRESS",
        secondary_email_label="SECONDARY EMAIL ADDRESS",
        section_pattern=r"(?:Claimant|Insured)",
        section_window=300,
        name_pattern=r"(?:Claimant|Insured|Policyholder)(?:\s+(?:Name|Information))?",
        name_in_section=False,
    ),
    PartySpec(
        role=ROLE_THIRD_PARTY_OWNER,
        name_label="Text48",
        primary_phone_label="PHONE  CELL HOME BUS PRIMARY_5",
        primary_type_labels=("Check Box49", "Check Box50", "Check Box51"),
        secondary_phone_label="PHONE  SECONDARY CELL HOME BUS_5",
        secondary_type_labels=("Check Box52", "Check Box53", "Check Box54"),
        primary_email_label="PRIMARY EMAIL ADDRESS_5",
        secondary_email_label="SECONDARY EMAIL ADDRESS_5",
        section_pattern=r"(?:Third\s+Party|Other\s+(?:Vehicle|Driver)|Owner)",
        section_window=400,
        name_pattern=r"(?:Name|Third\s+Party|Owner)",
    ),
    PartySpec(
        role=ROLE_THIRD_PARTY_DRIVER,
        name_label="Text81",
        primary_phone_label="PHONE  CELL HOME BUS PRIMARY_6",
        primary_type_labels=("Check Box56", "Check Box57", "Check Box58"),
        secondary_phone_label="DRIVER SECONDARY PHONE",
        secondary_type_labels=("Check Box59", "Check Box60", "Check Box61"),
        primary_email_label="PRIMARY EMAIL ADDRESS_6",
        secondary_email_label="SECONDARY EMAIL ADDRESS_6",
        section_pattern=r"Driver",
        section_window=300,
        name_pattern=r"Driver(?:\s+Name)?",
    ),
)

PARTIES = MappingProxyType({spec.role: spec for spec in PARTY_SPECS})
