"""Pydantic models for the FNOL claim aggregate.

Every record is created once per document by the claim assembler and never
mutated afterwards, so all models are frozen.  Python code uses snake_case
attribute names; serialized payloads use camelCase aliases.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Known party roles.  Roles are open strings so new ones need no schema change.
ROLE_CLAIMANT = "CLAIMANT"
ROLE_THIRD_PARTY_OWNER = "THIRD_PARTY_OWNER"
ROLE_THIRD_PARTY_DRIVER = "THIRD_PARTY_DRIVER"
ROLE_WITNESS = "WITNESS"

DEFAULT_FRAUD_KEYWORDS: tuple[str, ...] = ("fraud", "inconsistent", "staged", "suspicious", "fake")


class PhoneType(str, Enum):
    """Tag attached to a party's phone number."""

    HOME = "HOME"
    BUS = "BUS"
    CELL = "CELL"


class ClaimType(str, Enum):
    """Claim classification used by the routing engine."""

    VEHICLE = "VEHICLE"
    PROPERTY = "PROPERTY"
    INJURY = "INJURY"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class _ClaimRecord(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ---------------------------------------------------------------------------
# Sub-records
# ---------------------------------------------------------------------------


class PolicyInformation(_ClaimRecord):
    """Policy block of the intake form."""

    policy_number: Optional[str] = Field(default=None, description="Policy number")
    policyholder_name: Optional[str] = Field(default=None, description="Named insured")
    agency_customer_id: Optional[str] = Field(default=None, description="Agency customer id")
    effective_date: Optional[date] = Field(default=None, description="Policy effective date")

    @property
    def is_complete(self) -> bool:
        return (
            not _is_blank(self.policy_number)
            and not _is_blank(self.policyholder_name)
            and self.effective_date is not None
        )


class IncidentInformation(_ClaimRecord):
    """When, where and what happened."""

    incident_date: Optional[date] = Field(default=None, description="Date of loss")
    incident_time: Optional[str] = Field(
        default=None, description="Time of loss, optionally suffixed with AM/PM"
    )
    location: Optional[str] = Field(default=None, description="Composed loss location")
    description: Optional[str] = Field(default=None, description="Description of the accident")

    @property
    def is_complete(self) -> bool:
        return (
            self.incident_date is not None
            and not _is_blank(self.location)
            and not _is_blank(self.description)
        )

    def fraud_indicators(self, keywords: tuple[str, ...] = DEFAULT_FRAUD_KEYWORDS) -> list[str]:
        """Return the *keywords* found in the description, in vocabulary order.

        Matching is a case-insensitive substring test, so ``"Staged"`` and
        ``"unstaged"`` both match ``"staged"``.
        """
        if not self.description:
            return []
        lowered = self.description.lower()
        return [kw for kw in keywords if kw.lower() in lowered]


class InvolvedParty(_ClaimRecord):
    """A person named on the claim: claimant, third-party owner/driver or witness."""

    name: Optional[str] = None
    role: Optional[str] = None
    primary_phone: Optional[str] = None
    primary_phone_type: Optional[PhoneType] = None
    secondary_phone: Optional[str] = None
    secondary_phone_type: Optional[PhoneType] = None
    primary_email: Optional[str] = None
    secondary_email: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return (
            not _is_blank(self.name)
            and not _is_blank(self.role)
            and not _is_blank(self.primary_phone)
            and self.primary_phone_type is not None
        )

    @property
    def is_claimant(self) -> bool:
        return (self.role or "").strip().upper() == ROLE_CLAIMANT


class AssetDetails(_ClaimRecord):
    """The damaged asset and its estimate."""

    asset_type: Optional[str] = Field(default=None, description="e.g. VEHICLE, PROPERTY")
    asset_id: Optional[str] = Field(default=None, description="Plate number or VIN")
    estimated_damage: Optional[Decimal] = Field(
        default=None, description="Estimated damage as an exact decimal amount"
    )
    description: Optional[str] = Field(default=None, description="Free-text damage description")

    @property
    def is_complete(self) -> bool:
        return (
            not _is_blank(self.asset_type)
            and not _is_blank(self.asset_id)
            and self.estimated_damage is not None
        )


# ---------------------------------------------------------------------------
# Aggregate root
# ---------------------------------------------------------------------------


class FNOLDocument(_ClaimRecord):
    """A single First Notice of Loss, assembled from one intake document.

    ``involved_parties`` keeps insertion order: claimant first, then the
    third-party owner, then the third-party driver.
    """

    policy_information: Optional[PolicyInformation] = None
    incident_information: Optional[IncidentInformation] = None
    involved_parties: list[InvolvedParty] = Field(default_factory=list)
    asset_details: Optional[AssetDetails] = None
    claim_type: Optional[ClaimType] = None
    initial_estimate: Optional[Decimal] = None
    attachments: list[str] = Field(default_factory=list)

    @property
    def claimant(self) -> Optional[InvolvedParty]:
        return next((p for p in self.involved_parties if p.is_claimant), None)

    @property
    def estimated_damage(self) -> Optional[Decimal]:
        if self.asset_details is None:
            return None
        return self.asset_details.estimated_damage
