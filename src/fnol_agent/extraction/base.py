"""Abstract extraction strategy shared by the structured and free-text paths."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from fnol_agent.core.parsing import compose_location
from fnol_agent.core.rules import DEFAULT_RULES, RuleTable
from fnol_agent.extraction.fields import FIELDS, FieldKind, FieldSpec, PartySpec
from fnol_agent.schemas.claim import InvolvedParty


class ExtractionStrategy(ABC):
    """Contract for reading typed values out of one field source.

    Every accessor is total: a value that cannot be found or parsed comes
    back as ``None`` (or ``False`` / an empty list) and never raises.  The
    claim assembler drives a strategy exclusively through the logical field
    table in :mod:`fnol_agent.extraction.fields`.
    """

    def __init__(self, rules: RuleTable = DEFAULT_RULES) -> None:
        self.rules = rules

    @abstractmethod
    def text(self, spec: FieldSpec) -> Optional[str]:
        """Plain string value, ``None`` when blank."""

    @abstractmethod
    def date(self, spec: FieldSpec) -> Optional[date]:
        ...

    @abstractmethod
    def time(self, spec: FieldSpec) -> Optional[str]:
        ...

    @abstractmethod
    def amount(self, spec: FieldSpec) -> Optional[Decimal]:
        ...

    @abstractmethod
    def flag(self, spec: FieldSpec) -> bool:
        """Checkbox or presence flag."""

    @abstractmethod
    def party(self, spec: PartySpec) -> InvolvedParty:
        """Contact details for one party slot; the name may be ``None``."""

    @abstractmethod
    def asset_type(self) -> Optional[str]:
        ...

    @abstractmethod
    def attachments(self) -> list[str]:
        ...

    # -----------------------------------------------------------------
    # Kind dispatch
    # -----------------------------------------------------------------

    def value(self, spec: FieldSpec) -> Any:
        """Read *spec* with the accessor its :class:`FieldKind` calls for."""
        kind = spec.kind
        if kind is FieldKind.TEXT or kind is FieldKind.NAME:
            return self.text(spec)
        if kind is FieldKind.DATE:
            return self.date(spec)
        if kind is FieldKind.TIME:
            return self.time(spec)
        if kind is FieldKind.AMOUNT:
            return self.amount(spec)
        return self.flag(spec)

    # -----------------------------------------------------------------
    # Shared compositions
    # -----------------------------------------------------------------

    def location(self) -> Optional[str]:
        return compose_location(
            self.text(FIELDS["loss_street"]),
            self.text(FIELDS["loss_city_state_zip"]),
            self.text(FIELDS["loss_country"]),
            self.text(FIELDS["loss_location_described"]),
        )

    def asset_id(self) -> Optional[str]:
        return self.text(FIELDS["vin"]) or self.text(FIELDS["plate_number"])

    def driver_same_as_owner(self, owner: InvolvedParty, driver: InvolvedParty) -> bool:
        return self.flag(FIELDS["driver_same_as_owner"])
