"""Structured strategy: exact-label lookups on a decoded fillable form."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from loguru import logger

from fnol_agent.core.parsing import clean, is_checked, parse_amount, parse_date
from fnol_agent.core.rules import DEFAULT_RULES, RuleTable
from fnol_agent.extraction.base import ExtractionStrategy
from fnol_agent.extraction.fields import FIELDS, FieldKind, FieldSpec, PartySpec
from fnol_agent.extraction.source import FormFields
from fnol_agent.schemas.claim import InvolvedParty, PhoneType

# The automobile loss notice only ever describes a vehicle.
FORM_ASSET_TYPE = "VEHICLE"


class StructuredStrategy(ExtractionStrategy):
    """Map known form labels to typed values."""

    def __init__(self, form: FormFields, rules: RuleTable = DEFAULT_RULES) -> None:
        super().__init__(rules)
        self.form = form

    def _raw(self, label: Optional[str]) -> str:
        if label is None:
            return ""
        return self.form.get(label)

    def _checked(self, label: Optional[str]) -> bool:
        return is_checked(self._raw(label), self.rules.affirmative_value)

    # -----------------------------------------------------------------
    # Field accessors
    # -----------------------------------------------------------------

    def text(self, spec: FieldSpec) -> Optional[str]:
        return clean(self._raw(spec.form_label))

    def date(self, spec: FieldSpec) -> Optional[date]:
        return parse_date(self._raw(spec.form_label), self.rules.date_formats)

    def time(self, spec: FieldSpec) -> Optional[str]:
        value = clean(self._raw(spec.form_label))
        if value is None:
            return None
        if self._checked(FIELDS["time_am"].form_label):
            return f"{value} AM"
        if self._checked(FIELDS["time_pm"].form_label):
            return f"{value} PM"
        return value

    def amount(self, spec: FieldSpec) -> Optional[Decimal]:
        raw = self._raw(spec.form_label)
        value = parse_amount(raw)
        if value is None and raw:
            logger.debug("Form field {label!r} is not a number", label=spec.form_label)
        return value

    def flag(self, spec: FieldSpec) -> bool:
        if spec.kind is FieldKind.PRESENCE:
            return bool(self._raw(spec.form_label))
        return self._checked(spec.form_label)

    def phone_type(self, labels: tuple[str, str, str]) -> Optional[PhoneType]:
        """Resolve the home/bus/cell checkbox triple; the first checked box wins."""
        for label, phone_type in zip(labels, (PhoneType.HOME, PhoneType.BUS, PhoneType.CELL)):
            if self._checked(label):
                return phone_type
        return None

    def party(self, spec: PartySpec) -> InvolvedParty:
        return InvolvedParty(
            name=clean(self._raw(spec.name_label)),
            role=spec.role,
            primary_phone=clean(self._raw(spec.primary_phone_label)),
            primary_phone_type=self.phone_type(spec.primary_type_labels),
            secondary_phone=clean(self._raw(spec.secondary_phone_label)),
            secondary_phone_type=self.phone_type(spec.secondary_type_labels),
            primary_email=clean(self._raw(spec.primary_email_label)),
            secondary_email=clean(self._raw(spec.secondary_email_label)),
        )

    def asset_type(self) -> Optional[str]:
        return FORM_ASSET_TYPE

    def attachments(self) -> list[str]:
        # The form has no attachment list; attachments travel separately.
        return []
