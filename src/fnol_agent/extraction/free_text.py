"""Free-text strategy: regex discovery over raw document text."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from loguru import logger

from fnol_agent.core.parsing import clean, parse_amount, parse_date
from fnol_agent.core.rules import DEFAULT_RULES, RuleTable
from fnol_agent.extraction.base import ExtractionStrategy
from fnol_agent.extraction.fields import FIELDS, FieldKind, FieldSpec, PartySpec
from fnol_agent.extraction.patterns import DEFAULT_PATTERNS, PatternLibrary
from fnol_agent.extraction.source import RawText
from fnol_agent.schemas.claim import InvolvedParty, PhoneType


class FreeTextStrategy(ExtractionStrategy):
    """Discover labelled values in text with no guaranteed layout.

    Free text carries no phone-type checkboxes, so the first number found
    for a party is tagged CELL and the second HOME.
    """

    def __init__(
        self,
        document: RawText,
        rules: RuleTable = DEFAULT_RULES,
        patterns: PatternLibrary = DEFAULT_PATTERNS,
    ) -> None:
        super().__init__(rules)
        self.document = document
        self.patterns = patterns

    @property
    def _text(self) -> str:
        return self.document.text

    def _scope(self, spec: FieldSpec) -> Optional[str]:
        if spec.text_label is None:
            return None
        return self.patterns.section(self._text, spec.text_label, spec.window)

    # -----------------------------------------------------------------
    # Field accessors
    # -----------------------------------------------------------------

    def text(self, spec: FieldSpec) -> Optional[str]:
        if spec.text_pattern is not None:
            pattern = getattr(self.patterns, spec.text_pattern)
            return clean(self.patterns.first_group(pattern, self._text))
        if spec.text_label is None:
            return None
        if spec.kind is FieldKind.NAME:
            return self.patterns.name_value(self._text, spec.text_label)
        return self.patterns.field_value(self._text, spec.text_label)

    def date(self, spec: FieldSpec) -> Optional[date]:
        scope = self._scope(spec)
        if scope is None:
            return None
        for candidate in self.patterns.date_candidates(scope):
            parsed = parse_date(candidate, self.rules.date_formats)
            if parsed is not None:
                return parsed
        return None

    def time(self, spec: FieldSpec) -> Optional[str]:
        scope = self._scope(spec)
        if scope is None:
            return None
        return self.patterns.first_group(self.patterns.time, scope)

    def amount(self, spec: FieldSpec) -> Optional[Decimal]:
        if spec.text_label is None:
            return None
        raw = self.patterns.labelled_amount(self._text, spec.text_label, spec.window)
        return parse_amount(raw)

    def flag(self, spec: FieldSpec) -> bool:
        if spec.text_label is None or not self.patterns.contains(self._text, spec.text_label):
            return False
        if spec.text_exclude is not None and self.patterns.contains(self._text, spec.text_exclude):
            return False
        return True

    def party(self, spec: PartySpec) -> InvolvedParty:
        section = self.patterns.section(self._text, spec.section_pattern, spec.section_window)
        if spec.name_in_section:
            name = self.patterns.name_value(section, spec.name_pattern) if section else None
        else:
            name = self.patterns.name_value(self._text, spec.name_pattern)

        phones = self.patterns.phones(section) if section else []
        emails = self.patterns.emails(section) if section else []
        primary_phone = phones[0] if phones else None
        secondary_phone = phones[1] if len(phones) > 1 else None

        logger.debug(
            "Free-text party {role}: name={found} phones={phones} emails={emails}",
            role=spec.role,
            found=name is not None,
            phones=len(phones),
            emails=len(emails),
        )
        return InvolvedParty(
            name=name,
            role=spec.role,
            primary_phone=primary_phone,
            primary_phone_type=PhoneType.CELL if primary_phone else None,
            secondary_phone=secondary_phone,
            secondary_phone_type=PhoneType.HOME if secondary_phone else None,
            primary_email=emails[0] if emails else None,
            secondary_email=emails[1] if len(emails) > 1 else None,
        )

    def asset_type(self) -> Optional[str]:
        return "PROPERTY" if self.flag(FIELDS["property_damage"]) else "VEHICLE"

    def attachments(self) -> list[str]:
        spec = FIELDS["attachments"]
        return self.patterns.listed_items(self._text, spec.text_label or "", spec.window)

    def driver_same_as_owner(self, owner: InvolvedParty, driver: InvolvedParty) -> bool:
        if super().driver_same_as_owner(owner, driver):
            return True
        if not owner.name or not driver.name:
            return False
        return owner.name.strip().lower() == driver.name.strip().lower()
