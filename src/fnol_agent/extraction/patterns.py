"""Regex library for discovering typed values in free text.

Extraction is best-effort: every helper returns ``None`` (or an empty list)
when nothing matches.  Multi-value fields such as phones and e-mails are
scoped with a fixed character window after a section label.  That window is
a heuristic, not a layout parser, and can pick up a neighbouring party's
details in dense text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Pattern

_FLAGS = re.IGNORECASE

# A value never starts with one of these words; they are section headers.
_NOT_A_VALUE = r"(?!(?:Name|Information|Details)\b)"


@dataclass(frozen=True)
class PatternLibrary:
    """Compiled patterns used by :class:`FreeTextStrategy`."""

    policy_number: Pattern[str] = re.compile(
        r"\bpolicy\s*(?:number|no\.|no\b|#)\s*[:#]?\s*([A-Z0-9-]+)", _FLAGS
    )
    policyholder: Pattern[str] = re.compile(
        r"\bpolicyholder(?:\s+name)?[ \t]*[:#-]?[ \t]*" + _NOT_A_VALUE
        + r"([A-Za-z][A-Za-z .'-]*?)[ \t]*(?=\n|,|\||\bpolicy|$)",
        _FLAGS,
    )
    description: Pattern[str] = re.compile(
        r"(?<!Damage\s)\b(?:(?:Incident|Loss|Accident)\s+)?Description\b[ \t]*:?[ \t]*(.+?)"
        r"(?=\n[ \t]*\n|\b(?-i:Claimant|Third\s+Party|Vehicle\s+Details|Asset\s+Details)\b|\Z)",
        _FLAGS | re.DOTALL,
    )
    date: Pattern[str] = re.compile(
        r"\b(\d{1,2}[-/]\d{1,2}[-/]\d{2,4}|\d{4}[-/]\d{1,2}[-/]\d{1,2})\b"
    )
    time: Pattern[str] = re.compile(r"\b(\d{1,2}:\d{2}(?:\s*(?:AM|PM))?)\b", _FLAGS)
    amount: Pattern[str] = re.compile(r"[$€£][ \t]*(\d[\d,]*(?:\.\d{2})?)")
    vin: Pattern[str] = re.compile(
        r"\b(?:VIN|Vehicle\s*Identification\s*Number)\b\s*[:#]?\s*([A-HJ-NPR-Z0-9]{17})\b",
        _FLAGS,
    )
    phone: Pattern[str] = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b")
    email: Pattern[str] = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
    list_separator: Pattern[str] = re.compile(r"[,;\n]")
    # Labels that end a person's name when they follow it on the same line.
    name_stop: str = r"\b(?:Policy|Phone|Email|Date|Address)\b"

    # -----------------------------------------------------------------
    # Single values
    # -----------------------------------------------------------------

    def first_group(self, pattern: Pattern[str], text: str) -> Optional[str]:
        match = pattern.search(text)
        if match is None:
            return None
        return match.group(1).strip() or None

    def field_value(self, text: str, label: str) -> Optional[str]:
        """Value following *label* on the same line, up to a newline or pipe."""
        pattern = re.compile(
            rf"\b{label}\b[ \t]*[:#-]?[ \t]*{_NOT_A_VALUE}([^\s:|][^\n:|]*?)[ \t]*(?=\n|\||$)",
            _FLAGS,
        )
        return self.first_group(pattern, text)

    def name_value(self, text: str, label: str) -> Optional[str]:
        """Person name following *label*, up to a newline, comma, pipe or next label."""
        pattern = re.compile(
            rf"\b{label}\b[ \t]*[:#-]?[ \t]*{_NOT_A_VALUE}"
            rf"([A-Za-z][A-Za-z .'-]*?)[ \t]*(?=\n|,|\||{self.name_stop}|$)",
            _FLAGS,
        )
        return self.first_group(pattern, text)

    def section(self, text: str, label: str, window: int) -> Optional[str]:
        """Up to *window* characters starting at the first *label*; ``None`` if absent."""
        match = re.search(rf"\b{label}\b", text, _FLAGS)
        if match is None:
            return None
        return text[match.start() : match.start() + window]

    def contains(self, text: str, label: str) -> bool:
        return re.search(label, text, _FLAGS) is not None

    # -----------------------------------------------------------------
    # Typed scans
    # -----------------------------------------------------------------

    def date_candidates(self, text: str) -> list[str]:
        return [m.group(1) for m in self.date.finditer(text)]

    def labelled_amount(self, text: str, label: str, window: int) -> Optional[str]:
        """Amount right after *label*; else the first amount in the scanned window.

        The scanned window is the *window* characters after the label, or
        the whole text when the label does not occur at all.
        """
        direct = re.compile(rf"\b{label}\b[ \t]*[:#-]?[ \t]*" + self.amount.pattern, _FLAGS)
        found = self.first_group(direct, text)
        if found is not None:
            return found
        scope = self.section(text, label, window)
        return self.first_group(self.amount, text if scope is None else scope)

    def phones(self, text: str) -> list[str]:
        return [m.group(0) for m in self.phone.finditer(text)]

    def emails(self, text: str) -> list[str]:
        return [m.group(0) for m in self.email.finditer(text)]

    def listed_items(self, text: str, label: str, window: int) -> list[str]:
        """Comma, semicolon or line separated items after *label*, up to a blank line."""
        match = re.search(rf"\b{label}\b[ \t]*:?", text, _FLAGS)
        if match is None:
            return []
        block = text[match.end() : match.end() + window]
        block = re.split(r"\n[ \t]*\n", block, maxsplit=1)[0]
        items = (item.strip(" \t-*•") for item in self.list_separator.split(block))
        return [item for item in items if item]


DEFAULT_PATTERNS = PatternLibrary()
