"""Field sources: the normalized document content handed to the extractors.

Exactly one variant is active per document.  ``FormFields`` carries a fillable
form already decoded into label/value pairs; ``RawText`` carries free text
with no guaranteed layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union


@dataclass(frozen=True)
class FormFields:
    """Structured source keyed by exact form-field label."""

    fields: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze a private copy so the caller's dict cannot change underneath us.
        object.__setattr__(
            self,
            "fields",
            MappingProxyType({str(k): "" if v is None else str(v) for k, v in self.fields.items()}),
        )

    def get(self, label: str) -> str:
        """Return the stripped value for *label*, or ``""`` when absent."""
        return self.fields.get(label, "").strip()

    def __len__(self) -> int:
        return len(self.fields)


@dataclass(frozen=True)
class RawText:
    """Unstructured source: the full extracted text of the document.

    CRLF and bare CR line endings are normalized to ``\\n`` on creation.
    """

    text: str = ""

    def __post_init__(self) -> None:
        # Patterns only know "\n" as a line break.
        object.__setattr__(self, "text", self.text.replace("\r\n", "\n").replace("\r", "\n"))

    def __len__(self) -> int:
        return len(self.text)


FieldSource = Union[FormFields, RawText]
