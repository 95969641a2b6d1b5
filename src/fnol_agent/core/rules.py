"""Immutable rule table shared by the extractors and the routing engine.

The table is built once (from Hydra config or defaults) and injected, so tests
can swap in an alternate vocabulary without touching extraction logic.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from fnol_agent.schemas.claim import DEFAULT_FRAUD_KEYWORDS

if TYPE_CHECKING:
    from omegaconf import DictConfig

# Order matters: the first format that parses wins.
DEFAULT_DATE_FORMATS: tuple[str, ...] = (
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%y",
    "%m-%d-%y",
)


class RuleTable(BaseModel):
    """Thresholds and vocabularies that drive extraction and routing."""

    model_config = ConfigDict(frozen=True)

    fast_track_threshold: Decimal = Field(
        default=Decimal("25000"), gt=0, description="Damage strictly below this is fast-tracked"
    )
    high_value_threshold: Decimal = Field(
        default=Decimal("100000"), gt=0, description="Damage above this raises a warning"
    )
    fraud_keywords: tuple[str, ...] = Field(
        default=DEFAULT_FRAUD_KEYWORDS,
        min_length=1,
        description="Case-insensitive substrings that flag a description for investigation",
    )
    date_formats: tuple[str, ...] = Field(
        default=DEFAULT_DATE_FORMATS, min_length=1, description="strptime formats, tried in order"
    )
    affirmative_value: str = Field(
        default="Yes", description="Checkbox value meaning 'checked' (case-insensitive)"
    )

    @classmethod
    def from_config(cls, cfg: DictConfig | None) -> RuleTable:
        """Build a rule table from the Hydra ``rules`` section.

        Missing keys keep their defaults; list values become tuples.
        """
        if cfg is None:
            return cls()

        from omegaconf import OmegaConf

        raw: dict[str, Any] = OmegaConf.to_container(cfg, resolve=True)  # type: ignore[assignment]
        values = {
            key: tuple(value) if isinstance(value, list) else value
            for key, value in raw.items()
            if key in cls.model_fields
        }
        table = cls(**values)
        logger.debug(
            "Rule table loaded: fast_track={ft} high_value={hv} keywords={kw}",
            ft=table.fast_track_threshold,
            hv=table.high_value_threshold,
            kw=len(table.fraud_keywords),
        )
        return table


DEFAULT_RULES = RuleTable()
