"""Strategy factory: pick the extractor that matches the field source."""

from __future__ import annotations

from loguru import logger

from fnol_agent.core.rules import DEFAULT_RULES, RuleTable
from fnol_agent.extraction.base import ExtractionStrategy
from fnol_agent.extraction.free_text import FreeTextStrategy
from fnol_agent.extraction.source import FieldSource, FormFields, RawText
from fnol_agent.extraction.structured import StructuredStrategy


def create_strategy(source: FieldSource, rules: RuleTable = DEFAULT_RULES) -> ExtractionStrategy:
    """Return the strategy for *source*.

    Raises
    ------
    TypeError
        If *source* is neither :class:`FormFields` nor :class:`RawText`.
    """
    if isinstance(source, FormFields):
        logger.debug("Using structured strategy ({n} form fields)", n=len(source))
        return StructuredStrategy(source, rules)

    if isinstance(source, RawText):
        logger.debug("Using free-text strategy ({n} characters)", n=len(source))
        return FreeTextStrategy(source, rules)

    raise TypeError(
        f"Unsupported field source {type(source).__name__!r}. "
        "Expected FormFields or RawText."
    )
