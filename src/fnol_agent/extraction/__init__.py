"""Field sources and the strategies that turn them into typed values."""

from fnol_agent.extraction.base import ExtractionStrategy
from fnol_agent.extraction.factory import create_strategy
from fnol_agent.extraction.free_text import FreeTextStrategy
from fnol_agent.extraction.source import FieldSource, FormFields, RawText
from fnol_agent.extraction.structured import StructuredStrategy

__all__ = [
    "ExtractionStrategy",
    "FieldSource",
    "FormFields",
    "FreeTextStrategy",
    "RawText",
    "StructuredStrategy",
    "create_strategy",
]
