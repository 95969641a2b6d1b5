"""FNOL intake agent: structured claim extraction, completeness checks and routing."""

__version__ = "1.0.0"
