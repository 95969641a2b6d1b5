"""Total value parsers shared by both extraction strategies.

Each helper attempts a typed parse and returns ``None`` on failure; none of
them raise for bad input.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional

from loguru import logger

_AMOUNT_NOISE = re.compile(r"[\s,$€£]")


def clean(value: Optional[str]) -> Optional[str]:
    """Strip *value*; blank strings become ``None``."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def parse_date(value: Optional[str], formats: Iterable[str]) -> Optional[date]:
    """Parse *value* with the first of *formats* that accepts it."""
    text = clean(value)
    if text is None:
        return None
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    logger.debug("Unparseable date {value!r}", value=text)
    return None


def parse_amount(value: Optional[str]) -> Optional[Decimal]:
    """Parse a monetary string such as ``"$18,500.00"`` into an exact ``Decimal``."""
    text = clean(value)
    if text is None:
        return None
    try:
        amount = Decimal(_AMOUNT_NOISE.sub("", text))
    except InvalidOperation:
        logger.debug("Unparseable amount {value!r}", value=text)
        return None
    if not amount.is_finite():
        return None
    return amount


def is_checked(value: Optional[str], affirmative: str = "Yes") -> bool:
    """True when a checkbox value equals *affirmative*, ignoring case."""
    text = clean(value)
    return text is not None and text.lower() == affirmative.lower()


def compose_location(
    street: Optional[str],
    city_state_zip: Optional[str],
    country: Optional[str],
    described: Optional[str],
) -> Optional[str]:
    """Join street, city/state/zip and country when all three are present.

    A partial address is never joined; the free-text description of the
    location is used instead.
    """
    parts = [clean(street), clean(city_state_zip), clean(country)]
    if all(parts):
        return ", ".join(parts)  # type: ignore[arg-type]
    return clean(described)
