"""Tests for the shared value parsers."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from fnol_agent.core.parsing import clean, compose_location, is_checked, parse_amount, parse_date
from fnol_agent.core.rules import DEFAULT_DATE_FORMATS


class TestClean:
    @pytest.mark.parametrize("value", [None, "", "   ", "\n\t"])
    def test_blank_becomes_none(self, value: str | None) -> None:
        assert clean(value) is None

    def test_strips(self) -> None:
        assert clean("  POL-1 ") == "POL-1"


class TestParseDate:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("02/01/2024", date(2024, 2, 1)),
            ("02-01-2024", date(2024, 2, 1)),
            ("2024-02-01", date(2024, 2, 1)),
            ("2024/02/01", date(2024, 2, 1)),
            ("02/01/24", date(2024, 2, 1)),
        ],
    )
    def test_accepted_formats(self, raw: str, expected: date) -> None:
        assert parse_date(raw, DEFAULT_DATE_FORMATS) == expected

    def test_month_first(self) -> None:
        assert parse_date("03/04/2024", DEFAULT_DATE_FORMATS) == date(2024, 3, 4)

    @pytest.mark.parametrize("raw", ["13/45/2024", "yesterday", "", None])
    def test_unparseable_is_none(self, raw: str | None) -> None:
        assert parse_date(raw, DEFAULT_DATE_FORMATS) is None


class TestParseAmount:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("18,500.00", Decimal("18500.00")),
            ("$18,500.00", Decimal("18500.00")),
            (" 2500 ", Decimal("2500")),
            ("€1,000.50", Decimal("1000.50")),
        ],
    )
    def test_amounts(self, raw: str, expected: Decimal) -> None:
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["about five grand", "NaN", "Infinity", "", None])
    def test_non_numbers_are_none(self, raw: str | None) -> None:
        assert parse_amount(raw) is None

    def test_exact_decimal(self) -> None:
        total = (parse_amount("0.10") or Decimal(0)) + (parse_amount("0.20") or Decimal(0))
        assert total == Decimal("0.30")


class TestIsChecked:
    @pytest.mark.parametrize("value", ["Yes", "yes", " YES "])
    def test_checked(self, value: str) -> None:
        assert is_checked(value)

    @pytest.mark.parametrize("value", ["Off", "No", "", None])
    def test_unchecked(self, value: str | None) -> None:
        assert not is_checked(value)

    def test_custom_affirmative(self) -> None:
        assert is_checked("On", affirmative="on")


class TestComposeLocation:
    def test_full_address_is_joined(self) -> None:
        assert (
            compose_location("12 Elm St", "Springfield, IL 62704", "USA", "near the park")
            == "12 Elm St, Springfield, IL 62704, USA"
        )

    def test_partial_address_falls_back_to_description(self) -> None:
        assert compose_location("12 Elm St", "Springfield, IL 62704", None, "near the park") == (
            "near the park"
        )

    def test_nothing_available(self) -> None:
        assert compose_location(None, "", "USA", "  ") is None
