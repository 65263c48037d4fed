"""Tests for delivery date parsing and display."""

import pytest
from pydantic import BaseModel

from trainshed.domain.delivery_date import (
    DeliveryDate,
    DeliveryDateField,
    Quarter,
    Year,
    YearMonth,
    YearQuarter,
    parse_delivery_date,
)
from trainshed.domain.errors import InvalidDeliveryDateError


class _Item(BaseModel):
    delivery_date: DeliveryDateField | None = None


class TestParseDeliveryDate:
    def test_month_scenario(self) -> None:
        value = parse_delivery_date("2026/7")
        assert value == YearMonth(year=2026, month=7)
        assert str(value) == "2026/07"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2026", Year(2026)),
            ("1000", Year(1000)),
            ("9999", Year(9999)),
            ("2026/Q3", YearQuarter(2026, Quarter.Q3)),
            ("2026/q1", YearQuarter(2026, Quarter.Q1)),
            ("2026/07", YearMonth(2026, 7)),
            ("2026/12", YearMonth(2026, 12)),
            ("  2026/1  ", YearMonth(2026, 1)),
        ],
    )
    def test_valid(self, text: str, expected: DeliveryDate) -> None:
        assert parse_delivery_date(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "999",
            "0999",
            "10000",
            "26/07",
            "2026/13",
            "2026/0",
            "2026/00",
            "2026/123",
            "2026/Q0",
            "2026/Q5",
            "2026/ 7",
            "2026 /07",
            "2026-07",
            "2026/Q",
            "next year",
        ],
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidDeliveryDateError):
            parse_delivery_date(text)

    def test_error_carries_original_input(self) -> None:
        with pytest.raises(InvalidDeliveryDateError) as exc_info:
            parse_delivery_date("2026/13")
        assert str(exc_info.value) == "could not parse delivery date: 2026/13"
        assert exc_info.value.detail == {"value": "2026/13"}

    @pytest.mark.parametrize(
        ("value", "rendered"),
        [
            (Year(2026), "2026"),
            (YearMonth(2026, 3), "2026/03"),
            (YearQuarter(2027, Quarter.Q4), "2027/Q4"),
        ],
    )
    def test_display_and_round_trip(self, value: DeliveryDate, rendered: str) -> None:
        assert str(value) == rendered
        assert parse_delivery_date(rendered) == value


class TestConstructors:
    def test_year_out_of_range(self) -> None:
        with pytest.raises(InvalidDeliveryDateError):
            Year(999)

    def test_month_out_of_range(self) -> None:
        with pytest.raises(InvalidDeliveryDateError):
            YearMonth(2026, 13)

    def test_quarter_coerced(self) -> None:
        value = YearQuarter(2026, 2)  # type: ignore[arg-type]
        assert value.quarter is Quarter.Q2
        assert str(value) == "2026/Q2"


class TestPydantic:
    def test_json_uses_display_string(self) -> None:
        item = _Item(delivery_date="2026/q3")
        assert item.delivery_date == YearQuarter(2026, Quarter.Q3)
        assert item.model_dump(mode="json") == {"delivery_date": "2026/Q3"}

    def test_absent(self) -> None:
        assert _Item().model_dump(mode="json") == {"delivery_date": None}
