"""Tests for ValueService."""

import pytest

from trainshed.services.base import INVALID_VALUE
from trainshed.services.values import ValueService


@pytest.fixture
def svc() -> ValueService:
    return ValueService()


class TestParseEpoch:
    def test_single_with_half(self, svc: ValueService) -> None:
        result = svc.parse_epoch(" IVa ")
        assert result.ok
        assert result.data == {"epoch": "IVa", "kind": "single", "base": "IV", "half": "a"}

    def test_single_without_half(self, svc: ValueService) -> None:
        result = svc.parse_epoch("III")
        assert result.data["half"] is None

    def test_range(self, svc: ValueService) -> None:
        result = svc.parse_epoch("III/IV")
        assert result.data == {"epoch": "III/IV", "kind": "range", "start": "III", "end": "IV"}

    def test_museum(self, svc: ValueService) -> None:
        assert svc.parse_epoch("vm").data == {"epoch": "Vm", "kind": "museum"}

    @pytest.mark.parametrize("text", ["", "VII", "III/V", "IV/III", "I/II/III"])
    def test_invalid(self, svc: ValueService, text: str) -> None:
        result = svc.parse_epoch(text)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == INVALID_VALUE


class TestParseDeliveryDate:
    def test_year(self, svc: ValueService) -> None:
        result = svc.parse_delivery_date("2026")
        assert result.data == {"delivery_date": "2026", "year": 2026, "granularity": "year"}

    def test_month(self, svc: ValueService) -> None:
        result = svc.parse_delivery_date("2026/7")
        assert result.data["delivery_date"] == "2026/07"
        assert result.data["month"] == 7

    def test_quarter(self, svc: ValueService) -> None:
        result = svc.parse_delivery_date("2026/q3")
        assert result.data["delivery_date"] == "2026/Q3"
        assert result.data["quarter"] == 3

    def test_invalid_message_carries_input(self, svc: ValueService) -> None:
        result = svc.parse_delivery_date("2026/13")
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "could not parse delivery date: 2026/13"


class TestParseScale:
    def test_label(self, svc: ValueService) -> None:
        result = svc.parse_scale("H0")
        assert result.ok
        assert result.data["scale"] == "H0"
        assert result.data["display"] == "H0 (1:87)"
        assert result.data["ratio"] == 87.0
        assert "gauge" in result.data

    def test_rendered_form(self, svc: ValueService) -> None:
        assert svc.parse_scale("N (1:160)").data["scale"] == "N"

    def test_unknown(self, svc: ValueService) -> None:
        assert not svc.parse_scale("HO").ok


class TestConvertLength:
    def test_inches_to_millimeters(self, svc: ValueService) -> None:
        result = svc.convert_length("1", "in", "millimeters")
        assert result.ok
        assert result.data == {
            "from": "1 in",
            "to": "25.4 mm",
            "value": "25.4",
            "unit": "millimeters",
        }

    def test_negative_rejected(self, svc: ValueService) -> None:
        assert not svc.convert_length("-1", "mm", "in").ok

    def test_unknown_unit(self, svc: ValueService) -> None:
        assert not svc.convert_length("1", "furlongs", "mm").ok

    def test_not_a_number(self, svc: ValueService) -> None:
        result = svc.convert_length("abc", "mm", "in")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == INVALID_VALUE


class TestFormatAmount:
    @pytest.mark.parametrize(
        ("amount", "currency", "display"),
        [
            (1050, "EUR", "10.50 €"),
            (1050, "usd", "$10.50"),
            (999, "GBP", "£9.99"),
            (1050, "JPY", "¥1050"),
        ],
    )
    def test_display(self, svc: ValueService, amount: int, currency: str, display: str) -> None:
        result = svc.format_amount(amount, currency)
        assert result.ok
        assert result.data["display"] == display

    def test_payload(self, svc: ValueService) -> None:
        result = svc.format_amount(1050, "EUR")
        assert result.data == {"display": "10.50 €", "amount": 1050, "currency": "EUR"}

    def test_unsupported_currency(self, svc: ValueService) -> None:
        assert not svc.format_amount(100, "CHF").ok

    def test_negative(self, svc: ValueService) -> None:
        assert not svc.format_amount(-1, "EUR").ok
