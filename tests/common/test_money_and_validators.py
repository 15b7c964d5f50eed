from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal

import pytest

from wage_dashboard.common.datetime_utils import format_iso_date, parse_iso_date
from wage_dashboard.common.ids import CounterIdGenerator, UUIDGenerator
from wage_dashboard.common.money import format_money, money_to_json, to_money
from wage_dashboard.common.validators import (
    optional_iso_date,
    require_date_range,
    require_iso_date,
    require_non_negative_amount,
)
from wage_dashboard.core.exceptions import ValidationError


def test_to_money_rounds_half_up():
    assert to_money("1.005") == Decimal("1.01")
    assert to_money(0.1) == Decimal("0.10")


def test_money_to_json():
    assert money_to_json(Decimal("800.00")) == 800
    assert isinstance(money_to_json(Decimal("800.00")), int)
    assert money_to_json(Decimal("150.25")) == 150.25


def test_format_money():
    assert format_money(Decimal("1350")) == "Rs. 1,350.00"


def test_amount_validation():
    assert require_non_negative_amount("0", "x") == Decimal("0.00")
    with pytest.raises(ValidationError):
        require_non_negative_amount("-0.01", "x")
    with pytest.raises(ValidationError):
        require_non_negative_amount("Infinity", "x")


def test_date_validation():
    assert require_iso_date(date(2024, 9, 6), "d") == "2024-09-06"
    assert require_iso_date(" 2024-09-06 ", "d") == "2024-09-06"
    assert optional_iso_date("", "d") is None
    with pytest.raises(ValidationError):
        require_iso_date("2024-13-01", "d")


def test_date_range_ordering():
    require_date_range("2024-09-01", "2024-09-01")
    require_date_range(None, "2024-09-01")
    with pytest.raises(ValidationError):
        require_date_range("2024-09-02", "2024-09-01")


def test_id_generators_are_unique():
    counter = CounterIdGenerator()
    assert [counter(), counter(), counter()] == ["1", "2", "3"]

    gen = UUIDGenerator()
    assert len({gen() for _ in range(100)}) == 100


def test_to_money_rejects_values_beyond_precision():
    with pytest.raises(ValueError):
        to_money("1e30")


def test_amount_bounds():
    assert require_non_negative_amount("999999999999.99", "x") == Decimal("999999999999.99")
    assert require_non_negative_amount("0.004", "x") == Decimal("0.00")
    with pytest.raises(ValidationError):
        require_non_negative_amount("-0.004", "x")
    with pytest.raises(ValidationError):
        require_non_negative_amount("999999999999.995", "x")
    with pytest.raises(ValidationError):
        require_non_negative_amount("1e30", "x")


def test_largest_amount_survives_json():
    largest = Decimal("999999999999.99")

    assert Decimal(json.dumps(money_to_json(largest))) == largest


@pytest.mark.parametrize("text", ["2024-9-6", "20240906", "2024-09-06T00:00", "2024-09-06\n", "２０２４-09-06"])
def test_date_must_be_zero_padded_iso(text):
    with pytest.raises(ValueError):
        parse_iso_date(text)


def test_format_iso_date_pads_year():
    assert format_iso_date(date(999, 1, 1)) == "0999-01-01"
    assert format_iso_date(datetime(2024, 9, 6, 13, 5)) == "2024-09-06"
