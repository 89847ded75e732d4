"""Testes das máscaras de exibição do checkout."""

from __future__ import annotations

import pytest

from api.normalizers.checkout import (
    format_card_number,
    format_currency,
    format_expiry,
    format_phone,
    format_tax_id,
)
from api.validators.checkout import only_digits


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("52998224725", "529.982.247-25"),
        ("529982", "529.982"),
        ("11222333000181", "11.222.333/0001-81"),
        ("11.222.333/0001-81", "11.222.333/0001-81"),
    ],
)
def test_format_tax_id(raw: str, expected: str) -> None:
    assert format_tax_id(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("11987654321", "(11) 98765-4321"),
        ("1133334444", "(11) 3333-4444"),
        ("(11) 98765-4321", "(11) 98765-4321"),
    ],
)
def test_format_phone(raw: str, expected: str) -> None:
    assert format_phone(raw) == expected


@pytest.mark.parametrize("value", ["529.982.247-25", "11222333000181", "(11) 98765-4321", "1133334444"])
def test_formatting_twice_keeps_same_digits(value: str) -> None:
    for formatter in (format_tax_id, format_phone):
        once = formatter(value)
        assert formatter(once) == once
        assert only_digits(formatter(once)) == only_digits(once)


def test_format_card_number_groups_of_four() -> None:
    assert format_card_number("4532015112830366") == "4532 0151 1283 0366"
    assert format_card_number("4532 0151 1283 0366") == "4532 0151 1283 0366"
    assert format_card_number("45320") == "4532 0"


def test_format_expiry() -> None:
    assert format_expiry("1230") == "12/30"
    assert format_expiry("12/30") == "12/30"
    assert format_expiry("1") == "1"


def test_format_currency() -> None:
    assert format_currency(1234.56) == "R$ 1.234,56"
    assert format_currency(100) == "R$ 100,00"
    assert format_currency(0.5) == "R$ 0,50"
