"""Validação de cartão de crédito (Luhn, validade, CVV)."""

from __future__ import annotations

import re
from datetime import date, datetime

_WHITESPACE = re.compile(r"\s")
_CARD_DIGITS = re.compile(r"[0-9]{13,19}")
_MONTH = re.compile(r"0[1-9]|1[0-2]")
_YEAR = re.compile(r"[0-9]{4}")
_CCV = re.compile(r"[0-9]{3,4}")

MAX_EXPIRY_YEARS_AHEAD = 10


def strip_card_number(value: str | None) -> str:
    """Remove espaços do número do cartão (idempotente)."""
    if not value:
        return ""
    return _WHITESPACE.sub("", value)


def luhn_checksum_ok(digits: str) -> bool:
    """Soma de Luhn ≡ 0 (mod 10), dobrando a cada segundo dígito da direita."""
    total = 0
    for index, char in enumerate(reversed(digits)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def validate_card_number(value: str | None) -> bool:
    """Valida número do cartão: 13 a 19 dígitos e Luhn."""
    digits = strip_card_number(value)
    if not _CARD_DIGITS.fullmatch(digits):
        return False
    return luhn_checksum_ok(digits)


def _as_int(value: int | str) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def validate_expiry(month: int | str, year: int | str, now: datetime | date) -> bool:
    """Validade (primeiro dia do mês/ano) estritamente posterior a `now`.

    Mês fora de 1..12 ou valores não numéricos são inválidos.
    """
    month_int = _as_int(month)
    year_int = _as_int(year)
    if month_int is None or year_int is None or not 1 <= month_int <= 12:
        return False
    if not 1 <= year_int <= 9999:
        return False

    expiry = datetime(year_int, month_int, 1)
    if not isinstance(now, datetime):
        now = datetime(now.year, now.month, now.day)
    elif now.tzinfo is not None:
        now = now.replace(tzinfo=None)
    return expiry > now


def validate_expiry_month(value: str | None) -> bool:
    """Mês com dois dígitos, de 01 a 12."""
    return bool(value) and _MONTH.fullmatch(value) is not None


def validate_expiry_year(value: str | None, today: date) -> bool:
    """Ano com quatro dígitos entre o ano corrente e +10."""
    if not value or not _YEAR.fullmatch(value):
        return False
    return today.year <= int(value) <= today.year + MAX_EXPIRY_YEARS_AHEAD


def validate_ccv(value: str | None) -> bool:
    """CVV com 3 ou 4 dígitos."""
    return bool(value) and _CCV.fullmatch(value) is not None
