"""Máscaras de exibição do formulário de checkout.

Toda máscara começa extraindo só os dígitos, então aplicar duas vezes
dá o mesmo resultado e `only_digits(format_x(v)) == only_digits(v)`
(respeitado o limite de dígitos de cada campo).
"""

from __future__ import annotations

import re

from api.validators.checkout.tax_id import CNPJ_LENGTH, CPF_LENGTH, only_digits

MAX_PHONE_DIGITS = 11
MAX_CARD_DIGITS = 19
MAX_EXPIRY_DIGITS = 4

_GROUP_OF_FOUR = re.compile(r"([0-9]{4})(?=[0-9])")


def _sub_once(pattern: str, replacement: str, value: str) -> str:
    return re.sub(pattern, replacement, value, count=1)


def format_tax_id(value: str | None) -> str:
    """CPF 000.000.000-00 ou CNPJ 00.000.000/0000-00 (máscara progressiva)."""
    digits = only_digits(value)[:CNPJ_LENGTH]
    if len(digits) <= CPF_LENGTH:
        masked = _sub_once(r"([0-9]{3})([0-9])", r"\1.\2", digits)
        masked = _sub_once(r"([0-9]{3})([0-9])", r"\1.\2", masked)
        return _sub_once(r"([0-9]{3})([0-9]{1,2})$", r"\1-\2", masked)

    masked = _sub_once(r"([0-9]{2})([0-9])", r"\1.\2", digits)
    masked = _sub_once(r"([0-9]{3})([0-9])", r"\1.\2", masked)
    masked = _sub_once(r"([0-9]{3})([0-9])", r"\1/\2", masked)
    return _sub_once(r"([0-9]{4})([0-9]{1,2})$", r"\1-\2", masked)


def format_phone(value: str | None) -> str:
    """(DD) DDDD-DDDD para fixo, (DD) DDDDD-DDDD para celular."""
    digits = only_digits(value)[:MAX_PHONE_DIGITS]
    if len(digits) <= 10:
        return _sub_once(r"^([0-9]{2})([0-9]{4})([0-9]{4})$", r"(\1) \2-\3", digits)
    return _sub_once(r"^([0-9]{2})([0-9]{5})([0-9]{4})$", r"(\1) \2-\3", digits)


def format_card_number(value: str | None) -> str:
    """Grupos de quatro dígitos separados por espaço."""
    digits = only_digits(value)[:MAX_CARD_DIGITS]
    return _GROUP_OF_FOUR.sub(r"\1 ", digits)


def format_expiry(value: str | None) -> str:
    """MM/AA a partir do que foi digitado."""
    digits = only_digits(value)[:MAX_EXPIRY_DIGITS]
    if len(digits) >= 2:
        return f"{digits[:2]}/{digits[2:4]}"
    return digits


def format_currency(value: float) -> str:
    """Valor em reais no padrão brasileiro: R$ 1.234,56."""
    formatted = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if value < 0 else ""
    return f"{sign}R$ {formatted}"
