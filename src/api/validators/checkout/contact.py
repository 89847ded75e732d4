"""Validação de dados de contato (telefone com máscara, e-mail, nome)."""

from __future__ import annotations

import re

_PHONE_MASK = re.compile(r"\([0-9]{2}\) [0-9]{4,5}-[0-9]{4}")
_EMAIL = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")

MIN_NAME_LENGTH = 3
LANDLINE_LENGTH = 10
MOBILE_LENGTH = 11


def validate_phone_mask(value: str | None) -> bool:
    """Telefone no formato do formulário: (DD) DDDD-DDDD ou (DD) DDDDD-DDDD."""
    return bool(value) and _PHONE_MASK.fullmatch(value) is not None


def validate_email(value: str | None) -> bool:
    return bool(value) and _EMAIL.fullmatch(value) is not None


def validate_name(value: str | None) -> bool:
    """Nome com pelo menos três caracteres úteis."""
    return bool(value) and len(value.strip()) >= MIN_NAME_LENGTH
