"""Validação de CPF/CNPJ por dígitos verificadores.

Funções puras: recebem texto com ou sem máscara e retornam bool.
"""

from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"[^0-9]")

CPF_LENGTH = 11
CNPJ_LENGTH = 14

_CPF_FIRST_WEIGHTS = tuple(range(10, 1, -1))
_CPF_SECOND_WEIGHTS = tuple(range(11, 1, -1))
_CNPJ_FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_SECOND_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def only_digits(value: str | None) -> str:
    """Remove tudo que não for dígito (idempotente)."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)


def _is_repeated(digits: str) -> bool:
    return len(set(digits)) == 1


def _weighted_sum(digits: str, weights: tuple[int, ...]) -> int:
    return sum(int(d) * w for d, w in zip(digits, weights, strict=True))


def _cpf_check_digit(digits: str, weights: tuple[int, ...]) -> int:
    digit = 11 - (_weighted_sum(digits, weights) % 11)
    return 0 if digit >= 10 else digit


def _cnpj_check_digit(digits: str, weights: tuple[int, ...]) -> int:
    remainder = _weighted_sum(digits, weights) % 11
    return 0 if remainder < 2 else 11 - remainder


def validate_cpf(value: str | None) -> bool:
    """Valida CPF (11 dígitos, dois verificadores módulo 11)."""
    digits = only_digits(value)
    if len(digits) != CPF_LENGTH or _is_repeated(digits):
        return False

    if _cpf_check_digit(digits[:9], _CPF_FIRST_WEIGHTS) != int(digits[9]):
        return False
    return _cpf_check_digit(digits[:10], _CPF_SECOND_WEIGHTS) == int(digits[10])


def validate_cnpj(value: str | None) -> bool:
    """Valida CNPJ (14 dígitos, dois verificadores módulo 11)."""
    digits = only_digits(value)
    if len(digits) != CNPJ_LENGTH or _is_repeated(digits):
        return False

    if _cnpj_check_digit(digits[:12], _CNPJ_FIRST_WEIGHTS) != int(digits[12]):
        return False
    return _cnpj_check_digit(digits[:13], _CNPJ_SECOND_WEIGHTS) == int(digits[13])


def validate_tax_id(value: str | None) -> bool:
    """Valida CPF ou CNPJ conforme a quantidade de dígitos.

    Qualquer tamanho diferente de 11 ou 14 é inválido.
    """
    digits = only_digits(value)
    if len(digits) == CPF_LENGTH:
        return validate_cpf(digits)
    if len(digits) == CNPJ_LENGTH:
        return validate_cnpj(digits)
    return False
