"""Normalizers: máscaras de exibição para os campos do checkout."""

from .checkout import (
    format_card_number,
    format_currency,
    format_expiry,
    format_phone,
    format_tax_id,
)

__all__ = [
    "format_card_number",
    "format_currency",
    "format_expiry",
    "format_phone",
    "format_tax_id",
]
