"""Normalização/máscaras dos campos do checkout."""

from api.normalizers.checkout.formatters import (
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
