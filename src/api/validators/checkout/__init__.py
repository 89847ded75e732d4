"""Validadores do checkout (CPF/CNPJ, cartão, contato).

Funções puras, sem IO: retornam bool. Quem chama associa a mensagem
do campo (ver messages.py).

Uso:
    from api.validators.checkout import validate_tax_id, validate_card_number

    validate_tax_id("529.982.247-25")  # True
    validate_card_number("4532 0151 1283 0366")  # True
"""

from api.validators.checkout import messages
from api.validators.checkout.amount import parse_amount
from api.validators.checkout.contact import (
    LANDLINE_LENGTH,
    MOBILE_LENGTH,
    validate_email,
    validate_name,
    validate_phone_mask,
)
from api.validators.checkout.credit_card import (
    luhn_checksum_ok,
    strip_card_number,
    validate_card_number,
    validate_ccv,
    validate_expiry,
    validate_expiry_month,
    validate_expiry_year,
)
from api.validators.checkout.errors import (
    ValidationError,
    collect_field_errors,
    to_validation_error,
)
from api.validators.checkout.tax_id import (
    CNPJ_LENGTH,
    CPF_LENGTH,
    only_digits,
    validate_cnpj,
    validate_cpf,
    validate_tax_id,
)

__all__ = [
    "CNPJ_LENGTH",
    "CPF_LENGTH",
    "LANDLINE_LENGTH",
    "MOBILE_LENGTH",
    "ValidationError",
    "collect_field_errors",
    "luhn_checksum_ok",
    "messages",
    "only_digits",
    "parse_amount",
    "strip_card_number",
    "to_validation_error",
    "validate_card_number",
    "validate_ccv",
    "validate_cnpj",
    "validate_cpf",
    "validate_email",
    "validate_expiry",
    "validate_expiry_month",
    "validate_expiry_year",
    "validate_name",
    "validate_phone_mask",
    "validate_tax_id",
]
