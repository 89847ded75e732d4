"""Dados do formulário de checkout (cliente, cartão, valor).

Modelos de entrada transitórios: validam e normalizam antes de qualquer
chamada ao gateway. Os dados do cartão nunca são persistidos nem logados.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from api.validators.checkout import (
    CNPJ_LENGTH,
    CPF_LENGTH,
    LANDLINE_LENGTH,
    MOBILE_LENGTH,
    messages,
    only_digits,
    parse_amount,
    strip_card_number,
    validate_card_number,
    validate_ccv,
    validate_email,
    validate_expiry,
    validate_expiry_month,
    validate_expiry_year,
    validate_name,
    validate_phone_mask,
    validate_tax_id,
)

PersonType = Literal["FISICA", "JURIDICA"]

_FORM_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    str_strip_whitespace=True,
    extra="ignore",
)


class CustomerInput(BaseModel):
    """Dados do cliente como digitados no formulário."""

    model_config = _FORM_CONFIG

    name: str = Field(..., description="Nome completo ou razão social.")
    cpf_cnpj: str = Field(..., description="CPF ou CNPJ, com ou sem máscara.")
    email: str = Field(..., description="E-mail de contato.")
    phone: str = Field(..., description="Telefone no formato (DD) DDDDD-DDDD.")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not validate_name(value):
            raise ValueError(messages.NAME_INVALID)
        return value

    @field_validator("cpf_cnpj")
    @classmethod
    def _check_tax_id(cls, value: str) -> str:
        if len(value) < CPF_LENGTH or not validate_tax_id(value):
            raise ValueError(messages.TAX_ID_INVALID)
        return value

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not validate_email(value):
            raise ValueError(messages.EMAIL_INVALID)
        return value

    @field_validator("phone")
    @classmethod
    def _check_phone(cls, value: str) -> str:
        if not validate_phone_mask(value):
            raise ValueError(messages.PHONE_INVALID)
        return value

    @property
    def tax_id_digits(self) -> str:
        return only_digits(self.cpf_cnpj)

    @property
    def phone_digits(self) -> str:
        return only_digits(self.phone)

    @property
    def person_type(self) -> PersonType:
        return "JURIDICA" if len(self.tax_id_digits) == CNPJ_LENGTH else "FISICA"

    @property
    def landline(self) -> str | None:
        """Telefone fixo (10 dígitos); exclusivo com `mobile`."""
        digits = self.phone_digits
        return digits if len(digits) == LANDLINE_LENGTH else None

    @property
    def mobile(self) -> str | None:
        """Celular (11 dígitos); exclusivo com `landline`."""
        digits = self.phone_digits
        return digits if len(digits) == MOBILE_LENGTH else None


class CreditCardInput(BaseModel):
    """Dados do cartão. Transitório: descartado após a orquestração."""

    model_config = _FORM_CONFIG

    number: str = Field(..., description="Número do cartão, com ou sem espaços.")
    holder_name: str = Field(..., description="Nome impresso no cartão.")
    expiry_month: str = Field(..., description="Mês de validade (01-12).")
    expiry_year: str = Field(..., description="Ano de validade (AAAA).")
    ccv: str = Field(..., description="Código de segurança (3 ou 4 dígitos).")

    @field_validator("number")
    @classmethod
    def _check_number(cls, value: str) -> str:
        if not validate_card_number(value):
            raise ValueError(messages.CARD_NUMBER_INVALID)
        return value

    @field_validator("holder_name")
    @classmethod
    def _check_holder_name(cls, value: str) -> str:
        if not validate_name(value):
            raise ValueError(messages.HOLDER_NAME_INVALID)
        return value

    @field_validator("expiry_month", mode="before")
    @classmethod
    def _check_month(cls, value: object) -> str:
        text = f"{value:02d}" if isinstance(value, int) else str(value).strip()
        if not validate_expiry_month(text):
            raise ValueError(messages.EXPIRY_MONTH_INVALID)
        return text

    @field_validator("expiry_year", mode="before")
    @classmethod
    def _check_year(cls, value: object) -> str:
        text = str(value).strip()
        if not validate_expiry_year(text, date.today()):
            raise ValueError(messages.EXPIRY_YEAR_INVALID)
        return text

    @field_validator("ccv")
    @classmethod
    def _check_ccv(cls, value: str) -> str:
        if not validate_ccv(value):
            raise ValueError(messages.CCV_INVALID)
        return value

    @model_validator(mode="after")
    def _check_not_expired(self) -> CreditCardInput:
        if not validate_expiry(self.expiry_month, self.expiry_year, datetime.now()):
            raise ValueError(messages.CARD_EXPIRED)
        return self

    @property
    def number_digits(self) -> str:
        return strip_card_number(self.number)

    @property
    def last_digits(self) -> str:
        """Quatro últimos dígitos (único trecho do cartão que pode ir para logs)."""
        return self.number_digits[-4:]

    def __repr__(self) -> str:
        return f"CreditCardInput(last_digits={self.last_digits!r})"

    __str__ = __repr__


class CheckoutInput(BaseModel):
    """Formulário completo: cliente, cartão e valor do plano."""

    model_config = _FORM_CONFIG

    customer: CustomerInput
    credit_card: CreditCardInput
    amount: float = Field(..., description="Valor mensal em reais.")

    @field_validator("amount", mode="before")
    @classmethod
    def _check_amount(cls, value: object) -> float:
        amount = parse_amount(value)
        if amount is None:
            raise ValueError(messages.AMOUNT_INVALID)
        return amount


__all__ = ["CheckoutInput", "CreditCardInput", "CustomerInput", "PersonType"]
