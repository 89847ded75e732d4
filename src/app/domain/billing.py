"""Entidades do gateway de pagamento (cliente, assinatura, cobrança).

Espelham as respostas JSON do Asaas (camelCase via alias). Nada é
persistido localmente: o gateway é dono de todo o estado.
"""

from __future__ import annotations

from datetime import date  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SubscriptionStatus = Literal["ACTIVE", "EXPIRED", "INACTIVE"]

_GATEWAY_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class Customer(BaseModel):
    """Cliente criado no gateway."""

    model_config = _GATEWAY_CONFIG

    id: str = Field(..., description="Identificador do cliente (cus_...).")
    name: str
    cpf_cnpj: str = Field(..., description="CPF/CNPJ só com dígitos.")
    email: str | None = None
    phone: str | None = None
    mobile_phone: str | None = None
    person_type: Literal["FISICA", "JURIDICA"] | None = None
    notification_disabled: bool | None = None
    object: str | None = None
    date_created: str | None = None


class SubscriptionCreditCard(BaseModel):
    """Resumo do cartão tokenizado devolvido pelo gateway."""

    model_config = _GATEWAY_CONFIG

    credit_card_number: str | None = Field(None, description="Últimos dígitos.")
    credit_card_brand: str | None = None
    credit_card_token: str | None = None


class Subscription(BaseModel):
    """Assinatura mensal no cartão de crédito."""

    model_config = _GATEWAY_CONFIG

    id: str = Field(..., description="Identificador da assinatura (sub_...).")
    customer: str = Field(..., description="Id do cliente dono da assinatura.")
    billing_type: str = "CREDIT_CARD"
    cycle: str = "MONTHLY"
    value: float = Field(..., gt=0)
    next_due_date: date
    status: SubscriptionStatus
    description: str | None = None
    credit_card: SubscriptionCreditCard | None = None
    object: str | None = None
    date_created: str | None = None


class Payment(BaseModel):
    """Cobrança gerada pelo gateway a partir da assinatura."""

    model_config = _GATEWAY_CONFIG

    id: str
    customer: str | None = None
    subscription: str | None = None
    value: float
    net_value: float | None = None
    billing_type: str
    status: str
    due_date: date
    description: str | None = None
    invoice_url: str | None = None
    object: str | None = None
    date_created: str | None = None


class PaymentList(BaseModel):
    """Envelope paginado de GET /subscriptions/{id}/payments."""

    model_config = _GATEWAY_CONFIG

    has_more: bool = False
    total_count: int = 0
    limit: int = 0
    offset: int = 0
    data: list[Payment] = Field(default_factory=list)


class PixQrCode(BaseModel):
    """QR Code PIX de uma cobrança."""

    model_config = _GATEWAY_CONFIG

    encoded_image: str
    payload: str
    expiration_date: str
    description: str | None = None


class SubscriptionResult(BaseModel):
    """Resultado consolidado do checkout: assinatura e primeira cobrança."""

    model_config = _GATEWAY_CONFIG

    subscription: Subscription
    first_payment: Payment | None = None


class CheckoutResult(BaseModel):
    """Fluxo completo: cliente criado, assinatura e primeira cobrança."""

    model_config = _GATEWAY_CONFIG

    customer: Customer
    subscription: Subscription
    first_payment: Payment | None = None


__all__ = [
    "CheckoutResult",
    "Customer",
    "Payment",
    "PaymentList",
    "PixQrCode",
    "Subscription",
    "SubscriptionCreditCard",
    "SubscriptionResult",
    "SubscriptionStatus",
]
