"""Builders de payload para a API Asaas."""

from api.payload_builders.asaas.customer import (
    build_create_customer_payload,
    build_update_customer_payload,
)
from api.payload_builders.asaas.subscription import (
    BILLING_TYPE_CREDIT_CARD,
    CYCLE_MONTHLY,
    PLACEHOLDER_ADDRESS_NUMBER,
    PLACEHOLDER_PHONE,
    PLACEHOLDER_POSTAL_CODE,
    build_subscription_payload,
)

__all__ = [
    "BILLING_TYPE_CREDIT_CARD",
    "CYCLE_MONTHLY",
    "PLACEHOLDER_ADDRESS_NUMBER",
    "PLACEHOLDER_PHONE",
    "PLACEHOLDER_POSTAL_CODE",
    "build_create_customer_payload",
    "build_subscription_payload",
    "build_update_customer_payload",
]
