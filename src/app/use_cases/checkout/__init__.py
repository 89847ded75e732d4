"""Casos de uso do checkout de assinaturas."""

from app.use_cases.checkout.checkout import CheckoutUseCase
from app.use_cases.checkout.create_customer import CreateCustomerUseCase
from app.use_cases.checkout.create_subscription import (
    CreateSubscriptionUseCase,
    subscription_dedupe_key,
)

__all__ = [
    "CheckoutUseCase",
    "CreateCustomerUseCase",
    "CreateSubscriptionUseCase",
    "subscription_dedupe_key",
]
