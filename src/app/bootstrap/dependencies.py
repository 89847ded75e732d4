"""Factories: criação de implementações concretas a partir das settings."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import TYPE_CHECKING

from api.connectors.asaas import create_asaas_http_client
from app.infra.stores import MemoryDedupeStore
from app.use_cases.checkout import (
    CheckoutUseCase,
    CreateCustomerUseCase,
    CreateSubscriptionUseCase,
)
from config.settings import CheckoutSettings, get_asaas_settings, get_checkout_settings

if TYPE_CHECKING:
    import httpx

    from app.protocols.dedupe import AsyncDedupeProtocol
    from app.protocols.payment_gateway import PaymentGatewayProtocol
    from config.settings import AsaasSettings

logger = logging.getLogger(__name__)


def create_payment_gateway(
    settings: AsaasSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PaymentGatewayProtocol:
    """Cria o cliente Asaas com a configuração carregada uma única vez."""
    asaas = settings or get_asaas_settings()
    logger.info(
        "payment_gateway_created",
        extra={
            "component": "bootstrap",
            "gateway": "asaas",
            "api_url": asaas.base_url,
            "key_environment": asaas.key_environment,
        },
    )
    return create_asaas_http_client(asaas, transport=transport)


def create_dedupe_store(settings: CheckoutSettings | None = None) -> AsyncDedupeProtocol | None:
    """Cria o store do guard de reenvio; None quando CHECKOUT_DEDUPE_ENABLED=false."""
    checkout = settings or get_checkout_settings()
    if not checkout.dedupe_enabled:
        return None
    logger.info(
        "dedupe_store_created",
        extra={"backend": "memory", "ttl_seconds": checkout.dedupe_ttl_seconds},
    )
    return MemoryDedupeStore()


def create_customer_use_case(gateway: PaymentGatewayProtocol) -> CreateCustomerUseCase:
    return CreateCustomerUseCase(gateway)


def create_subscription_use_case(
    gateway: PaymentGatewayProtocol,
    dedupe: AsyncDedupeProtocol | None = None,
    settings: CheckoutSettings | None = None,
    today_provider: Callable[[], date] = date.today,
) -> CreateSubscriptionUseCase:
    checkout = settings or get_checkout_settings()
    return CreateSubscriptionUseCase(
        gateway,
        today_provider=today_provider,
        dedupe=dedupe,
        dedupe_ttl_seconds=checkout.dedupe_ttl_seconds,
        notification_reassert=checkout.notification_reassert,
    )


def create_checkout_use_case(
    create_customer: CreateCustomerUseCase,
    create_subscription: CreateSubscriptionUseCase,
) -> CheckoutUseCase:
    return CheckoutUseCase(create_customer, create_subscription)
