"""Caso de uso: fluxo completo do formulário (cliente → assinatura)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import pydantic

from api.validators.checkout import collect_field_errors
from app.domain.billing import CheckoutResult
from app.domain.checkout import CheckoutInput
from app.domain.result import Failure, Result, Success
from app.use_cases.checkout._helpers import DEFAULT_REMOTE_IP, coerce_model, validation_failure

if TYPE_CHECKING:
    from app.use_cases.checkout.create_customer import CreateCustomerUseCase
    from app.use_cases.checkout.create_subscription import CreateSubscriptionUseCase

logger = logging.getLogger(__name__)


class CheckoutUseCase:
    """Valida o formulário inteiro antes de qualquer chamada ao gateway.

    Falha na criação do cliente encerra o fluxo; cliente já criado não é
    removido se a assinatura falhar.
    """

    def __init__(
        self,
        create_customer: CreateCustomerUseCase,
        create_subscription: CreateSubscriptionUseCase,
    ) -> None:
        self._create_customer = create_customer
        self._create_subscription = create_subscription

    async def execute(
        self,
        form: CheckoutInput | Mapping[str, Any],
        remote_ip: str = DEFAULT_REMOTE_IP,
    ) -> Result[CheckoutResult]:
        try:
            checkout = coerce_model(CheckoutInput, form)
        except pydantic.ValidationError as exc:
            return validation_failure(collect_field_errors(exc))

        customer_result = await self._create_customer.execute(checkout.customer)
        if isinstance(customer_result, Failure):
            return customer_result

        customer = customer_result.data
        subscription_result = await self._create_subscription.execute(
            customer.id,
            checkout.amount,
            checkout.credit_card,
            checkout.customer,
            remote_ip,
        )
        if isinstance(subscription_result, Failure):
            logger.warning(
                "checkout_subscription_failed",
                extra={"component": "checkout", "customer_id": customer.id},
            )
            return subscription_result

        return Success(
            CheckoutResult(
                customer=customer,
                subscription=subscription_result.data.subscription,
                first_payment=subscription_result.data.first_payment,
            )
        )
