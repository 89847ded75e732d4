"""Caso de uso: criar cliente no gateway com notificações desativadas."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import pydantic

from api.payload_builders.asaas import build_create_customer_payload
from app.domain.checkout import CustomerInput
from app.domain.result import Failure, Result
from app.observability import record_checkout_outcome
from app.use_cases.checkout._helpers import (
    CREATE_CUSTOMER_ERROR,
    PROCESS_CUSTOMER_ERROR,
    coerce_model,
    prefixed_field_errors,
    validation_failure,
)

if TYPE_CHECKING:
    from app.domain.billing import Customer
    from app.protocols.payment_gateway import PaymentGatewayProtocol

logger = logging.getLogger(__name__)


class CreateCustomerUseCase:
    """Valida os dados do cliente e cria o registro no gateway."""

    def __init__(self, gateway: PaymentGatewayProtocol) -> None:
        self._gateway = gateway

    async def execute(self, customer: CustomerInput | Mapping[str, Any]) -> Result[Customer]:
        """Cria o cliente.

        Nunca levanta exceção: validação, recusa do gateway e erros
        inesperados viram Failure. Em falha nenhuma assinatura deve ser
        tentada pelo chamador.
        """
        try:
            customer_input = coerce_model(CustomerInput, customer)
        except pydantic.ValidationError as exc:
            record_checkout_outcome("customer", False, "validation_error")
            return validation_failure(prefixed_field_errors(exc, "customer"))

        try:
            payload = build_create_customer_payload(customer_input)
            result = await self._gateway.create_customer(payload)
        except Exception as exc:
            logger.exception("create_customer_unexpected_error", extra={"component": "checkout"})
            record_checkout_outcome("customer", False, "unexpected_error")
            return Failure(str(exc) or PROCESS_CUSTOMER_ERROR)

        if isinstance(result, Failure):
            logger.warning("customer_creation_failed", extra={"component": "checkout"})
            record_checkout_outcome("customer", False, "gateway_error")
            return Failure(result.error or CREATE_CUSTOMER_ERROR)

        logger.info(
            "customer_created",
            extra={
                "component": "checkout",
                "customer_id": result.data.id,
                "person_type": customer_input.person_type,
            },
        )
        record_checkout_outcome("customer", True)
        return result
