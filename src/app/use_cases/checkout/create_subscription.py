"""Caso de uso: assinatura mensal no cartão de crédito.

Fluxo (sequencial, cada passo depende do anterior):
1. Valida cartão, dados do titular e valor
2. Calcula nextDueDate (hoje = cobrança imediata)
3. Guard opcional contra reenvio (reserva atômica, liberada se a criação falhar)
4. Cria a assinatura (falha encerra o fluxo, sem retry nem rollback)
5. Reafirma notificationDisabled no cliente (best-effort)
6. Busca a primeira cobrança gerada (informativo)
"""

from __future__ import annotations

import hashlib
import logging
import time
from collections.abc import Callable, Mapping
from datetime import date
from typing import TYPE_CHECKING, Any

import pydantic

from api.payload_builders.asaas import (
    build_subscription_payload,
    build_update_customer_payload,
)
from api.validators.checkout import messages, parse_amount
from app.domain.billing import SubscriptionResult
from app.domain.checkout import CreditCardInput, CustomerInput
from app.domain.result import Failure, Result, Success
from app.observability import record_checkout_outcome, record_latency
from app.use_cases.checkout._helpers import (
    CREATE_SUBSCRIPTION_ERROR,
    DEFAULT_REMOTE_IP,
    DUPLICATE_SUBSCRIPTION_ERROR,
    PROCESS_SUBSCRIPTION_ERROR,
    coerce_model,
    prefixed_field_errors,
    validation_failure,
)
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.domain.billing import Payment, Subscription
    from app.protocols.dedupe import AsyncDedupeProtocol
    from app.protocols.payment_gateway import PaymentGatewayProtocol

logger = logging.getLogger(__name__)

DEFAULT_DEDUPE_TTL_SECONDS = 600


class CreateSubscriptionUseCase:
    """Cria a assinatura e descobre a primeira cobrança."""

    def __init__(
        self,
        gateway: PaymentGatewayProtocol,
        today_provider: Callable[[], date] = date.today,
        dedupe: AsyncDedupeProtocol | None = None,
        dedupe_ttl_seconds: int = DEFAULT_DEDUPE_TTL_SECONDS,
        notification_reassert: bool = True,
    ) -> None:
        """Inicializa o caso de uso.

        Args:
            gateway: Cliente do gateway de pagamento
            today_provider: Data do primeiro vencimento (testes usam datas futuras)
            dedupe: Store do guard de reenvio; None desativa o guard
            dedupe_ttl_seconds: Janela do guard
            notification_reassert: Reenvia notificationDisabled após criar a assinatura
        """
        self._gateway = gateway
        self._today_provider = today_provider
        self._dedupe = dedupe
        self._dedupe_ttl_seconds = dedupe_ttl_seconds
        self._notification_reassert = notification_reassert

    async def execute(
        self,
        customer_id: str,
        amount: Any,
        credit_card: CreditCardInput | Mapping[str, Any],
        customer: CustomerInput | Mapping[str, Any],
        remote_ip: str = DEFAULT_REMOTE_IP,
    ) -> Result[SubscriptionResult]:
        """Executa o fluxo da assinatura. Nunca levanta exceção."""
        started_at = time.perf_counter()
        try:
            result = await self._run(customer_id, amount, credit_card, customer, remote_ip)
        except Exception as exc:
            logger.exception(
                "create_subscription_unexpected_error",
                extra={"component": "checkout", "customer_id": customer_id},
            )
            record_checkout_outcome("subscription", False, "unexpected_error")
            result = Failure(str(exc) or PROCESS_SUBSCRIPTION_ERROR)

        record_latency(
            "checkout",
            "create_subscription",
            (time.perf_counter() - started_at) * 1000,
            success=result.success,
        )
        return result

    async def _run(
        self,
        customer_id: str,
        amount: Any,
        credit_card: CreditCardInput | Mapping[str, Any],
        customer: CustomerInput | Mapping[str, Any],
        remote_ip: str,
    ) -> Result[SubscriptionResult]:
        field_errors: dict[str, str] = {}
        card_input: CreditCardInput | None = None
        customer_input: CustomerInput | None = None

        if not (customer_id or "").strip():
            field_errors["customerId"] = messages.CUSTOMER_ID_REQUIRED

        parsed_amount = parse_amount(amount)
        if parsed_amount is None:
            field_errors["amount"] = messages.AMOUNT_INVALID

        try:
            card_input = coerce_model(CreditCardInput, credit_card)
        except pydantic.ValidationError as exc:
            field_errors.update(prefixed_field_errors(exc, "creditCard"))

        try:
            customer_input = coerce_model(CustomerInput, customer)
        except pydantic.ValidationError as exc:
            field_errors.update(prefixed_field_errors(exc, "customer"))

        if field_errors or card_input is None or customer_input is None or parsed_amount is None:
            record_checkout_outcome("subscription", False, "validation_error")
            return validation_failure(field_errors)

        next_due_date = self._today_provider()
        payload = build_subscription_payload(
            customer_id=customer_id,
            amount=parsed_amount,
            next_due_date=next_due_date,
            credit_card=card_input,
            customer=customer_input,
            remote_ip=remote_ip or DEFAULT_REMOTE_IP,
        )

        dedupe_key = None
        if self._dedupe is not None:
            dedupe_key = subscription_dedupe_key(
                customer_input.tax_id_digits,
                parsed_amount,
                card_input.last_digits,
                next_due_date,
            )
            if await self._dedupe.seen(dedupe_key, self._dedupe_ttl_seconds):
                logger.warning(
                    "subscription_duplicate_blocked",
                    extra={"component": "checkout", "customer_id": customer_id},
                )
                record_checkout_outcome("subscription", False, "duplicate")
                return Failure(DUPLICATE_SUBSCRIPTION_ERROR)

        # Reserva liberada só em recusa ou erro; em cancelamento (timeout)
        # o resultado no gateway é desconhecido e a janela é mantida.
        try:
            created = await self._gateway.create_subscription(payload)
        except Exception:
            await self._release_dedupe(dedupe_key)
            raise
        if isinstance(created, Failure):
            await self._release_dedupe(dedupe_key)
            logger.warning(
                "subscription_creation_failed",
                extra={"component": "checkout", "customer_id": customer_id},
            )
            record_checkout_outcome("subscription", False, "gateway_error")
            return Failure(created.error or CREATE_SUBSCRIPTION_ERROR)

        subscription = created.data

        logger.info(
            "subscription_created",
            extra={
                "component": "checkout",
                "customer_id": customer_id,
                "subscription_id": subscription.id,
                "status": subscription.status,
                "next_due_date": next_due_date.isoformat(),
                "card_last_digits": card_input.last_digits,
            },
        )
        record_checkout_outcome("subscription", True)

        if self._notification_reassert:
            await self._reassert_notifications_disabled(customer_id)

        first_payment = await self._find_first_payment(subscription)
        return Success(SubscriptionResult(subscription=subscription, first_payment=first_payment))

    async def _release_dedupe(self, dedupe_key: str | None) -> None:
        if dedupe_key is not None and self._dedupe is not None:
            await self._dedupe.release(dedupe_key)

    async def _reassert_notifications_disabled(self, customer_id: str) -> None:
        """O gateway pode reativar notificações ao gerar cobranças."""
        try:
            result = await self._gateway.update_customer(
                customer_id,
                build_update_customer_payload(),
            )
        except Exception as exc:
            log_fallback(logger, "notification_reassert", type(exc).__name__)
            return
        if isinstance(result, Failure):
            log_fallback(logger, "notification_reassert", "gateway_error")

    async def _find_first_payment(self, subscription: Subscription) -> Payment | None:
        """Cobrança de vencimento mais próximo; None é esperado (ex.: vencimento futuro)."""
        try:
            listed = await self._gateway.list_subscription_payments(subscription.id)
        except Exception as exc:
            log_fallback(logger, "subscription_payments", type(exc).__name__)
            return None

        if isinstance(listed, Failure) or not listed.data.data:
            logger.info(
                "subscription_payments_not_found",
                extra={
                    "component": "checkout",
                    "subscription_id": subscription.id,
                    "reason": "gateway_error" if isinstance(listed, Failure) else "empty",
                },
            )
            return None

        payments = sorted(listed.data.data, key=lambda payment: payment.due_date)
        return payments[0]


def subscription_dedupe_key(
    tax_id_digits: str,
    amount: float,
    card_last_digits: str,
    next_due_date: date,
) -> str:
    """Chave do guard de reenvio (hash, sem dados do cartão em claro)."""
    key_material = f"{tax_id_digits}:{amount:.2f}:{card_last_digits}:{next_due_date.isoformat()}"
    return hashlib.sha256(key_material.encode()).hexdigest()
