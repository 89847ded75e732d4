"""Endpoints do checkout de assinaturas.

Endpoints:
- POST /checkout/customers: cria cliente no gateway
- POST /checkout/subscriptions: cria assinatura para cliente existente
- POST /checkout: fluxo completo (cliente → assinatura)
- GET /checkout/plans/{plan_id}: plano configurado no ambiente

Todas as respostas usam o envelope {"success", "data" | "error"}.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.routes.checkout._responses import (
    CORRELATION_HEADER,
    INVALID_BODY_MESSAGE,
    client_ip,
    envelope_response,
    read_json_object,
    with_timeout,
)
from app.bootstrap import (
    get_checkout_use_case,
    get_create_customer_use_case,
    get_create_subscription_use_case,
)
from app.domain.result import Failure, Success
from app.observability import reset_correlation_id, set_correlation_id
from app.use_cases.checkout import (
    CheckoutUseCase,
    CreateCustomerUseCase,
    CreateSubscriptionUseCase,
)
from config.settings import (
    CheckoutSettings,
    PlanSettings,
    get_checkout_settings,
    get_plan_settings,
)

logger = logging.getLogger(__name__)

router = APIRouter()

PLAN_NOT_FOUND_MESSAGE = "Plano não encontrado"


@router.post("/customers")
async def create_customer(
    request: Request,
    use_case: CreateCustomerUseCase = Depends(get_create_customer_use_case),
    settings: CheckoutSettings = Depends(get_checkout_settings),
) -> JSONResponse:
    """Cria cliente com notificações desativadas."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        body = await read_json_object(request)
        if body is None:
            return envelope_response(Failure(INVALID_BODY_MESSAGE))

        result = await with_timeout(use_case.execute(body), settings.timeout_seconds)
        return envelope_response(result)
    finally:
        reset_correlation_id(token)


@router.post("/subscriptions")
async def create_subscription(
    request: Request,
    use_case: CreateSubscriptionUseCase = Depends(get_create_subscription_use_case),
    settings: CheckoutSettings = Depends(get_checkout_settings),
) -> JSONResponse:
    """Cria assinatura mensal para `customerId` e devolve a primeira cobrança.

    Body: {"customerId", "amount", "creditCard": {...}, "customer": {...}}
    """
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        body = await read_json_object(request)
        if body is None:
            return envelope_response(Failure(INVALID_BODY_MESSAGE))

        operation = use_case.execute(
            str(body.get("customerId") or ""),
            body.get("amount"),
            body.get("creditCard"),
            body.get("customer"),
            client_ip(request),
        )
        result = await with_timeout(operation, settings.timeout_seconds)
        return envelope_response(result)
    finally:
        reset_correlation_id(token)


@router.post("")
async def checkout(
    request: Request,
    use_case: CheckoutUseCase = Depends(get_checkout_use_case),
    settings: CheckoutSettings = Depends(get_checkout_settings),
) -> JSONResponse:
    """Fluxo completo do formulário.

    Body: {"customer": {...}, "creditCard": {...}, "amount"}
    """
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        body = await read_json_object(request)
        if body is None:
            return envelope_response(Failure(INVALID_BODY_MESSAGE))

        result = await with_timeout(
            use_case.execute(body, client_ip(request)),
            settings.timeout_seconds,
        )
        return envelope_response(result)
    finally:
        reset_correlation_id(token)


@router.get("/plans/{plan_id}")
async def get_plan(
    plan_id: str,
    plans: PlanSettings = Depends(get_plan_settings),
) -> JSONResponse:
    """Valor mensal do plano (UUID sem diferenciar maiúsculas)."""
    plan = plans.get_plan_by_uuid(plan_id)
    if plan is None:
        logger.info("plan_not_found", extra={"component": "checkout"})
        return envelope_response(Failure(PLAN_NOT_FOUND_MESSAGE), not_found=True)
    return envelope_response(Success({"uuid": plan.uuid, "value": plan.value}))
