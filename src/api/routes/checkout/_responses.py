"""Conversão Result → resposta HTTP e helpers de requisição."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.domain.result import Failure, Result
from app.observability import get_correlation_id

logger = logging.getLogger(__name__)

T = TypeVar("T")

TIMEOUT_MESSAGE = "Tempo limite excedido ao processar o pagamento"
INVALID_BODY_MESSAGE = "Requisição inválida"
DEFAULT_REMOTE_IP = "127.0.0.1"
CORRELATION_HEADER = "x-correlation-id"


def envelope_response(result: Result[Any], *, not_found: bool = False) -> JSONResponse:
    """200 em sucesso; 422 com field_errors em validação; 404/400 nas demais falhas."""
    if not isinstance(result, Failure):
        status_code = status.HTTP_200_OK
    elif result.field_errors:
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    elif not_found:
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(
        content=result.to_envelope(),
        status_code=status_code,
        headers={CORRELATION_HEADER: get_correlation_id()},
    )


async def read_json_object(request: Request) -> dict[str, Any] | None:
    """Body JSON como dict; None se ausente, malformado ou não-objeto."""
    try:
        body = await request.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def client_ip(request: Request) -> str:
    """IP de origem: primeiro item de X-Forwarded-For, senão o peer da conexão."""
    forwarded = request.headers.get("x-forwarded-for", "")
    first = forwarded.split(",")[0].strip()
    if first:
        return first
    if request.client and request.client.host:
        return request.client.host
    return DEFAULT_REMOTE_IP


async def with_timeout(operation: Awaitable[Result[T]], timeout_seconds: float) -> Result[T]:
    """Limita o fluxo inteiro; estouro vira Failure genérico."""
    try:
        return await asyncio.wait_for(operation, timeout=timeout_seconds)
    except TimeoutError:
        logger.warning(
            "checkout_timeout",
            extra={"component": "checkout", "timeout_seconds": timeout_seconds},
        )
        return Failure(TIMEOUT_MESSAGE)
