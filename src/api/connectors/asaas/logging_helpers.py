"""Helpers de logging para a API Asaas (sem PII nem corpo de requisição)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import AsaasApiError

logger = logging.getLogger(__name__)


def log_asaas_error(
    asaas_error: AsaasApiError,
    method: str,
    path: str,
    latency_ms: float,
) -> None:
    """Loga rejeição do gateway (código do erro, nunca os dados enviados)."""
    logger.warning(
        "asaas_request_rejected",
        extra={
            "method": method,
            "path": path,
            "status_code": asaas_error.status_code,
            "error_code": asaas_error.code,
            "latency_ms": round(latency_ms, 2),
        },
    )


def log_transport_error(
    method: str,
    path: str,
    reason: str,
    latency_ms: float,
) -> None:
    logger.warning(
        "asaas_request_failed",
        extra={
            "method": method,
            "path": path,
            "reason": reason,
            "latency_ms": round(latency_ms, 2),
        },
    )


def log_success(
    method: str,
    path: str,
    status_code: int,
    latency_ms: float,
) -> None:
    logger.debug(
        "asaas_request_succeeded",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "latency_ms": round(latency_ms, 2),
        },
    )
