"""Métricas registradas como logs estruturados.

Agregáveis depois pelo coletor de logs (metric_type como chave).

Uso:
    start = time.perf_counter()
    ...
    record_latency("asaas", "create_subscription", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
    *,
    success: bool | None = None,
) -> None:
    """Registra latência de uma operação.

    Args:
        component: Componente medido (ex.: "asaas", "checkout")
        operation: Operação (ex.: "create_customer")
        latency_ms: Latência em milissegundos
        correlation_id: Sobrescreve o correlation_id do contexto
        success: Resultado da operação, quando conhecido
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    if success is not None:
        extra["success"] = success

    logger.info("metric_latency", extra=extra)


def record_checkout_outcome(
    step: str,
    success: bool,
    reason: str | None = None,
) -> None:
    """Registra o desfecho de um passo do checkout (contador por step/success).

    Args:
        step: Passo do fluxo (ex.: "customer", "subscription")
        success: Se o passo concluiu
        reason: Motivo curto da falha, sem PII
    """
    extra: dict[str, object] = {
        "metric_type": "checkout_outcome",
        "component": "checkout",
        "step": step,
        "success": success,
    }
    if reason:
        extra["reason"] = reason

    logger.info("metric_checkout_outcome", extra=extra)
