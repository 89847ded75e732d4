"""Endpoints de health check (liveness/readiness)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import (
    AsaasSettings,
    BaseSettings,
    get_asaas_settings,
    get_base_settings,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    errors: tuple[str, ...] = ()
    environment: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "errors": list(self.errors),
            "environment": self.environment,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check(
    base: BaseSettings = Depends(get_base_settings),
) -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=base.service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(
    asaas: AsaasSettings = Depends(get_asaas_settings),
) -> JSONResponse:
    """Readiness probe: pronto só com a configuração do gateway válida.

    Não chama o gateway (evita consumo de cota a cada probe).
    """
    asaas_check = _check_asaas(asaas)
    ready = asaas_check.status == "ok"
    if not ready:
        logger.warning("readiness_asaas_not_configured", extra={"error_count": len(asaas_check.errors)})

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"asaas": asaas_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_asaas(settings: AsaasSettings) -> DependencyCheck:
    errors = settings.validate()
    if errors:
        return DependencyCheck(status="failed", errors=tuple(errors))
    return DependencyCheck(status="ok", environment=settings.key_environment)
