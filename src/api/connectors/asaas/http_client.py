"""Cliente HTTP para a API de pagamentos Asaas.

Estende HttpClient genérico com o contrato do gateway:
- Autenticação pelo header `access_token` (chave validada a cada chamada)
- Corpo JSON nas escritas, parse JSON em todas as respostas
- Status de erro → primeira `description` da lista `errors`
- Falhas de rede/parse/configuração → Failure com mensagem

Nunca levanta exceção para o chamador: todo desfecho vira Result.
"""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

import pydantic

from api.connectors.asaas.errors import (
    CONNECTION_ERROR_MESSAGE,
    INVALID_RESPONSE_MESSAGE,
    TIMEOUT_ERROR_MESSAGE,
    parse_asaas_error,
)
from api.connectors.asaas.logging_helpers import (
    log_asaas_error,
    log_success,
    log_transport_error,
)
from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from app.domain.billing import Customer, PaymentList, PixQrCode, Subscription
from app.domain.result import Failure, Result, Success
from app.observability import record_latency
from utils.errors import ConfigurationError, GatewayResponseError

if TYPE_CHECKING:
    import httpx

    from config.settings import AsaasSettings

logger: logging.Logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)

ACCESS_TOKEN_HEADER = "access_token"


class AsaasHttpClient(HttpClient):
    """Cliente do gateway Asaas (clientes, assinaturas, cobranças, PIX)."""

    def __init__(
        self,
        settings: AsaasSettings,
        config: HttpClientConfig | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            settings: Configuração carregada no startup (URL, chave, timeout)
            config: Configuração HTTP; por padrão usa o timeout do settings
        """
        super().__init__(config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds))
        self._settings = settings

    async def create_customer(self, payload: dict[str, Any]) -> Result[Customer]:
        """POST /customers."""
        return await self._call("POST", "/customers", Customer, payload=payload)

    async def update_customer(
        self,
        customer_id: str,
        payload: dict[str, Any],
    ) -> Result[Customer]:
        """PUT /customers/{id} (atualização parcial)."""
        path = f"/customers/{quote(customer_id, safe='')}"
        return await self._call("PUT", path, Customer, payload=payload)

    async def create_subscription(self, payload: dict[str, Any]) -> Result[Subscription]:
        """POST /subscriptions/ (assinatura com cartão de crédito)."""
        return await self._call("POST", "/subscriptions/", Subscription, payload=payload)

    async def list_subscription_payments(self, subscription_id: str) -> Result[PaymentList]:
        """GET /subscriptions/{id}/payments (envelope paginado)."""
        path = f"/subscriptions/{quote(subscription_id, safe='')}/payments"
        return await self._call("GET", path, PaymentList)

    async def get_pix_qr_code(self, payment_id: str) -> Result[PixQrCode]:
        """GET /payments/{id}/pixQrCode."""
        path = f"/payments/{quote(payment_id, safe='')}/pixQrCode"
        return await self._call("GET", path, PixQrCode)

    def _build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self._settings.user_agent,
            ACCESS_TOKEN_HEADER: api_key,
        }

    async def _call(
        self,
        method: str,
        path: str,
        model: type[ModelT],
        *,
        payload: dict[str, Any] | None = None,
    ) -> Result[ModelT]:
        started_at = time.perf_counter()
        result = await self._execute(method, path, model, payload, started_at)
        record_latency(
            "asaas",
            f"{method} {_route_template(path)}",
            _elapsed_ms(started_at),
            success=result.success,
        )
        return result

    async def _execute(
        self,
        method: str,
        path: str,
        model: type[ModelT],
        payload: dict[str, Any] | None,
        started_at: float,
    ) -> Result[ModelT]:
        try:
            api_key = self._settings.require_api_key()
        except ConfigurationError as exc:
            logger.error("asaas_configuration_error", extra={"path": path})
            return Failure(str(exc))

        try:
            response = await self.request(
                method,
                f"{self._settings.base_url}{path}",
                json=payload,
                headers=self._build_headers(api_key),
            )
        except HttpError as exc:
            reason = "timeout" if exc.is_timeout else "connection"
            log_transport_error(method, path, reason, _elapsed_ms(started_at))
            if exc.is_timeout:
                return Failure(TIMEOUT_ERROR_MESSAGE)
            return Failure(CONNECTION_ERROR_MESSAGE)
        except Exception as exc:
            logger.exception("asaas_unexpected_error", extra={"method": method, "path": path})
            return Failure(str(exc) or CONNECTION_ERROR_MESSAGE)

        return self._process_response(response, method, path, model, started_at)

    def _process_response(
        self,
        response: httpx.Response,
        method: str,
        path: str,
        model: type[ModelT],
        started_at: float,
    ) -> Result[ModelT]:
        if response.is_error:
            try:
                body: Any = _parse_json(response)
            except GatewayResponseError:
                body = None
            asaas_error = parse_asaas_error(response.status_code, body)
            log_asaas_error(asaas_error, method, path, _elapsed_ms(started_at))
            return Failure(asaas_error.description)

        try:
            data = model.model_validate(_parse_json(response))
        except (GatewayResponseError, pydantic.ValidationError) as exc:
            log_transport_error(method, path, type(exc).__name__, _elapsed_ms(started_at))
            return Failure(INVALID_RESPONSE_MESSAGE)

        log_success(method, path, response.status_code, _elapsed_ms(started_at))
        return Success(data)


def _parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise GatewayResponseError("Response JSON inválido") from exc


def _route_template(path: str) -> str:
    """/customers/cus_1 -> /customers/{id} (cardinalidade baixa na métrica)."""
    parts = path.strip("/").split("/")
    return "/" + "/".join("{id}" if index % 2 == 1 else part for index, part in enumerate(parts))


def _elapsed_ms(started_at: float) -> float:
    return (time.perf_counter() - started_at) * 1000


def create_asaas_http_client(
    settings: AsaasSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsaasHttpClient:
    """Factory do cliente Asaas com a configuração do ambiente.

    Args:
        settings: AsaasSettings opcional. Se None, carrega do ambiente.
        transport: Transporte httpx alternativo (testes).
    """
    from config.settings import get_asaas_settings

    asaas = settings or get_asaas_settings()
    config = HttpClientConfig(
        timeout_seconds=asaas.request_timeout_seconds,
        transport=transport,
    )
    return AsaasHttpClient(asaas, config=config)
