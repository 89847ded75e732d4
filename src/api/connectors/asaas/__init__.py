"""Connector do gateway de pagamentos Asaas."""

from api.connectors.asaas.errors import (
    CONNECTION_ERROR_MESSAGE,
    DEFAULT_ERROR_MESSAGE,
    INVALID_RESPONSE_MESSAGE,
    TIMEOUT_ERROR_MESSAGE,
    AsaasApiError,
    parse_asaas_error,
)
from api.connectors.asaas.http_client import (
    ACCESS_TOKEN_HEADER,
    AsaasHttpClient,
    create_asaas_http_client,
)

__all__ = [
    "ACCESS_TOKEN_HEADER",
    "CONNECTION_ERROR_MESSAGE",
    "DEFAULT_ERROR_MESSAGE",
    "INVALID_RESPONSE_MESSAGE",
    "TIMEOUT_ERROR_MESSAGE",
    "AsaasApiError",
    "AsaasHttpClient",
    "create_asaas_http_client",
    "parse_asaas_error",
]
