"""Erros e helpers de parsing para a API Asaas.

Respostas de erro do Asaas seguem o formato:
    {"errors": [{"code": "invalid_cpfCnpj", "description": "O CPF/CNPJ informado é inválido."}]}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_ERROR_MESSAGE = "Erro ao processar requisição"
CONNECTION_ERROR_MESSAGE = "Erro ao conectar com o servidor"
TIMEOUT_ERROR_MESSAGE = "Tempo de resposta do gateway de pagamento excedido"
INVALID_RESPONSE_MESSAGE = "Resposta inválida do gateway de pagamento"


@dataclass(frozen=True)
class AsaasApiError:
    """Primeiro erro estruturado de uma resposta HTTP de erro."""

    status_code: int
    code: str
    description: str


def parse_asaas_error(status_code: int, body: Any) -> AsaasApiError:
    """Extrai o primeiro erro da lista `errors`.

    Corpo ausente, não-dict ou lista vazia caem na mensagem padrão.
    """
    first: dict[str, Any] = {}
    errors = body.get("errors") if isinstance(body, dict) else None
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        first = errors[0]

    description = first.get("description")
    return AsaasApiError(
        status_code=status_code,
        code=str(first.get("code") or "unknown"),
        description=description if isinstance(description, str) and description else DEFAULT_ERROR_MESSAGE,
    )
