"""Helpers compartilhados pelos casos de uso do checkout."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel

from api.validators.checkout import collect_field_errors
from app.domain.result import Failure

if TYPE_CHECKING:
    import pydantic

ModelT = TypeVar("ModelT", bound=BaseModel)

CREATE_CUSTOMER_ERROR = "Erro ao criar cliente"
PROCESS_CUSTOMER_ERROR = "Erro ao processar dados do cliente"
CREATE_SUBSCRIPTION_ERROR = "Erro ao criar assinatura"
PROCESS_SUBSCRIPTION_ERROR = "Erro ao processar assinatura"
DUPLICATE_SUBSCRIPTION_ERROR = (
    "Assinatura já enviada recentemente. Aguarde alguns minutos antes de tentar novamente."
)

DEFAULT_REMOTE_IP = "127.0.0.1"


def coerce_model(model: type[ModelT], data: ModelT | Mapping[str, Any]) -> ModelT:
    """Aceita instância já validada ou dicionário cru do formulário.

    Raises:
        pydantic.ValidationError: dados do dicionário inválidos
    """
    if isinstance(data, model):
        return data
    return model.model_validate(data)


def prefixed_field_errors(exc: pydantic.ValidationError, prefix: str) -> dict[str, str]:
    """Erros por campo com o nome do bloco do formulário na frente."""
    field_errors = collect_field_errors(exc, root=prefix)
    return {
        path if path == prefix else f"{prefix}.{path}": message
        for path, message in field_errors.items()
    }


def validation_failure(field_errors: dict[str, str]) -> Failure:
    """Failure com a primeira mensagem e o mapa completo por campo."""
    first_message = next(iter(field_errors.values()))
    return Failure(first_message, field_errors=field_errors)
