"""Erro de validação por campo e conversão de erros do pydantic."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.checkout.messages import GENERIC_INVALID, REQUIRED_FIELD

if TYPE_CHECKING:
    import pydantic


class ValidationError(Exception):
    """Entrada rejeitada antes de qualquer chamada ao gateway.

    Attributes:
        field_errors: caminho do campo (ex.: "customer.cpf_cnpj") -> mensagem
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        super().__init__(self.first_message)

    @property
    def first_message(self) -> str:
        return next(iter(self.field_errors.values()), GENERIC_INVALID)


_PYDANTIC_TYPE_MESSAGES = {
    "missing": REQUIRED_FIELD,
    "string_type": GENERIC_INVALID,
    "float_parsing": GENERIC_INVALID,
    "float_type": GENERIC_INVALID,
    "model_type": GENERIC_INVALID,
    "model_attributes_type": GENERIC_INVALID,
    "dict_type": GENERIC_INVALID,
}


def _message_from_error(error: dict) -> str:
    mapped = _PYDANTIC_TYPE_MESSAGES.get(error.get("type", ""))
    if mapped:
        return mapped
    ctx = error.get("ctx") or {}
    original = ctx.get("error")
    if isinstance(original, ValueError) and str(original):
        return str(original)
    message = str(error.get("msg", ""))
    # "Value error, <msg>" é o prefixo do pydantic para ValueError em validators
    prefix = "Value error, "
    if message.startswith(prefix):
        return message[len(prefix):]
    return message or GENERIC_INVALID


def collect_field_errors(
    exc: pydantic.ValidationError,
    root: str = "__root__",
) -> dict[str, str]:
    """Converte pydantic.ValidationError em {campo: mensagem}.

    Mantém só a primeira mensagem de cada campo, na ordem dos erros.
    Erros de validação do modelo inteiro (loc vazio) usam a chave `root`.
    """
    field_errors: dict[str, str] = {}
    for error in exc.errors():
        path = ".".join(str(part) for part in error.get("loc", ())) or root
        field_errors.setdefault(path, _message_from_error(error))
    return field_errors


def to_validation_error(
    exc: pydantic.ValidationError,
    root: str = "__root__",
) -> ValidationError:
    return ValidationError(collect_field_errors(exc, root))
