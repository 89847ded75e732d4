"""Envelope uniforme de resultado: Success | Failure.

Toda operação de borda (gateway e casos de uso) devolve um Result em vez
de levantar exceção. O consumidor decide pela variante:

    if isinstance(result, Failure):
        return result.error
    customer = result.data
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Operação concluída; `data` carrega o resultado."""

    data: T
    success: Literal[True] = field(default=True, init=False)

    def to_envelope(self) -> dict[str, Any]:
        return {"success": True, "data": _jsonable(self.data)}


@dataclass(frozen=True, slots=True)
class Failure:
    """Operação falhou; `error` é a mensagem exibível ao usuário.

    `field_errors` só é preenchido em falhas de validação.
    """

    error: str
    field_errors: dict[str, str] = field(default_factory=dict)
    success: Literal[False] = field(default=False, init=False)

    def to_envelope(self) -> dict[str, Any]:
        envelope: dict[str, Any] = {"success": False, "error": self.error}
        if self.field_errors:
            envelope["field_errors"] = dict(self.field_errors)
        return envelope


Result = Union[Success[T], Failure]  # noqa: UP007 - alias genérico usado como Result[T]


def _jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(data, list):
        return [_jsonable(item) for item in data]
    return data


__all__ = ["Failure", "Result", "Success"]
