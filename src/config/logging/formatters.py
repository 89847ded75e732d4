"""Formatter JSON dos logs do checkout.

Todo registro sai como um objeto JSON com os campos de LOG_FIELDS;
campos passados via `extra` entram no mesmo objeto.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável dos campos no JSON
LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

REQUIRED_LOG_FIELDS = frozenset(LOG_FIELDS)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter padrão do serviço.

    Exemplo de saída:
        {"asctime": "...", "level": "INFO", "logger": "app.use_cases.checkout",
         "message": "subscription_created", "correlation_id": "c-1",
         "service": "editai-checkout", "subscription_id": "sub_123"}
    """
    format_string = " ".join(f"%({field})s" for field in LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
