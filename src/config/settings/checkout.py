"""Settings do fluxo de checkout (timeout, dedupe, notificações)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.base import env_number


@dataclass(frozen=True)
class CheckoutSettings:
    """Configurações de orquestração do checkout.

    Attributes:
        timeout_seconds: Timeout do fluxo inteiro por requisição
        dedupe_enabled: Bloqueia reenvio da mesma assinatura dentro da janela
        dedupe_ttl_seconds: Janela de bloqueio de reenvio
        notification_reassert: Reenvia notificationDisabled após a assinatura
        invalid_env: Variáveis numéricas ignoradas por valor inválido
    """

    timeout_seconds: float = 60.0
    dedupe_enabled: bool = False
    dedupe_ttl_seconds: int = 600
    notification_reassert: bool = True
    invalid_env: tuple[str, ...] = ()

    def validate(self) -> list[str]:
        """Valida configurações do checkout."""
        errors = [f"{name} deve ser numérico" for name in self.invalid_env]

        if self.timeout_seconds <= 0:
            errors.append("CHECKOUT_TIMEOUT_SECONDS deve ser > 0")

        if self.dedupe_ttl_seconds <= 0:
            errors.append("CHECKOUT_DEDUPE_TTL_SECONDS deve ser > 0")

        return errors


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _load_from_env() -> CheckoutSettings:
    """Carrega CheckoutSettings de variáveis de ambiente."""
    invalid: list[str] = []
    return CheckoutSettings(
        timeout_seconds=env_number("CHECKOUT_TIMEOUT_SECONDS", 60.0, invalid),
        dedupe_enabled=_env_flag("CHECKOUT_DEDUPE_ENABLED", "false"),
        dedupe_ttl_seconds=env_number("CHECKOUT_DEDUPE_TTL_SECONDS", 600, invalid),
        notification_reassert=_env_flag("CHECKOUT_NOTIFICATION_REASSERT", "true"),
        invalid_env=tuple(invalid),
    )


@lru_cache(maxsize=1)
def get_checkout_settings() -> CheckoutSettings:
    """Retorna instância cacheada de CheckoutSettings."""
    return _load_from_env()
