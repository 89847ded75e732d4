"""Settings do gateway de pagamento Asaas.

Contrato único de configuração: a chave é lida crua do ambiente, validada
contra o padrão do provedor e nunca corrigida por heurística. Chave inválida
vira ConfigurationError com mensagem descritiva.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from config.settings.base import env_number
from utils.errors import ConfigurationError

ASAAS_API_URL: str = "https://api.asaas.com/v3"
ASAAS_SANDBOX_API_URL: str = "https://api-sandbox.asaas.com/v3"

# $aact_prod_... (produção) ou $aact_hmlg_... (sandbox)
API_KEY_PATTERN = re.compile(r"\$aact_(?P<env>prod|hmlg)_\S+")

KeyEnvironment = Literal["production", "sandbox"]

_KEY_ENVIRONMENTS: dict[str, KeyEnvironment] = {
    "prod": "production",
    "hmlg": "sandbox",
}


@dataclass(frozen=True)
class AsaasSettings:
    """Configurações de acesso à API Asaas.

    Attributes:
        api_url: URL base da API (sem barra final)
        api_key: Chave secreta enviada no header access_token
        request_timeout_seconds: Timeout por requisição HTTP
        user_agent: User-Agent enviado ao gateway
        invalid_env: Variáveis numéricas ignoradas por valor inválido
    """

    api_url: str = ASAAS_API_URL
    api_key: str = ""
    request_timeout_seconds: float = 30.0
    user_agent: str = "editai-checkout/1.0"
    invalid_env: tuple[str, ...] = ()

    @property
    def base_url(self) -> str:
        """URL base normalizada, sem barra final."""
        return self.api_url.rstrip("/")

    @property
    def key_environment(self) -> KeyEnvironment | None:
        """Ambiente indicado pelo sub-prefixo da chave (None se inválida)."""
        match = API_KEY_PATTERN.fullmatch(self.api_key)
        if match is None:
            return None
        return _KEY_ENVIRONMENTS[match.group("env")]

    def require_api_key(self) -> str:
        """Retorna a chave validada.

        Raises:
            ConfigurationError: Se a chave está ausente ou fora do padrão.
        """
        if not self.api_key:
            raise ConfigurationError(
                "ASAAS_API_KEY não configurada. "
                "Defina a variável com a chave $aact_prod_... ou $aact_hmlg_..."
            )
        if self.key_environment is None:
            raise ConfigurationError(
                "Formato de chave API inválido. "
                "A chave deve começar com $aact_prod_ (produção) ou $aact_hmlg_ (sandbox)."
            )
        return self.api_key

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Asaas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        try:
            self.require_api_key()
        except ConfigurationError as exc:
            errors.append(str(exc))

        if not self.api_url.startswith(("https://", "http://")):
            errors.append("ASAAS_API_URL deve ser uma URL http(s)")

        errors.extend(f"{name} deve ser numérico" for name in self.invalid_env)

        if self.request_timeout_seconds <= 0:
            errors.append("ASAAS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> AsaasSettings:
    """Carrega AsaasSettings a partir de variáveis de ambiente."""
    invalid: list[str] = []
    return AsaasSettings(
        api_url=os.getenv("ASAAS_API_URL", ASAAS_API_URL).strip() or ASAAS_API_URL,
        api_key=os.getenv("ASAAS_API_KEY", "").strip(),
        request_timeout_seconds=env_number("ASAAS_REQUEST_TIMEOUT_SECONDS", 30.0, invalid),
        user_agent=os.getenv("ASAAS_USER_AGENT", "editai-checkout/1.0"),
        invalid_env=tuple(invalid),
    )


@lru_cache(maxsize=1)
def get_asaas_settings() -> AsaasSettings:
    """Retorna instância cacheada de AsaasSettings.

    Lida uma vez no startup; tratada como imutável durante o processo.
    """
    return _load_from_env()
