"""Exceções compartilhadas do checkout."""

from __future__ import annotations


class CheckoutError(RuntimeError):
    """Base para falhas do fluxo de checkout."""


class ConfigurationError(CheckoutError):
    """Configuração ausente ou malformada (ex.: ASAAS_API_KEY)."""


class GatewayResponseError(CheckoutError):
    """Resposta do gateway ilegível (JSON inválido ou fora do contrato)."""
