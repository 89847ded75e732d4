"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CheckoutError,
    ConfigurationError,
    GatewayResponseError,
)

__all__ = [
    "CheckoutError",
    "ConfigurationError",
    "GatewayResponseError",
]
