"""Protocolos e contratos do core da aplicação."""

from .dedupe import AsyncDedupeProtocol
from .payment_gateway import PaymentGatewayProtocol

__all__ = [
    "AsyncDedupeProtocol",
    "PaymentGatewayProtocol",
]
