"""Contrato do gateway de pagamento usado pelos casos de uso.

Evita dependência direta de httpx/Asaas na orquestração; testes usam
fakes que implementam o mesmo contrato.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.billing import Customer, PaymentList, PixQrCode, Subscription
    from app.domain.result import Result


@runtime_checkable
class PaymentGatewayProtocol(Protocol):
    """Operações do gateway. Nenhuma levanta exceção: todas devolvem Result."""

    async def create_customer(self, payload: dict[str, Any]) -> Result[Customer]:
        """Cria cliente."""
        ...

    async def update_customer(
        self,
        customer_id: str,
        payload: dict[str, Any],
    ) -> Result[Customer]:
        """Atualiza campos do cliente (ex.: notificationDisabled)."""
        ...

    async def create_subscription(self, payload: dict[str, Any]) -> Result[Subscription]:
        """Cria assinatura mensal no cartão de crédito."""
        ...

    async def list_subscription_payments(self, subscription_id: str) -> Result[PaymentList]:
        """Lista cobranças geradas pela assinatura."""
        ...

    async def get_pix_qr_code(self, payment_id: str) -> Result[PixQrCode]:
        """Busca QR Code PIX de uma cobrança."""
        ...
