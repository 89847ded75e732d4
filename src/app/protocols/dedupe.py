"""Protocolo de dedupe usado contra reenvio de assinatura."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AsyncDedupeProtocol(ABC):
    """Contrato mínimo assíncrono para stores de deduplicação.

    Métodos canônicos:
    - seen(key, ttl) -> bool
      Verifica e reserva a chave atomicamente. True se já estava reservada
      (duplicado); False se foi reservada agora por `ttl` segundos.
    - release(key) -> None
      Libera uma reserva (ex.: operação recusada, nova tentativa permitida).
    """

    @abstractmethod
    async def seen(self, key: str, ttl: int = 600) -> bool:
        """Verifica e marca a chave de forma atômica.

        Args:
            key: Chave única (hash da submissão)
            ttl: TTL em segundos

        Returns:
            True se já foi vista (duplicado); False se foi marcada agora (nova).
        """

    @abstractmethod
    async def release(self, key: str) -> None:
        """Remove a chave; sem efeito se ela não existe."""
