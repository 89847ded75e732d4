"""Store de dedupe em memória para o guard de reenvio de assinatura.

ATENÇÃO: estado local ao processo. Com múltiplas réplicas cada uma tem
sua própria janela; sem persistência entre reinícios.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from app.protocols.dedupe import AsyncDedupeProtocol


class MemoryDedupeStore(AsyncDedupeProtocol):
    """Chaves com expiração (TTL em segundos).

    `seen` não cede o event loop entre a verificação e a marcação, então
    duas tasks concorrentes com a mesma chave nunca passam ambas.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._store: dict[str, float] = {}  # key -> expires_at
        self._clock = clock

    def _cleanup_expired(self) -> None:
        now = self._clock()
        expired = [k for k, v in self._store.items() if v <= now]
        for k in expired:
            del self._store[k]

    async def seen(self, key: str, ttl: int = 600) -> bool:
        """Verifica e reserva a chave atomicamente."""
        self._cleanup_expired()
        if key in self._store:
            return True
        self._store[key] = self._clock() + ttl
        return False

    async def release(self, key: str) -> None:
        self._store.pop(key, None)

    def __len__(self) -> int:
        self._cleanup_expired()
        return len(self._store)
