"""Stores: implementações concretas de estado efêmero.

Módulos disponíveis:
    - memory_dedupe_store: janela de bloqueio de reenvio do checkout
"""

from __future__ import annotations

from app.infra.stores.memory_dedupe_store import MemoryDedupeStore

__all__ = ["MemoryDedupeStore"]
