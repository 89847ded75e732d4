"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (checkout, health)
- Ler body/headers (correlation_id, IP de origem)
- Delegar para use_cases e converter Result em resposta

Estrutura:
- routes/checkout/: formulário de checkout e planos
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
