"""Connectors: adapters de borda para APIs externas.

Estrutura:
- http_base.py: cliente HTTP assíncrono genérico (httpx)
- asaas/: gateway de pagamentos Asaas
"""

__all__: list[str] = []
