"""Payload builders: corpos de requisição para APIs externas.

Estrutura:
- asaas/: clientes e assinaturas no gateway Asaas
"""

__all__: list[str] = []
