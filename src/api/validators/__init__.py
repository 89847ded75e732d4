"""Validators: regras de campo do checkout.

Estrutura:
- checkout/: CPF/CNPJ, cartão (Luhn, validade, CCV), contato e mensagens

Validators retornam booleanos; quem decide a mensagem é o modelo de entrada.
"""

__all__: list[str] = []
