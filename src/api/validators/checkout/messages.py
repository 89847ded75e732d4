"""Mensagens de validação exibidas por campo no formulário."""

from __future__ import annotations

NAME_INVALID = "Nome deve ter pelo menos 3 caracteres"
TAX_ID_INVALID = "CPF/CNPJ inválido"
EMAIL_INVALID = "Email inválido"
PHONE_INVALID = "Telefone inválido"

CARD_NUMBER_INVALID = "Número do cartão inválido"
HOLDER_NAME_INVALID = "Nome no cartão deve ter pelo menos 3 caracteres"
EXPIRY_MONTH_INVALID = "Mês inválido"
EXPIRY_YEAR_INVALID = "Ano inválido"
CCV_INVALID = "CVV inválido"
CARD_EXPIRED = "Cartão expirado"

AMOUNT_INVALID = "Valor deve ser maior que zero"
CUSTOMER_ID_REQUIRED = "Cliente não informado"

GENERIC_INVALID = "Dados inválidos"
REQUIRED_FIELD = "Campo obrigatório"
