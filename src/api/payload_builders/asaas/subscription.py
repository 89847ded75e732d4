"""Payload de assinatura mensal no cartão (POST /subscriptions/)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import date

    from app.domain.checkout import CreditCardInput, CustomerInput

BILLING_TYPE_CREDIT_CARD = "CREDIT_CARD"
CYCLE_MONTHLY = "MONTHLY"

# O formulário não coleta endereço de cobrança
PLACEHOLDER_POSTAL_CODE = "00000000"
PLACEHOLDER_ADDRESS_NUMBER = "0"
PLACEHOLDER_PHONE = "00000000000"


def build_credit_card(credit_card: CreditCardInput) -> dict[str, str]:
    return {
        "holderName": credit_card.holder_name,
        "number": credit_card.number_digits,
        "expiryMonth": credit_card.expiry_month,
        "expiryYear": credit_card.expiry_year,
        "ccv": credit_card.ccv,
    }


def build_credit_card_holder_info(customer: CustomerInput) -> dict[str, str]:
    return {
        "name": customer.name,
        "email": customer.email,
        "cpfCnpj": customer.tax_id_digits,
        "postalCode": PLACEHOLDER_POSTAL_CODE,
        "addressNumber": PLACEHOLDER_ADDRESS_NUMBER,
        "phone": customer.phone_digits or PLACEHOLDER_PHONE,
    }


def build_subscription_payload(
    *,
    customer_id: str,
    amount: float,
    next_due_date: date,
    credit_card: CreditCardInput,
    customer: CustomerInput,
    remote_ip: str,
) -> dict[str, Any]:
    """Monta o corpo da assinatura MONTHLY em cartão de crédito.

    Args:
        customer_id: Id do cliente já criado no gateway
        amount: Valor mensal (> 0)
        next_due_date: Primeiro vencimento; hoje = cobrança imediata
        credit_card: Cartão validado
        customer: Dados do titular
        remote_ip: IP de origem de quem enviou o formulário
    """
    return {
        "customer": customer_id,
        "billingType": BILLING_TYPE_CREDIT_CARD,
        "value": amount,
        "nextDueDate": next_due_date.isoformat(),
        "cycle": CYCLE_MONTHLY,
        "description": f"Assinatura - {customer.name}",
        "creditCard": build_credit_card(credit_card),
        "creditCardHolderInfo": build_credit_card_holder_info(customer),
        "remoteIp": remote_ip,
    }
