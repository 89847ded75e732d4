"""Payloads de cliente para a API Asaas (POST/PUT /customers)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.checkout import CustomerInput


def build_create_customer_payload(customer: CustomerInput) -> dict[str, Any]:
    """Monta o corpo de criação de cliente.

    CPF/CNPJ e telefone vão só com dígitos. Telefone de 10 dígitos ocupa
    `phone`, de 11 dígitos ocupa `mobilePhone`; nunca os dois.
    Notificações de cobrança (e-mail/SMS) do gateway ficam desativadas.
    """
    payload: dict[str, Any] = {
        "name": customer.name,
        "cpfCnpj": customer.tax_id_digits,
        "email": customer.email,
        "notificationDisabled": True,
    }
    if customer.landline:
        payload["phone"] = customer.landline
    if customer.mobile:
        payload["mobilePhone"] = customer.mobile
    return payload


def build_update_customer_payload(**fields: Any) -> dict[str, Any]:
    """Corpo de atualização parcial; sempre reafirma notificationDisabled.

    Aceita nomes já em camelCase (ex.: mobilePhone="11987654321").
    Campos None são omitidos.
    """
    payload = {key: value for key, value in fields.items() if value is not None}
    payload["notificationDisabled"] = True
    return payload
