"""Testes dos endpoints de checkout (chamados direto, sem servidor)."""

from __future__ import annotations

import asyncio
import importlib
import json
from typing import Any

import pytest
from starlette.requests import Request

from api.routes.checkout._responses import TIMEOUT_MESSAGE, client_ip
from api.validators.checkout import messages
from app.domain.result import Failure
from app.use_cases.checkout import (
    CheckoutUseCase,
    CreateCustomerUseCase,
    CreateSubscriptionUseCase,
)
from config.settings import CheckoutSettings, Plan, PlanSettings
from tests.fakes.asaas_payloads import credit_card_form, customer_form
from tests.fakes.fake_payment_gateway import FakePaymentGateway

# O pacote reexporta o objeto APIRouter como `router`, ocultando o submódulo.
checkout_routes = importlib.import_module("api.routes.checkout.router")

SETTINGS = CheckoutSettings(timeout_seconds=5.0)


def _build_request(
    *,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
    client: tuple[str, int] | None = ("198.51.100.20", 51000),
    path: str = "/checkout",
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope: dict[str, Any] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": b"",
        "headers": raw_headers,
        "client": client,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _json_request(payload: Any, **kwargs: Any) -> Request:
    return _build_request(body=json.dumps(payload).encode("utf-8"), **kwargs)


def _payload(response) -> dict[str, Any]:
    return json.loads(response.body.decode("utf-8"))


@pytest.mark.asyncio
async def test_create_customer_returns_envelope_and_correlation_id() -> None:
    gateway = FakePaymentGateway()
    request = _json_request(customer_form(), headers={"X-Correlation-Id": "corr-42"})

    response = await checkout_routes.create_customer(request, CreateCustomerUseCase(gateway), SETTINGS)

    assert response.status_code == 200
    assert response.headers["x-correlation-id"] == "corr-42"
    payload = _payload(response)
    assert payload["success"] is True
    assert payload["data"]["id"] == "cus_000005219613"


@pytest.mark.asyncio
async def test_create_customer_validation_error_is_422() -> None:
    gateway = FakePaymentGateway()
    request = _json_request(customer_form(email="sem-arroba"))

    response = await checkout_routes.create_customer(request, CreateCustomerUseCase(gateway), SETTINGS)

    assert response.status_code == 422
    payload = _payload(response)
    assert payload["success"] is False
    assert payload["error"] == "Email inválido"
    assert list(payload["field_errors"].values()) == ["Email inválido"]
    assert gateway.calls == []


@pytest.mark.asyncio
async def test_malformed_body_is_400() -> None:
    request = _build_request(body=b"{not json")

    response = await checkout_routes.create_customer(
        request, CreateCustomerUseCase(FakePaymentGateway()), SETTINGS
    )

    assert response.status_code == 400
    assert _payload(response) == {"success": False, "error": "Requisição inválida"}


@pytest.mark.asyncio
async def test_gateway_rejection_is_400() -> None:
    gateway = FakePaymentGateway(customer=Failure("O CPF/CNPJ informado é inválido."))

    response = await checkout_routes.create_customer(
        _json_request(customer_form()), CreateCustomerUseCase(gateway), SETTINGS
    )

    assert response.status_code == 400
    assert _payload(response)["error"] == "O CPF/CNPJ informado é inválido."


@pytest.mark.asyncio
async def test_create_subscription_uses_forwarded_ip() -> None:
    gateway = FakePaymentGateway()
    request = _json_request(
        {
            "customerId": "cus_000005219613",
            "amount": 100,
            "creditCard": credit_card_form(),
            "customer": customer_form(),
        },
        headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"},
    )

    response = await checkout_routes.create_subscription(
        request, CreateSubscriptionUseCase(gateway), SETTINGS
    )

    assert response.status_code == 200
    payload = _payload(response)
    assert payload["data"]["subscription"]["value"] == 100.0
    assert gateway.payload_of("create_subscription")["remoteIp"] == "203.0.113.7"


@pytest.mark.asyncio
async def test_create_subscription_without_card_is_422() -> None:
    request = _json_request({"customerId": "cus_1", "amount": 100, "customer": customer_form()})

    response = await checkout_routes.create_subscription(
        request, CreateSubscriptionUseCase(FakePaymentGateway()), SETTINGS
    )

    assert response.status_code == 422
    assert "creditCard" in _payload(response)["field_errors"]


@pytest.mark.asyncio
async def test_full_checkout() -> None:
    gateway = FakePaymentGateway()
    use_case = CheckoutUseCase(CreateCustomerUseCase(gateway), CreateSubscriptionUseCase(gateway))
    request = _json_request(
        {"customer": customer_form(), "creditCard": credit_card_form(), "amount": "49.90"}
    )

    response = await checkout_routes.checkout(request, use_case, SETTINGS)

    assert response.status_code == 200
    data = _payload(response)["data"]
    assert data["customer"]["id"] == "cus_000005219613"
    assert data["subscription"]["value"] == 49.9
    assert gateway.payload_of("create_subscription")["remoteIp"] == "198.51.100.20"


@pytest.mark.asyncio
async def test_checkout_with_infinite_amount_is_422_without_gateway_calls() -> None:
    gateway = FakePaymentGateway()
    use_case = CheckoutUseCase(CreateCustomerUseCase(gateway), CreateSubscriptionUseCase(gateway))
    # json.dumps serializa inf como o literal Infinity
    request = _json_request(
        {"customer": customer_form(), "creditCard": credit_card_form(), "amount": float("inf")}
    )

    response = await checkout_routes.checkout(request, use_case, SETTINGS)

    assert response.status_code == 422
    assert _payload(response)["field_errors"] == {"amount": messages.AMOUNT_INVALID}
    assert gateway.calls == []


@pytest.mark.asyncio
async def test_timeout_becomes_failure_envelope() -> None:
    class _SlowUseCase:
        async def execute(self, customer: Any) -> Failure:
            await asyncio.sleep(1)
            return Failure("não deveria chegar aqui")

    response = await checkout_routes.create_customer(
        _json_request(customer_form()),
        _SlowUseCase(),  # type: ignore[arg-type]
        CheckoutSettings(timeout_seconds=0.01),
    )

    assert response.status_code == 400
    assert _payload(response) == {"success": False, "error": TIMEOUT_MESSAGE}


@pytest.mark.asyncio
async def test_get_plan() -> None:
    plans = PlanSettings(plans=(Plan(uuid="ABC-123", value=49.9),))

    found = await checkout_routes.get_plan(" abc-123 ", plans)
    missing = await checkout_routes.get_plan("xyz", plans)

    assert found.status_code == 200
    assert _payload(found) == {"success": True, "data": {"uuid": "ABC-123", "value": 49.9}}
    assert missing.status_code == 404
    assert _payload(missing) == {"success": False, "error": "Plano não encontrado"}


def test_client_ip_fallbacks() -> None:
    assert client_ip(_build_request(headers={"X-Forwarded-For": " 203.0.113.9 "})) == "203.0.113.9"
    assert client_ip(_build_request()) == "198.51.100.20"
    assert client_ip(_build_request(client=None)) == "127.0.0.1"
