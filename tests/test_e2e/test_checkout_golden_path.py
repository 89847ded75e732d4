"""Teste E2E do checkout: casos de uso + cliente Asaas real sobre gateway simulado."""

from __future__ import annotations

import json
from datetime import date
from typing import Any

import httpx
import pytest

from app.bootstrap.dependencies import (
    create_checkout_use_case,
    create_customer_use_case,
    create_payment_gateway,
    create_subscription_use_case,
)
from app.domain.result import Failure, Success
from config.settings import AsaasSettings, CheckoutSettings
from tests.fakes.asaas_payloads import (
    TEST_API_KEY,
    credit_card_form,
    customer_form,
    customer_json,
    payment_json,
    payment_list_json,
    subscription_json,
    upcoming_dates,
)


class _SimulatedAsaas:
    """Gateway em memória que responde às rotas usadas pelo checkout."""

    def __init__(
        self,
        *,
        customer_status: int = 200,
        customer_body: dict[str, Any] | None = None,
        payments: list[dict[str, Any]] | None = None,
    ) -> None:
        self.customer_status = customer_status
        self.customer_body = customer_body or customer_json()
        self.payments = payments or []
        self.requests: list[tuple[str, str, Any]] = []

    def routes(self) -> list[str]:
        return [f"{method} {path}" for method, path, _ in self.requests]

    def body_of(self, route: str) -> Any:
        return next(body for method, path, body in self.requests if f"{method} {path}" == route)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        path = request.url.path.removeprefix("/v3")
        self.requests.append((request.method, path, body))

        if request.headers.get("access_token") != TEST_API_KEY:
            return httpx.Response(401, json={"errors": [{"code": "invalid_access_token", "description": "Chave inválida"}]})

        if request.method == "POST" and path == "/customers":
            return httpx.Response(self.customer_status, json=self.customer_body)
        if request.method == "PUT" and path.startswith("/customers/"):
            return httpx.Response(200, json=customer_json(notificationDisabled=True))
        if request.method == "POST" and path == "/subscriptions/":
            return httpx.Response(
                200,
                json=subscription_json(
                    customer=body["customer"],
                    value=body["value"],
                    nextDueDate=body["nextDueDate"],
                ),
            )
        if request.method == "GET" and path.endswith("/payments"):
            return httpx.Response(200, json=payment_list_json(*self.payments))
        return httpx.Response(404, json={"errors": [{"code": "not_found", "description": "Recurso não encontrado"}]})


def _checkout(simulated: _SimulatedAsaas, today_provider=date.today):
    gateway = create_payment_gateway(
        AsaasSettings(api_url="https://api-sandbox.asaas.com/v3", api_key=TEST_API_KEY),
        transport=httpx.MockTransport(simulated),
    )
    create_customer = create_customer_use_case(gateway)
    create_subscription = create_subscription_use_case(
        gateway,
        settings=CheckoutSettings(),
        today_provider=today_provider,
    )
    return create_customer, create_subscription, create_checkout_use_case(create_customer, create_subscription)


@pytest.mark.asyncio
async def test_valid_customer_and_card_billed_today() -> None:
    simulated = _SimulatedAsaas(payments=[payment_json("pay_1", date.today())])
    create_customer, create_subscription, _ = _checkout(simulated)

    customer = await create_customer.execute(customer_form())
    assert isinstance(customer, Success)

    result = await create_subscription.execute(
        customer.data.id, 100.00, credit_card_form(), customer_form(), "203.0.113.7"
    )

    assert isinstance(result, Success)
    envelope = result.to_envelope()
    assert envelope["success"] is True
    assert envelope["data"]["subscription"]["value"] == 100.0
    assert envelope["data"]["subscription"]["nextDueDate"] == date.today().isoformat()
    assert envelope["data"]["firstPayment"]["id"] == "pay_1"
    assert simulated.routes() == [
        "POST /customers",
        "POST /subscriptions/",
        f"PUT /customers/{customer.data.id}",
        "GET /subscriptions/sub_VXJBYgP2u0eO/payments",
    ]
    assert simulated.body_of("POST /customers")["notificationDisabled"] is True
    assert simulated.body_of(f"PUT /customers/{customer.data.id}") == {"notificationDisabled": True}


@pytest.mark.asyncio
async def test_customer_rejected_stops_before_subscription() -> None:
    simulated = _SimulatedAsaas(
        customer_status=400,
        customer_body={"errors": [{"code": "invalid_cpfCnpj", "description": "O CPF/CNPJ informado é inválido."}]},
    )
    _, _, checkout = _checkout(simulated)

    result = await checkout.execute(
        {"customer": customer_form(), "creditCard": credit_card_form(), "amount": 100.0}
    )

    assert result == Failure("O CPF/CNPJ informado é inválido.")
    assert simulated.routes() == ["POST /customers"]


@pytest.mark.asyncio
async def test_empty_payment_list_still_succeeds() -> None:
    simulated = _SimulatedAsaas(payments=[])
    _, _, checkout = _checkout(simulated)

    result = await checkout.execute(
        {"customer": customer_form(), "creditCard": credit_card_form(), "amount": 100.0}
    )

    assert isinstance(result, Success)
    assert result.data.first_payment is None
    assert "firstPayment" not in result.to_envelope()["data"]


@pytest.mark.asyncio
async def test_future_due_date_reports_earliest_payment() -> None:
    first_due, second_due = upcoming_dates()
    simulated = _SimulatedAsaas(
        payments=[
            payment_json("pay_second", second_due, status="PENDING"),
            payment_json("pay_first", first_due, status="PENDING"),
        ]
    )
    _, _, checkout = _checkout(simulated, today_provider=lambda: first_due)

    result = await checkout.execute(
        {"customer": customer_form(), "creditCard": credit_card_form(), "amount": 100.0}
    )

    assert isinstance(result, Success)
    assert result.data.subscription.next_due_date == first_due
    assert result.data.first_payment is not None
    assert result.data.first_payment.id == "pay_first"
    assert simulated.body_of("POST /subscriptions/")["nextDueDate"] == first_due.isoformat()
