"""Testes do composition root (validação de startup e factories)."""

from __future__ import annotations

import logging

import pytest

from app.bootstrap import get_dedupe_store, validate_runtime_settings
from app.bootstrap.dependencies import create_dedupe_store, create_subscription_use_case
from app.infra.stores import MemoryDedupeStore
from config.settings import CheckoutSettings
from tests.fakes.asaas_payloads import credit_card_form, customer_form
from tests.fakes.fake_payment_gateway import FakePaymentGateway


def test_validate_runtime_settings_raises_in_production_without_key(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.delenv("ASAAS_API_KEY", raising=False)

    with pytest.raises(RuntimeError, match="asaas: ASAAS_API_KEY não configurada"):
        validate_runtime_settings()


def test_validate_runtime_settings_only_warns_in_development(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("ASAAS_API_KEY", "aact_prod_sem_cifrao")

    with caplog.at_level(logging.WARNING, logger="app.bootstrap"):
        validate_runtime_settings()

    assert any(record.message == "settings_validation_failed" for record in caplog.records)


def test_validate_runtime_settings_ok(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")
    monkeypatch.setenv("ASAAS_API_KEY", "$aact_hmlg_abc123")

    validate_runtime_settings()


def test_dedupe_store_disabled_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHECKOUT_DEDUPE_ENABLED", raising=False)

    assert get_dedupe_store() is None


def test_dedupe_store_enabled() -> None:
    store = create_dedupe_store(CheckoutSettings(dedupe_enabled=True))

    assert isinstance(store, MemoryDedupeStore)


@pytest.mark.asyncio
async def test_subscription_use_case_honours_notification_setting() -> None:
    gateway = FakePaymentGateway()
    use_case = create_subscription_use_case(
        gateway,
        settings=CheckoutSettings(notification_reassert=False),
    )

    result = await use_case.execute("cus_1", 10, credit_card_form(), customer_form())

    assert result.success is True
    assert "update_customer" not in gateway.operations()
