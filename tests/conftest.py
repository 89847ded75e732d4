"""Configuração do pytest para o checkout."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


def _clear_cached_settings() -> None:
    from app.bootstrap import get_dedupe_store, get_payment_gateway
    from config.settings import (
        get_asaas_settings,
        get_base_settings,
        get_checkout_settings,
        get_plan_settings,
    )

    for getter in (
        get_asaas_settings,
        get_base_settings,
        get_checkout_settings,
        get_plan_settings,
        get_dedupe_store,
        get_payment_gateway,
    ):
        getter.cache_clear()


@pytest.fixture(autouse=True)
def isolated_settings():
    """Settings e singletons relidos do ambiente em cada teste."""
    _clear_cached_settings()
    yield
    _clear_cached_settings()
