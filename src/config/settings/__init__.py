"""Agregador de settings do checkout.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.asaas import (
    API_KEY_PATTERN,
    ASAAS_API_URL,
    ASAAS_SANDBOX_API_URL,
    AsaasSettings,
    get_asaas_settings,
)
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.checkout import (
    CheckoutSettings,
    get_checkout_settings,
)
from config.settings.plans import (
    Plan,
    PlanSettings,
    get_plan_settings,
)

__all__ = [
    "API_KEY_PATTERN",
    "ASAAS_API_URL",
    "ASAAS_SANDBOX_API_URL",
    # Asaas
    "AsaasSettings",
    # Base
    "BaseSettings",
    # Checkout
    "CheckoutSettings",
    "Environment",
    # Planos
    "Plan",
    "PlanSettings",
    "get_asaas_settings",
    "get_base_settings",
    "get_checkout_settings",
    "get_plan_settings",
]
