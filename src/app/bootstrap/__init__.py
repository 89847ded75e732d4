"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_checkout_use_case

    # Na inicialização do serviço
    initialize_app()

    # Obter casos de uso
    checkout = get_checkout_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_asaas_settings,
    get_base_settings,
    get_checkout_settings,
    get_plan_settings,
)

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com logging estruturado JSON e correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"asaas: {error}" for error in get_asaas_settings().validate())
    errors.extend(f"checkout: {error}" for error in get_checkout_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": base.environment,
                "plan_count": len(get_plan_settings().get_all_plans()),
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_payment_gateway():
    """Obtém cliente do gateway (singleton).

    Returns:
        PaymentGatewayProtocol configurado conforme env
    """
    from app.bootstrap.dependencies import create_payment_gateway
    return create_payment_gateway()


@lru_cache(maxsize=1)
def get_dedupe_store():
    """Obtém store do guard de reenvio (singleton); None se desativado."""
    from app.bootstrap.dependencies import create_dedupe_store
    return create_dedupe_store()


def get_create_customer_use_case():
    from app.bootstrap.dependencies import create_customer_use_case
    return create_customer_use_case(get_payment_gateway())


def get_create_subscription_use_case():
    from app.bootstrap.dependencies import create_subscription_use_case
    return create_subscription_use_case(get_payment_gateway(), dedupe=get_dedupe_store())


def get_checkout_use_case():
    from app.bootstrap.dependencies import create_checkout_use_case
    return create_checkout_use_case(
        get_create_customer_use_case(),
        get_create_subscription_use_case(),
    )
