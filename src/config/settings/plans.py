"""Catálogo de planos vindo do ambiente.

Até dois planos (PLAN_1_*, PLAN_2_*) mapeando o UUID recebido na URL
para o valor mensal cobrado.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from functools import lru_cache

MAX_PLANS: int = 2


@dataclass(frozen=True)
class Plan:
    """Plano disponível para assinatura."""

    uuid: str
    value: float


@dataclass(frozen=True)
class PlanSettings:
    """Planos configurados, já filtrados (valor numérico e > 0)."""

    plans: tuple[Plan, ...] = ()

    def get_plan_by_uuid(self, uuid: str | None) -> Plan | None:
        """Busca plano por UUID (trim + case-insensitive).

        Returns:
            Plan encontrado ou None.
        """
        if not uuid or not isinstance(uuid, str):
            return None

        normalized = uuid.strip().lower()
        for plan in self.plans:
            if plan.uuid.strip().lower() == normalized:
                return plan
        return None

    def get_all_plans(self) -> list[Plan]:
        """Retorna todos os planos válidos."""
        return list(self.plans)


def _parse_plan(uuid: str | None, raw_value: str | None) -> Plan | None:
    if not uuid or not raw_value:
        return None
    try:
        value = float(raw_value)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return Plan(uuid=uuid, value=value)


def _load_from_env() -> PlanSettings:
    """Carrega planos PLAN_N_UUID/PLAN_N_VALUE do ambiente."""
    plans: list[Plan] = []
    for index in range(1, MAX_PLANS + 1):
        plan = _parse_plan(
            os.getenv(f"PLAN_{index}_UUID"),
            os.getenv(f"PLAN_{index}_VALUE"),
        )
        if plan is not None:
            plans.append(plan)
    return PlanSettings(plans=tuple(plans))


@lru_cache(maxsize=1)
def get_plan_settings() -> PlanSettings:
    """Retorna instância cacheada de PlanSettings."""
    return _load_from_env()
