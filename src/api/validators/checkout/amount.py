"""Validação do valor mensal da assinatura."""

from __future__ import annotations

import math
from typing import Any


def parse_amount(value: Any) -> float | None:
    """Valor mensal como float; None se não numérico, infinito, NaN ou <= 0.

    bool é rejeitado mesmo sendo subclasse de int.
    """
    if isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount
