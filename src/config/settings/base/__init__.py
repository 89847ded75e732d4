"""Agregador de settings base."""

from __future__ import annotations

from config.settings.base.core import (
    VALID_ENVIRONMENTS,
    BaseSettings,
    Environment,
    env_number,
    get_base_settings,
)

__all__ = [
    "VALID_ENVIRONMENTS",
    "BaseSettings",
    "Environment",
    "env_number",
    "get_base_settings",
]
