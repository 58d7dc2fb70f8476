"""Agregador de settings do app payload gateway.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.apps import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    AppSystemSettings,
    get_app_system_settings,
)
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "AppSystemSettings",
    "BaseSettings",
    "Environment",
    "get_app_system_settings",
    "get_base_settings",
]
