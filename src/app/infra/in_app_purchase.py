"""Registro de in-app purchases ativas por app.

Populado uma vez no bootstrap (ou no setup de testes) e lido pelo
SourceBuilder a cada chamada. `reset()` existe para testes.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class InAppPurchaseRegistry:
    """Mapa ordenado de entitlement -> ID do app dono.

    Args:
        purchases: Snapshot inicial opcional
    """

    def __init__(self, purchases: Mapping[str, str] | None = None) -> None:
        self._purchases: dict[str, str] = {}
        if purchases:
            self.register_purchases(purchases)

    def register_purchases(self, purchases: Mapping[str, str]) -> None:
        """Substitui o snapshot de purchases ativas.

        Args:
            purchases: Mapa entitlement -> app_id, na ordem de registro
        """
        self._purchases = dict(purchases)
        logger.info(
            "in_app_purchases_registered",
            extra={"component": "in_app_purchase", "count": len(self._purchases)},
        )

    def reset(self) -> None:
        """Remove todas as purchases registradas."""
        self._purchases = {}

    def all_registered(self) -> Mapping[str, str]:
        """Retorna visão somente leitura do registro completo."""
        return MappingProxyType(self._purchases)

    def all(self) -> list[str]:
        """Retorna todos os identificadores de entitlement registrados."""
        return list(self._purchases)

    def for_app(self, app_id: str) -> list[str]:
        """Retorna os entitlements do app, em ordem de registro."""
        return [
            identifier
            for identifier, owner in self._purchases.items()
            if owner == app_id
        ]

    def is_active(self, app_id: str, identifier: str) -> bool:
        """Retorna True se o entitlement está ativo para o app."""
        return self._purchases.get(identifier) == app_id
