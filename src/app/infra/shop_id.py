"""Provedor de shop id baseado em settings.

Usa `SHOP_ID` quando configurado. Caso contrário gera um ID
alfanumérico de 16 caracteres, mantido durante a vida do processo.
"""

from __future__ import annotations

import logging
import secrets
import string
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from config.settings import AppSystemSettings

logger = logging.getLogger(__name__)

SHOP_ID_LENGTH = 16
_ALPHABET = string.ascii_letters + string.digits


class ShopIdProviderError(Exception):
    """Shop id não pode ser determinado (configuração inválida)."""


class EnvShopIdProvider:
    """Fornece shop id a partir de AppSystemSettings.

    Args:
        settings: Settings do sistema de apps
    """

    def __init__(self, settings: AppSystemSettings) -> None:
        self._settings = settings
        self._generated: str | None = None
        self._lock = threading.Lock()

    def get_shop_id(self) -> str:
        """Retorna o shop id configurado ou gerado.

        Raises:
            ShopIdProviderError: Se APP_URL não está configurada
        """
        if self._settings.shop_id:
            return self._settings.shop_id

        if not self._settings.app_url:
            raise ShopIdProviderError(
                "APP_URL precisa estar configurada para gerar o shop id"
            )

        with self._lock:
            if self._generated is None:
                self._generated = "".join(
                    secrets.choice(_ALPHABET) for _ in range(SHOP_ID_LENGTH)
                )
                logger.warning(
                    "shop_id_generated",
                    extra={"component": "shop_id", "reason": "SHOP_ID not configured"},
                )
            return self._generated
