"""Settings do sistema de apps.

URL base da plataforma, shop id fixo e timeout padrão das chamadas.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 5.0


@dataclass(frozen=True)
class AppSystemSettings:
    """Configurações das chamadas outbound para apps.

    Attributes:
        app_url: URL base da plataforma acessível pelos apps
        shop_id: Shop id fixo da instalação (gerado se vazio)
        request_timeout_seconds: Timeout padrão repassado ao transporte
    """

    app_url: str = ""
    shop_id: str = ""
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @property
    def default_request_options(self) -> dict[str, float]:
        """Opções padrão de transporte para RequestOptionsFactory."""
        return {"timeout": self.request_timeout_seconds}

    def validate(self) -> list[str]:
        """Valida configurações.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.app_url:
            errors.append("APP_URL não configurada")
        elif not self.app_url.startswith(("http://", "https://")):
            errors.append(f"APP_URL inválida: {self.app_url}")

        if not self.shop_id:
            errors.append("SHOP_ID não configurado (será gerado por processo)")

        if self.request_timeout_seconds <= 0:
            errors.append("APP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_apps_from_env() -> AppSystemSettings:
    """Carrega AppSystemSettings de variáveis de ambiente."""
    return AppSystemSettings(
        app_url=os.getenv("APP_URL", "").rstrip("/"),
        shop_id=os.getenv("SHOP_ID", ""),
        request_timeout_seconds=float(
            os.getenv("APP_REQUEST_TIMEOUT_SECONDS", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
        ),
    )


@lru_cache(maxsize=1)
def get_app_system_settings() -> AppSystemSettings:
    """Retorna instância cacheada de AppSystemSettings."""
    return _load_apps_from_env()
