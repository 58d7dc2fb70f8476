"""Protocolo do provedor de identidade da loja."""

from __future__ import annotations

from typing import Protocol


class ShopIdProviderProtocol(Protocol):
    """Fornece o identificador estável da instalação."""

    def get_shop_id(self) -> str: ...
