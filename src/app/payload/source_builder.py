"""Construção do `Source` anexado a cada payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.source import Source

if TYPE_CHECKING:
    from app.domain.app_identity import AppIdentity
    from app.protocols import InAppPurchaseReaderProtocol, ShopIdProviderProtocol


class SourceBuilder:
    """Monta `Source` a partir da identidade do app.

    Função pura das entradas e dos dois colaboradores somente leitura.

    Args:
        shop_id_provider: Provedor do shop id estável
        in_app_purchases: Visão do registro de in-app purchases
        app_url: URL base da plataforma (configurada por processo)
    """

    def __init__(
        self,
        shop_id_provider: ShopIdProviderProtocol,
        in_app_purchases: InAppPurchaseReaderProtocol,
        app_url: str,
    ) -> None:
        if not app_url:
            raise ValueError("app_url não pode ser vazio")
        self._shop_id_provider = shop_id_provider
        self._in_app_purchases = in_app_purchases
        self._app_url = app_url

    def build(self, app: AppIdentity) -> Source:
        """Retorna o `Source` do app.

        Apenas entitlements registrados para `app.id` entram, na ordem
        de registro. Falhas do provedor de shop id propagam.
        """
        shop_id = self._shop_id_provider.get_shop_id()
        purchases = tuple(
            identifier
            for identifier, owner in self._in_app_purchases.all_registered().items()
            if owner == app.id
        )
        return Source(
            url=self._app_url,
            shop_id=shop_id,
            app_version=app.version,
            in_app_purchases=purchases,
        )
