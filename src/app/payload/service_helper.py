"""Fachada de payloads para apps: source, encode e request options."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.payload.encoder import PayloadEncoder
from app.payload.request_options import RequestOptionsFactory
from app.payload.source_builder import SourceBuilder

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.app_identity import AppIdentity
    from app.domain.context import Context
    from app.domain.source import Source
    from app.protocols import (
        EntityDefinitionRegistryProtocol,
        EntityEncoderProtocol,
        InAppPurchaseReaderProtocol,
        ShopIdProviderProtocol,
        SourcedPayloadProtocol,
    )


class AppPayloadServiceHelper:
    """Compõe SourceBuilder, PayloadEncoder e RequestOptionsFactory.

    Args:
        definition_registry: Registro de definições de entidades
        entity_encoder: Encoder de entidades
        shop_id_provider: Provedor de shop id
        in_app_purchases: Visão do registro de in-app purchases
        app_url: URL base da plataforma
        default_options: Opções padrão de transporte
    """

    def __init__(
        self,
        definition_registry: EntityDefinitionRegistryProtocol,
        entity_encoder: EntityEncoderProtocol,
        shop_id_provider: ShopIdProviderProtocol,
        in_app_purchases: InAppPurchaseReaderProtocol,
        app_url: str,
        default_options: Mapping[str, Any] | None = None,
    ) -> None:
        self._source_builder = SourceBuilder(shop_id_provider, in_app_purchases, app_url)
        self._encoder = PayloadEncoder(definition_registry, entity_encoder)
        self._request_options = RequestOptionsFactory(self._source_builder, default_options)

    def build_source(self, app: AppIdentity) -> Source:
        return self._source_builder.build(app)

    def encode(self, payload: SourcedPayloadProtocol) -> dict[str, Any]:
        return self._encoder.encode(payload)

    def create_request_options(
        self,
        payload: SourcedPayloadProtocol,
        app: AppIdentity,
        context: Context,
        extra_options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        return self._request_options.create(payload, app, context, extra_options)
