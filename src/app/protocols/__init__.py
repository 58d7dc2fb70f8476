"""Protocolos e contratos do core de payloads para apps."""

from .entity_definitions import EntityDefinitionRegistryProtocol, EntityEncoderProtocol
from .in_app_purchase import InAppPurchaseReaderProtocol
from .shop_id import ShopIdProviderProtocol
from .sourced_payload import SourcedPayloadProtocol

__all__ = [
    "EntityDefinitionRegistryProtocol",
    "EntityEncoderProtocol",
    "InAppPurchaseReaderProtocol",
    "ShopIdProviderProtocol",
    "SourcedPayloadProtocol",
]
