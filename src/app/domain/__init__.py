"""Domínio — modelos compartilhados entre payloads de apps.

Re-exporta modelos de identidade, contexto, entidades e structs de carrinho.
"""

from app.domain.app_identity import AppIdentity
from app.domain.cart import Cart, CartPrice, LineItem
from app.domain.context import Context, ContextSource, SalesChannelContext
from app.domain.encoding import EncodingContext
from app.domain.entities import (
    CustomerEntity,
    Entity,
    OrderEntity,
    OrderTransactionEntity,
    PaymentMethodEntity,
    ShippingMethodEntity,
)
from app.domain.source import Source

__all__ = [
    "AppIdentity",
    "Cart",
    "CartPrice",
    "Context",
    "ContextSource",
    "CustomerEntity",
    "EncodingContext",
    "Entity",
    "LineItem",
    "OrderEntity",
    "OrderTransactionEntity",
    "PaymentMethodEntity",
    "SalesChannelContext",
    "ShippingMethodEntity",
    "Source",
]
