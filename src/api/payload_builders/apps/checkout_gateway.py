"""Payload para apps de checkout gateway.

O app recebe o carrinho e os métodos disponíveis e pode restringi-los.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.cart import Cart  # noqa: TC001 - campo de dataclass
from app.domain.context import SalesChannelContext  # noqa: TC001 - campo de dataclass
from app.domain.entities import PaymentMethodEntity, ShippingMethodEntity  # noqa: TC001
from app.payload.base import SourcedPayload


@dataclass
class CheckoutGatewayPayload(SourcedPayload):
    """Carrinho, métodos de pagamento/envio e contexto do canal."""

    cart: Cart
    context: SalesChannelContext
    payment_methods: list[PaymentMethodEntity] = field(default_factory=list)
    shipping_methods: list[ShippingMethodEntity] = field(default_factory=list)
