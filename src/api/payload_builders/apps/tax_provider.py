"""Payload para apps de cálculo de impostos (tax provider)."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.cart import Cart  # noqa: TC001 - campo de dataclass
from app.domain.context import SalesChannelContext  # noqa: TC001 - campo de dataclass
from app.payload.base import SourcedPayload


@dataclass
class TaxProviderPayload(SourcedPayload):
    """Carrinho + contexto do canal para cálculo de impostos."""

    cart: Cart
    context: SalesChannelContext
