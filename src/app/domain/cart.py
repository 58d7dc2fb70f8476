"""Structs de carrinho (não são entidades persistidas)."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_STRUCT_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CartPrice(BaseModel):
    """Totais calculados do carrinho."""

    model_config = _STRUCT_CONFIG

    net_price: Decimal = Decimal("0")
    total_price: Decimal = Decimal("0")
    position_price: Decimal = Decimal("0")
    tax_status: str = "gross"


class LineItem(BaseModel):
    """Item de linha do carrinho."""

    model_config = _STRUCT_CONFIG

    id: str
    type: str = "product"
    label: str = ""
    quantity: int = Field(default=1, ge=1)
    unit_price: Decimal = Decimal("0")
    referenced_id: str | None = None


class Cart(BaseModel):
    """Carrinho em avaliação (checkout, tax provider, gateways)."""

    model_config = _STRUCT_CONFIG

    token: str
    line_items: list[LineItem] = Field(default_factory=list)
    price: CartPrice = Field(default_factory=CartPrice)
    errors: list[str] = Field(default_factory=list)
