"""Entidades de domínio serializáveis via definição registrada.

Toda instância de `Entity` embutida em um payload é codificada pelo
encoder de entidades a partir da sua definição; uma entidade sem
definição registrada é erro.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Entity(BaseModel):
    """Base de entidades persistidas da plataforma."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., min_length=1)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CustomerEntity(Entity):
    """Cliente do canal de vendas."""

    customer_number: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    # Hash de senha nunca sai no fio
    password: str | None = Field(default=None, exclude=True, repr=False)


class PaymentMethodEntity(Entity):
    """Método de pagamento disponível."""

    name: str = ""
    technical_name: str = ""
    active: bool = True


class ShippingMethodEntity(Entity):
    """Método de envio disponível."""

    name: str = ""
    technical_name: str = ""
    active: bool = True


class OrderEntity(Entity):
    """Pedido finalizado."""

    order_number: str = ""
    amount_total: Decimal = Decimal("0")
    amount_net: Decimal = Decimal("0")
    currency_id: str = ""
    customer: CustomerEntity | None = None


class OrderTransactionEntity(Entity):
    """Transação de pagamento de um pedido."""

    order_id: str = ""
    payment_method_id: str = ""
    amount: Decimal = Decimal("0")
    state: str = "open"
    payment_method: PaymentMethodEntity | None = None
