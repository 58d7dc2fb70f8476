"""Definições das entidades expostas aos apps."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities import (
    CustomerEntity,
    Entity,
    OrderEntity,
    OrderTransactionEntity,
    PaymentMethodEntity,
    ShippingMethodEntity,
)


@dataclass(frozen=True)
class EntityDefinition:
    """Schema público de uma entidade.

    Attributes:
        entity_name: Nome da entidade (usado como apiAlias)
        entity_class: Classe runtime da entidade
        fields: Campos expostos, na ordem de saída
    """

    entity_name: str
    entity_class: type[Entity]
    fields: tuple[str, ...]


CUSTOMER_DEFINITION = EntityDefinition(
    entity_name="customer",
    entity_class=CustomerEntity,
    fields=("id", "customer_number", "first_name", "last_name", "email"),
)

PAYMENT_METHOD_DEFINITION = EntityDefinition(
    entity_name="payment_method",
    entity_class=PaymentMethodEntity,
    fields=("id", "name", "technical_name", "active"),
)

SHIPPING_METHOD_DEFINITION = EntityDefinition(
    entity_name="shipping_method",
    entity_class=ShippingMethodEntity,
    fields=("id", "name", "technical_name", "active"),
)

ORDER_DEFINITION = EntityDefinition(
    entity_name="order",
    entity_class=OrderEntity,
    fields=(
        "id",
        "order_number",
        "amount_total",
        "amount_net",
        "currency_id",
        "customer",
        "created_at",
    ),
)

ORDER_TRANSACTION_DEFINITION = EntityDefinition(
    entity_name="order_transaction",
    entity_class=OrderTransactionEntity,
    fields=("id", "order_id", "payment_method_id", "amount", "state", "payment_method"),
)

DEFAULT_DEFINITIONS: tuple[EntityDefinition, ...] = (
    CUSTOMER_DEFINITION,
    PAYMENT_METHOD_DEFINITION,
    SHIPPING_METHOD_DEFINITION,
    ORDER_DEFINITION,
    ORDER_TRANSACTION_DEFINITION,
)
