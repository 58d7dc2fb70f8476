"""Payload para apps de pagamento."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.domain.entities import OrderEntity, OrderTransactionEntity  # noqa: TC001
from app.payload.base import SourcedPayload


@dataclass
class PaymentPayload(SourcedPayload):
    """Transação, pedido e dados da requisição de pagamento."""

    order_transaction: OrderTransactionEntity
    order: OrderEntity
    request_data: dict[str, Any] = field(default_factory=dict)
    return_url: str | None = None
    recurring: bool = False
