"""Payloads enviados para apps de terceiros.

Cada variante implementa `SourcedPayloadProtocol` via `SourcedPayload`.
"""

from api.payload_builders.apps.checkout_gateway import CheckoutGatewayPayload
from api.payload_builders.apps.payment import PaymentPayload
from api.payload_builders.apps.tax_provider import TaxProviderPayload

__all__ = [
    "CheckoutGatewayPayload",
    "PaymentPayload",
    "TaxProviderPayload",
]
