"""Payload builders — payloads outbound para APIs externas.

Estrutura:
- apps/: payloads para apps de terceiros (tax provider, checkout gateway, payment)
"""

__all__: list[str] = []
