"""API — camada de borda: payloads outbound para apps de terceiros.

Subpastas:
- payload_builders/: variantes de payload (tax provider, checkout gateway, payment)

NÃO PODE conter: montagem de requisição, assinatura, transporte HTTP.
"""
