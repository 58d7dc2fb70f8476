"""App — core de payloads outbound para apps de terceiros.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos (Source, AppIdentity, contextos, entidades, carrinho)
- payload/: source builder, encoder e montagem de request options
- infra/: implementações concretas (in-app purchases, entidades, shop id)
- protocols/: contratos/interfaces dos colaboradores
- observability/: correlation_id para logs estruturados
"""
