"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e conecta as
implementações concretas (registro de in-app purchases, definições de
entidades, shop id) ao AppPayloadServiceHelper.

Uso:
    from app.bootstrap import initialize_app, create_app_payload_service

    initialize_app()
    purchases = InAppPurchaseRegistry()
    purchases.register_purchases(active_purchases)
    helper = create_app_payload_service(in_app_purchases=purchases)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.entities import (
    DEFAULT_DEFINITIONS,
    DefinitionInstanceRegistry,
    JsonEntityEncoder,
)
from app.infra.in_app_purchase import InAppPurchaseRegistry
from app.infra.shop_id import EnvShopIdProvider
from app.observability import get_correlation_id
from app.payload import AppPayloadServiceHelper
from config.logging import configure_logging
from config.settings import get_app_system_settings, get_base_settings

if TYPE_CHECKING:
    from app.protocols import InAppPurchaseReaderProtocol, ShopIdProviderProtocol
    from config.settings import AppSystemSettings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Se houver erros em ambiente estrito
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"apps: {error}" for error in get_app_system_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


def create_definition_registry() -> DefinitionInstanceRegistry:
    """Cria registro com as definições de entidades padrão."""
    return DefinitionInstanceRegistry(DEFAULT_DEFINITIONS)


def create_app_payload_service(
    settings: AppSystemSettings | None = None,
    in_app_purchases: InAppPurchaseReaderProtocol | None = None,
    shop_id_provider: ShopIdProviderProtocol | None = None,
    definition_registry: DefinitionInstanceRegistry | None = None,
) -> AppPayloadServiceHelper:
    """Monta AppPayloadServiceHelper com colaboradores concretos.

    Args:
        settings: AppSystemSettings. Se None, carrega do ambiente.
        in_app_purchases: Registro de purchases (vazio se None)
        shop_id_provider: Provedor de shop id (EnvShopIdProvider se None)
        definition_registry: Registro de definições (padrão se None)

    Returns:
        Helper pronto para build_source/encode/create_request_options

    Raises:
        ValueError: Se APP_URL não está configurada
    """
    apps = settings or get_app_system_settings()
    registry = definition_registry or create_definition_registry()

    return AppPayloadServiceHelper(
        definition_registry=registry,
        entity_encoder=JsonEntityEncoder(registry),
        shop_id_provider=shop_id_provider or EnvShopIdProvider(apps),
        in_app_purchases=in_app_purchases or InAppPurchaseRegistry(),
        app_url=apps.app_url,
        default_options=apps.default_request_options,
    )
