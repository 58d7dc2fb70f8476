"""Montagem das opções de requisição para chamadas a apps.

Produz headers, body JSON e o contexto de autenticação que o middleware
de assinatura HMAC consome. Não assina e não envia.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from app.payload.auth_keys import (
    APP_REQUEST_CONTEXT,
    APP_REQUEST_TYPE,
    APP_SECRET,
    ASSEMBLER_OWNED_KEYS,
    JSON_HEADERS,
    VALIDATED_RESPONSE,
)
from app.payload.errors import AppRegistrationError
from app.payload.normalizer import normalize_struct

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.app_identity import AppIdentity
    from app.domain.context import Context
    from app.payload.source_builder import SourceBuilder
    from app.protocols import SourcedPayloadProtocol

logger = logging.getLogger(__name__)


class RequestOptionsFactory:
    """Cria a especificação de requisição (pré-assinatura) para um app.

    Args:
        source_builder: Builder de `Source`
        default_options: Opções padrão (ex: timeout), sobrescritas por
            `extra_options`
    """

    def __init__(
        self,
        source_builder: SourceBuilder,
        default_options: Mapping[str, Any] | None = None,
    ) -> None:
        self._source_builder = source_builder
        self._default_options = dict(default_options or {})

    def create(
        self,
        payload: SourcedPayloadProtocol,
        app: AppIdentity,
        context: Context,
        extra_options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Monta as opções de requisição.

        Anexa o `Source` ao payload (único efeito colateral).

        Args:
            payload: Payload a enviar
            app: App destino (precisa de secret)
            context: Contexto da plataforma para o middleware
            extra_options: Opções extras de transporte (ex: timeout)

        Returns:
            Dict com headers, body, contexto de autenticação e extras

        Raises:
            AppRegistrationError: Se o app não possui secret
            ValueError: Se o payload contém NaN ou Infinity (body JSON inválido)
        """
        if not app.has_secret:
            logger.warning(
                "app_secret_missing",
                extra={"component": "app_payload", "app_id": app.id, "app_name": app.name},
            )
            raise AppRegistrationError.missing_secret(app.name)

        payload.set_source(self._source_builder.build(app))
        body = json.dumps(
            normalize_struct(payload.json_serialize()),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )

        extra = dict(extra_options or {})
        ignored = sorted(ASSEMBLER_OWNED_KEYS.intersection(extra))
        if ignored:
            logger.debug(
                "app_request_extra_options_ignored",
                extra={"component": "app_payload", "app_id": app.id, "keys": ignored},
            )

        options: dict[str, Any] = {**self._default_options, **extra}
        options.update(
            {
                APP_REQUEST_CONTEXT: context,
                APP_REQUEST_TYPE: {APP_SECRET: app.app_secret, VALIDATED_RESPONSE: True},
                "headers": dict(JSON_HEADERS),
                "body": body,
            }
        )

        logger.debug(
            "app_request_options_built",
            extra={
                "component": "app_payload",
                "app_id": app.id,
                "payload_type": type(payload).__name__,
                "body_bytes": len(body.encode("utf-8")),
            },
        )
        return options
