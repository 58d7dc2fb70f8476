"""Codificação de payloads em mapeamento transport-safe.

Entidades passam pelo encoder de entidades (definição resolvida no
registro); contextos excluídos viram `{}`; o resto é normalizado
estruturalmente.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.context import Context, SalesChannelContext
from app.domain.encoding import EncodingContext
from app.domain.entities import Entity
from app.payload.normalizer import normalize_struct

if TYPE_CHECKING:
    from app.protocols import (
        EntityDefinitionRegistryProtocol,
        EntityEncoderProtocol,
        SourcedPayloadProtocol,
    )

DEFAULT_EXCLUDED_TYPES: tuple[type, ...] = (SalesChannelContext, Context)


class PayloadEncoder:
    """Codifica campos de um `SourcedPayloadProtocol`.

    Args:
        definition_registry: Lookup classe -> definição de entidade
        entity_encoder: Encoder de entidades
        excluded_types: Tipos de contexto substituídos por `{}`
        encoding_context: Contexto passado ao encoder de entidades
    """

    def __init__(
        self,
        definition_registry: EntityDefinitionRegistryProtocol,
        entity_encoder: EntityEncoderProtocol,
        excluded_types: tuple[type, ...] = DEFAULT_EXCLUDED_TYPES,
        encoding_context: EncodingContext | None = None,
    ) -> None:
        self._registry = definition_registry
        self._entity_encoder = entity_encoder
        self._excluded_types = excluded_types
        self._encoding_context = encoding_context or EncodingContext()

    def encode(self, payload: SourcedPayloadProtocol) -> dict[str, Any]:
        """Retorna mapa campo -> valor serializado.

        As chaves são exatamente as de `payload.json_serialize()`.

        Raises:
            DefinitionNotFoundError: Se uma entidade não tem definição
        """
        return {
            name: self._encode_value(value)
            for name, value in payload.json_serialize().items()
        }

    def _encode_value(self, value: Any) -> Any:
        if isinstance(value, self._excluded_types):
            return {}
        if isinstance(value, Entity):
            definition = self._registry.get_by_entity_class(value)
            return self._entity_encoder.encode(value, definition, self._encoding_context)
        if isinstance(value, (list, tuple)):
            return [self._encode_value(item) for item in value]
        return normalize_struct(value)
