"""Encoder JSON de entidades guiado pela definição registrada."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic.alias_generators import to_camel

from app.domain.entities import Entity
from app.payload.normalizer import normalize_struct

if TYPE_CHECKING:
    from app.domain.encoding import EncodingContext
    from app.infra.entities.definitions import EntityDefinition
    from app.protocols import EntityDefinitionRegistryProtocol


class JsonEntityEncoder:
    """Codifica entidades campo a campo conforme a definição.

    Entidades aninhadas (e listas de entidades) são resolvidas pelo
    mesmo registro de definições.

    Args:
        definition_registry: Registro para resolver entidades aninhadas
    """

    def __init__(self, definition_registry: EntityDefinitionRegistryProtocol) -> None:
        self._registry = definition_registry

    def encode(
        self,
        entity: Entity,
        definition: EntityDefinition,
        context: EncodingContext,
    ) -> dict[str, Any]:
        """Retorna o mapeamento JSON da entidade.

        Args:
            entity: Instância da entidade
            definition: Definição resolvida para a classe da entidade
            context: Contexto de codificação

        Returns:
            Dict com chaves camelCase dos campos da definição
        """
        data: dict[str, Any] = {
            to_camel(name): self._encode_value(getattr(entity, name), context)
            for name in definition.fields
        }
        if context.include_api_alias:
            data["apiAlias"] = definition.entity_name
        return data

    def _encode_value(self, value: Any, context: EncodingContext) -> Any:
        if isinstance(value, Entity):
            nested = self._registry.get_by_entity_class(value)
            return self.encode(value, nested, context)
        if isinstance(value, (list, tuple)):
            return [self._encode_value(item, context) for item in value]
        return normalize_struct(value)
