"""Protocolos de resolução e codificação de entidades.

Evita dependência direta de app.infra.entities.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.entities import Entity
    from app.domain.encoding import EncodingContext
    from app.infra.entities.definitions import EntityDefinition


class EntityDefinitionRegistryProtocol(Protocol):
    """Resolve a definição de uma entidade pela sua classe."""

    def get_by_entity_class(self, entity: Entity | type[Entity]) -> EntityDefinition: ...


class EntityEncoderProtocol(Protocol):
    """Codifica uma entidade conforme a sua definição."""

    def encode(
        self,
        entity: Entity,
        definition: EntityDefinition,
        context: EncodingContext,
    ) -> dict[str, Any]: ...
