"""Registro de definições de entidades (classe runtime -> definição)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.entities import Entity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.infra.entities.definitions import EntityDefinition

logger = logging.getLogger(__name__)


class DefinitionNotFoundError(Exception):
    """Nenhuma definição registrada para a entidade."""

    def __init__(self, entity_class: str) -> None:
        super().__init__(f'Definition for entity "{entity_class}" not found')
        self.entity_class = entity_class


class DefinitionInstanceRegistry:
    """Lookup table de definições por classe e por nome de entidade.

    Novas entidades se registram aqui; o encoder não precisa mudar.
    """

    def __init__(self, definitions: Iterable[EntityDefinition] = ()) -> None:
        self._by_class: dict[type[Entity], EntityDefinition] = {}
        self._by_name: dict[str, EntityDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: EntityDefinition) -> None:
        """Registra (ou substitui) uma definição."""
        self._by_class[definition.entity_class] = definition
        self._by_name[definition.entity_name] = definition
        logger.debug(
            "entity_definition_registered",
            extra={"component": "entity_registry", "entity_name": definition.entity_name},
        )

    def has(self, entity_name: str) -> bool:
        """Retorna True se há definição para o nome informado."""
        return entity_name in self._by_name

    def get_by_entity_name(self, entity_name: str) -> EntityDefinition:
        """Retorna a definição pelo nome da entidade.

        Raises:
            DefinitionNotFoundError: Se o nome não está registrado
        """
        try:
            return self._by_name[entity_name]
        except KeyError:
            raise DefinitionNotFoundError(entity_name) from None

    def get_by_entity_class(self, entity: Entity | type[Entity]) -> EntityDefinition:
        """Retorna a definição pela classe runtime (instância ou classe).

        Raises:
            DefinitionNotFoundError: Se a classe exata não está registrada
        """
        entity_class = entity if isinstance(entity, type) else type(entity)
        definition = self._by_class.get(entity_class)
        if definition is None:
            raise DefinitionNotFoundError(entity_class.__name__)
        return definition
