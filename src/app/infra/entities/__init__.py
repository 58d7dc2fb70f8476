"""Entidades — definições, registro e encoder JSON."""

from app.infra.entities.definitions import DEFAULT_DEFINITIONS, EntityDefinition
from app.infra.entities.json_entity_encoder import JsonEntityEncoder
from app.infra.entities.registry import DefinitionInstanceRegistry, DefinitionNotFoundError

__all__ = [
    "DEFAULT_DEFINITIONS",
    "DefinitionInstanceRegistry",
    "DefinitionNotFoundError",
    "EntityDefinition",
    "JsonEntityEncoder",
]
