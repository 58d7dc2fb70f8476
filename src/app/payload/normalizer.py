"""Normalização estrutural (campo a campo) para valores transport-safe.

Usada para `Source`, structs e contextos que não são entidades, e para
o corpo JSON das requisições. Apenas estado público é preservado.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

_SCALARS = (str, int, float, bool)


def normalize_struct(value: Any) -> Any:
    """Converte um valor arbitrário em estrutura compatível com JSON.

    Args:
        value: Valor a normalizar (modelos, dataclasses, mapas, listas...)

    Returns:
        Estrutura composta apenas de dict/list/str/int/float/bool/None

    Raises:
        TypeError: Se o valor não expõe estado público serializável
    """
    if isinstance(value, Enum):
        return normalize_struct(value.value)
    if value is None or isinstance(value, _SCALARS):
        return value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            to_camel(f.name): normalize_struct(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if not f.name.startswith("_")
        }
    if isinstance(value, Mapping):
        return {str(key): normalize_struct(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [normalize_struct(item) for item in value]

    serialize = getattr(value, "json_serialize", None)
    if callable(serialize):
        return normalize_struct(serialize())
    if hasattr(value, "__dict__"):
        return {
            key: normalize_struct(item)
            for key, item in vars(value).items()
            if not key.startswith("_")
        }

    raise TypeError(f"Tipo não serializável: {type(value).__name__}")
