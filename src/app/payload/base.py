"""Base para payloads dataclass enviados a apps."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from app.domain.source import Source


class SourcedPayload:
    """Implementa `SourcedPayloadProtocol` para subclasses `@dataclass`.

    `json_serialize()` retorna `source` seguido dos campos declarados
    da dataclass, com nomes no formato do fio (camelCase).
    """

    source: Source | None = None

    def set_source(self, source: Source) -> None:
        self.source = source

    def json_serialize(self) -> dict[str, Any]:
        data: dict[str, Any] = {"source": self.source}
        for payload_field in dataclasses.fields(self):  # type: ignore[arg-type]
            data[to_camel(payload_field.name)] = getattr(self, payload_field.name)
        return data
