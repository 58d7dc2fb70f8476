"""Protocolo de payloads enviados para apps."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.source import Source


@runtime_checkable
class SourcedPayloadProtocol(Protocol):
    """Payload que aceita um `Source` e se serializa em campos nomeados."""

    def set_source(self, source: Source) -> None: ...

    def json_serialize(self) -> dict[str, Any]: ...
