"""Protocolo de leitura do registro de in-app purchases."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class InAppPurchaseReaderProtocol(Protocol):
    """Visão somente leitura: entitlement -> app dono."""

    def all_registered(self) -> Mapping[str, str]: ...
