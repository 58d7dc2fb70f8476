"""Contexto de codificação de entidades."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EncodingContext:
    """Opções repassadas ao encoder de entidades.

    Attributes:
        include_api_alias: Adiciona `apiAlias` em cada entidade codificada
    """

    include_api_alias: bool = True
