"""Contextos da plataforma repassados junto com as requisições para apps.

`Context` é o contexto interno (origem, idioma, moeda, versão).
`SalesChannelContext` é o contexto de requisição do canal de vendas,
que encapsula um `Context`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.entities import CustomerEntity

DEFAULT_LANGUAGE_ID = "2fbb5fe2e29a4d70aa5854ce7ce3e20b"
DEFAULT_CURRENCY_ID = "b7d2554b0ce847cd82f3ac9bd1c0dfca"
DEFAULT_VERSION_ID = "0fa91ce3e96a4bc2be4bd9ce752c3425"


class ContextSource(str, Enum):
    """Origem de uma operação na plataforma."""

    SYSTEM = "system"
    ADMIN_API = "admin-api"
    SALES_CHANNEL = "sales-channel"


@dataclass(frozen=True)
class Context:
    """Contexto da plataforma para a operação corrente."""

    source: ContextSource = ContextSource.SYSTEM
    language_id: str = DEFAULT_LANGUAGE_ID
    currency_id: str = DEFAULT_CURRENCY_ID
    version_id: str = DEFAULT_VERSION_ID
    rule_ids: tuple[str, ...] = ()

    @classmethod
    def create_default(cls) -> Context:
        """Cria contexto de sistema com idioma/moeda/versão padrão."""
        return cls()


@dataclass
class SalesChannelContext:
    """Contexto de requisição do canal de vendas."""

    token: str
    sales_channel_id: str
    context: Context = field(default_factory=Context.create_default)
    customer: CustomerEntity | None = None
    currency_iso_code: str = "EUR"
