"""Source — descritor da instalação da plataforma anexado aos payloads.

Diz ao app quem está chamando (URL, shop id) e quais in-app purchases
daquele app estão ativas. Construído a cada chamada e nunca alterado.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Source(BaseModel):
    """Metadados da instalação chamadora (imutável)."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    url: str = Field(..., min_length=1, description="URL base da plataforma acessível pelo app.")
    shop_id: str = Field(..., description="Identificador estável da instalação.")
    app_version: str | None = Field(default=None, description="Versão instalada do app.")
    in_app_purchases: tuple[str, ...] = Field(
        default=(),
        description="Entitlements registrados para o app, em ordem de registro.",
    )
