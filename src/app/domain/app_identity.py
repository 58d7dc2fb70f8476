"""Identidade de um app registrado na plataforma."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AppIdentity(BaseModel):
    """App de terceiro registrado (id, nome, versão, secret opcional).

    A ausência de `app_secret` é um estado válido do registro, mas impede
    qualquer requisição autenticada para o app.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1, description="ID do app.")
    name: str = Field(..., description="Nome técnico do app.")
    version: str | None = Field(default=None, description="Versão semântica instalada.")
    app_secret: str | None = Field(default=None, repr=False, description="Secret compartilhado.")
    label: str | None = None

    @property
    def has_secret(self) -> bool:
        """Retorna True se o app possui secret não vazio."""
        return bool(self.app_secret and self.app_secret.strip())
