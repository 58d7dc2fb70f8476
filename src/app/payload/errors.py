"""Erros do core de payloads para apps."""

from __future__ import annotations


class AppError(Exception):
    """Erro base de integração com apps."""

    error_code = "FRAMEWORK__APP_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AppRegistrationError(AppError):
    """Registro do app inválido para chamadas autenticadas.

    Indica problema de configuração/instalação; nunca é retentável.
    """

    error_code = "FRAMEWORK__APP_REGISTRATION_FAILED"

    def __init__(self, app_name: str, reason: str) -> None:
        super().__init__(f'App registration for "{app_name}" failed: {reason}')
        self.app_name = app_name
        self.reason = reason

    @classmethod
    def missing_secret(cls, app_name: str) -> AppRegistrationError:
        """Erro para app sem secret compartilhado."""
        return cls(app_name, "App secret is missing")
