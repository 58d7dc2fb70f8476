"""Formatter JSON para logs estruturados do gateway.

Campos obrigatórios em ordem fixa: asctime, level, logger, message,
correlation_id, service. Valores de `extra` que não são JSON nativo
(Decimal, Enum, modelos pydantic) são convertidos por `_json_default`.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel
from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    return str(value)


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02T10:30:00",
            "level": "DEBUG",
            "logger": "app.payload.request_options",
            "message": "app_request_options_built",
            "correlation_id": "abc-123",
            "service": "app_payload_gateway",
            "app_id": "0190..."
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        json_default=_json_default,
    )
