"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="app_payload_gateway")
    logger = get_logger(__name__)

Campos obrigatórios em todo log: correlation_id, service, level,
logger, message, asctime. Secrets de apps nunca aparecem.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
