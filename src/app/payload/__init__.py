"""Payloads para apps — source, codificação e opções de requisição.

Uso:
    from app.payload import AppPayloadServiceHelper

    options = helper.create_request_options(payload, app, context, {"timeout": 5})
"""

from app.payload.auth_keys import (
    APP_REQUEST_CONTEXT,
    APP_REQUEST_TYPE,
    APP_SECRET,
    VALIDATED_RESPONSE,
)
from app.payload.base import SourcedPayload
from app.payload.encoder import PayloadEncoder
from app.payload.errors import AppError, AppRegistrationError
from app.payload.normalizer import normalize_struct
from app.payload.request_options import RequestOptionsFactory
from app.payload.service_helper import AppPayloadServiceHelper
from app.payload.source_builder import SourceBuilder

__all__ = [
    "APP_REQUEST_CONTEXT",
    "APP_REQUEST_TYPE",
    "APP_SECRET",
    "VALIDATED_RESPONSE",
    "AppError",
    "AppPayloadServiceHelper",
    "AppRegistrationError",
    "PayloadEncoder",
    "RequestOptionsFactory",
    "SourceBuilder",
    "SourcedPayload",
    "normalize_struct",
]
