"""Chaves do contexto de autenticação consumidas pelo middleware de assinatura.

O middleware lê `APP_REQUEST_TYPE[APP_SECRET]`, assina o body com
HMAC-SHA256 e anexa o header de assinatura antes do envio.
"""

APP_REQUEST_CONTEXT = "app_request_context"
APP_REQUEST_TYPE = "app_request_type"
APP_SECRET = "app_secret"
VALIDATED_RESPONSE = "validated_response"

JSON_HEADERS = {"Content-Type": "application/json"}

# Chaves sempre definidas pelo assembler (extra_options não sobrescreve)
ASSEMBLER_OWNED_KEYS = frozenset({"headers", "body", APP_REQUEST_CONTEXT, APP_REQUEST_TYPE})
