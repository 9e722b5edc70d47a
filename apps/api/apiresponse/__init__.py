"""
Envelope estándar de respuesta para handlers FastAPI.
Importar desde aquí en las rutas.
"""

from apiresponse.envelope import ResponseEnvelope, fail, new, ok, reason_phrase
from apiresponse.handlers import register_exception_handlers
from apiresponse.sinks import JSONResponseSink, ResponseSink
from apiresponse.status import (
    bad_request,
    conflict,
    created,
    forbidden,
    internal_server_error,
    no_content,
    not_found,
    send,
    service_unavailable,
    success,
    unauthorized,
    unprocessable_entity,
)

__all__ = [
    "JSONResponseSink",
    "ResponseEnvelope",
    "ResponseSink",
    "bad_request",
    "conflict",
    "created",
    "fail",
    "forbidden",
    "internal_server_error",
    "new",
    "no_content",
    "not_found",
    "ok",
    "reason_phrase",
    "register_exception_handlers",
    "send",
    "service_unavailable",
    "success",
    "unauthorized",
    "unprocessable_entity",
]
