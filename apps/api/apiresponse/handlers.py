"""
Exception handlers globales — mantienen el formato del envelope
también para los errores que escapan de las rutas.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from apiresponse import status
from apiresponse.envelope import fail
from apiresponse.sinks import JSONResponseSink

logger = structlog.get_logger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    sink = JSONResponseSink(headers=getattr(exc, "headers", None))
    envelope = fail(exc.status_code, exc.detail if isinstance(exc.detail, str) else "")
    if not isinstance(exc.detail, str):
        envelope.set_error(exc.detail)
    return status.send(sink, envelope)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    logger.info("request_validation_failed", path=str(request.url.path), errors=len(exc.errors()))
    return status.unprocessable_entity(
        JSONResponseSink(),
        "Error de validación",
        error=exc.errors(),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> Response:
    logger.error("unhandled_exception", path=str(request.url), error=str(exc), exc_info=exc)
    return status.internal_server_error(
        JSONResponseSink(),
        "Error interno del servidor",
        error=type(exc).__name__,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra los handlers sobre la app FastAPI."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
