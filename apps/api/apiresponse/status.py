"""
Status helpers: un helper por código HTTP.
Cada uno construye el envelope con ok()/fail() y lo escribe en el sink
con el mismo código en la línea de status y en el cuerpo.
"""

from http import HTTPStatus
from typing import Any

from apiresponse.config import get_settings
from apiresponse.envelope import ResponseEnvelope, fail, ok
from apiresponse.sinks import ResponseSink


def send(sink: ResponseSink, envelope: ResponseEnvelope) -> Any:
    """Única escritura hacia el sink; el status enviado es siempre envelope.code."""
    return sink.json(int(envelope.code), envelope.to_dict())


# ---------------------------------------------------------------------------
# Éxito
# ---------------------------------------------------------------------------


def success(sink: ResponseSink, message: str = "", data: Any = None) -> Any:
    return send(sink, ok(HTTPStatus.OK, message).set_data(data))


def created(sink: ResponseSink, message: str = "", data: Any = None) -> Any:
    return send(sink, ok(HTTPStatus.CREATED, message).set_data(data))


def no_content(sink: ResponseSink, message: str = "") -> Any:
    return send(sink, ok(HTTPStatus.NO_CONTENT, message))


# ---------------------------------------------------------------------------
# Errores
# ---------------------------------------------------------------------------


def bad_request(sink: ResponseSink, message: str = "", error: Any = None, data: Any = None) -> Any:
    """
    Ojo: por defecto envía 502 Bad Gateway, no 400 (comportamiento heredado).
    BAD_REQUEST_STATUS_CODE=400 lo corrige.
    """
    code = get_settings().BAD_REQUEST_STATUS_CODE
    return send(sink, fail(code, message).set_error(error).set_data(data))


def unauthorized(sink: ResponseSink, message: str = "", data: Any = None) -> Any:
    return send(sink, fail(HTTPStatus.UNAUTHORIZED, message).set_data(data))


def forbidden(sink: ResponseSink, message: str = "", data: Any = None) -> Any:
    return send(sink, fail(HTTPStatus.FORBIDDEN, message).set_data(data))


def not_found(sink: ResponseSink, message: str = "", data: Any = None) -> Any:
    return send(sink, fail(HTTPStatus.NOT_FOUND, message).set_data(data))


def conflict(sink: ResponseSink, message: str = "", data: Any = None) -> Any:
    return send(sink, fail(HTTPStatus.CONFLICT, message).set_data(data))


def unprocessable_entity(
    sink: ResponseSink, message: str = "", error: Any = None, data: Any = None
) -> Any:
    return send(sink, fail(HTTPStatus.UNPROCESSABLE_ENTITY, message).set_error(error).set_data(data))


def service_unavailable(
    sink: ResponseSink, message: str = "", error: Any = None, data: Any = None
) -> Any:
    return send(sink, fail(HTTPStatus.SERVICE_UNAVAILABLE, message).set_error(error).set_data(data))


def internal_server_error(
    sink: ResponseSink, message: str = "", error: Any = None, data: Any = None
) -> Any:
    return send(sink, fail(HTTPStatus.INTERNAL_SERVER_ERROR, message).set_error(error).set_data(data))
