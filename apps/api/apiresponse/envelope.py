"""
Envelope estándar de respuesta { code, success, message, error?, data? }.
Se construye con setters encadenables y se serializa con to_dict().
"""

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass
class ResponseEnvelope:
    code: int = HTTPStatus.OK
    success: bool = True
    message: str = "OK"
    error: Any = None   # detalle de error opaco; se omite si es None
    data: Any = None    # payload opaco; se omite si es None

    def set_code(self, code: int) -> "ResponseEnvelope":
        self.code = code
        return self

    def set_success(self, success: bool) -> "ResponseEnvelope":
        self.success = success
        return self

    def set_message(self, message: str) -> "ResponseEnvelope":
        """Sin sustitución por defecto: el mensaje se guarda tal cual."""
        self.message = message
        return self

    def set_data(self, data: Any) -> "ResponseEnvelope":
        self.data = data
        return self

    def set_error(self, error: Any) -> "ResponseEnvelope":
        self.error = error
        return self

    def to_dict(self) -> dict[str, Any]:
        """
        Cuerpo JSON en orden code, success, message, error, data.
        error y data solo aparecen si tienen valor (None = ausente).
        """
        body: dict[str, Any] = {
            "code": int(self.code),
            "success": self.success,
            "message": self.message,
        }
        if self.error is not None:
            body["error"] = self.error
        if self.data is not None:
            body["data"] = self.data
        return body


def new() -> ResponseEnvelope:
    """Envelope nuevo con valores por defecto (200, success, "OK")."""
    return ResponseEnvelope()


# HTTPStatus cambia la redacción según la versión de Python (RFC 9110 en 3.13);
# estos códigos se fijan a la frase clásica para que el mensaje no dependa del intérprete.
_PHRASE_OVERRIDES = {
    413: "Request Entity Too Large",
    414: "Request URI Too Long",
    416: "Requested Range Not Satisfiable",
    418: "I'm a teapot",
    422: "Unprocessable Entity",
}


def reason_phrase(code: int) -> str:
    """Frase estándar del status HTTP ("" si el código no es conocido)."""
    if code in _PHRASE_OVERRIDES:
        return _PHRASE_OVERRIDES[code]
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


def _message(message: str, code: int) -> str:
    if message != "":
        return message
    return reason_phrase(code)


def ok(code: int, message: str) -> ResponseEnvelope:
    """Envelope de éxito con el código y mensaje indicados."""
    return new().set_success(True).set_code(code).set_message(_message(message, code))


def fail(code: int, message: str) -> ResponseEnvelope:
    """Envelope de error con el código y mensaje indicados."""
    return new().set_success(False).set_code(code).set_message(_message(message, code))
