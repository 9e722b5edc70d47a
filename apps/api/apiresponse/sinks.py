"""
Destino de escritura de las respuestas.
Los status helpers solo necesitan algo con json(status_code, content);
JSONResponseSink lo adapta a una respuesta Starlette/FastAPI.
"""

from typing import Any, Protocol

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response


class ResponseSink(Protocol):
    def json(self, status_code: int, content: Any) -> Any: ...


def body_allowed(status_code: int) -> bool:
    """1xx, 204 y 304 no llevan cuerpo en el wire."""
    return not (100 <= status_code < 200 or status_code in (204, 304))


class JSONResponseSink:
    """
    Construye la respuesta HTTP a partir del envelope.
    La última respuesta escrita queda en .response para devolverla desde la ruta.
    """

    def __init__(self, headers: dict[str, str] | None = None) -> None:
        self.headers = headers
        self.response: Response | None = None

    def json(self, status_code: int, content: Any) -> Response:
        if body_allowed(status_code):
            self.response = JSONResponse(
                status_code=status_code,
                content=jsonable_encoder(content),
                headers=self.headers,
            )
        else:
            self.response = Response(status_code=status_code, headers=self.headers)
        return self.response
