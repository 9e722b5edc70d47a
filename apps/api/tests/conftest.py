"""
Fixtures compartidas.
Los settings se leen con lru_cache: se limpia la caché antes y después de cada test
para que monkeypatch.setenv tenga efecto.
"""

from typing import Any

import pytest

from apiresponse.config import get_settings


class RecordingSink:
    """Sink falso que guarda cada escritura (status, cuerpo)."""

    def __init__(self) -> None:
        self.writes: list[tuple[int, Any]] = []

    def json(self, status_code: int, content: Any) -> str:
        self.writes.append((status_code, content))
        return "written"

    @property
    def status_code(self) -> int:
        return self.writes[-1][0]

    @property
    def body(self) -> Any:
        return self.writes[-1][1]


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
