"""
Configuración del paquete de respuestas.
Lee las variables de entorno usando pydantic-settings.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Logging ------------------------------------------------------------
    LOG_LEVEL: str = "INFO"

    # JSON en producción; renderer de consola legible en desarrollo
    LOG_JSON: bool = True

    # --- Respuestas ----------------------------------------------------------
    # bad_request() envía 502 históricamente (no 400). Se conserva por
    # compatibilidad con los clientes existentes; 400 corrige el status.
    BAD_REQUEST_STATUS_CODE: int = 502

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL debe ser uno de: {allowed}")
        return v.upper()

    @field_validator("BAD_REQUEST_STATUS_CODE")
    @classmethod
    def validate_bad_request_status(cls, v: int) -> int:
        if v not in (400, 502):
            raise ValueError("BAD_REQUEST_STATUS_CODE debe ser 400 o 502")
        return v


@lru_cache
def get_settings() -> Settings:
    """Instancia singleton de Settings, cacheada para evitar re-lecturas del .env."""
    return Settings()
