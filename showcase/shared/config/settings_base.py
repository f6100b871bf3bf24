# -*- coding: utf-8 -*-
"""
backend/showcase/shared/config/settings_base.py

Base de configuración (Pydantic v2) para el backend Showcase.
- Esta clase NO instancia singletons ni resuelve .env; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Autor: Equipo Showcase
Fecha: 2026-10-02
"""

from typing import Literal, Optional

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]

DEFAULT_DB_URL = "sqlite+aiosqlite:///./showcase.db"


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="Showcase", validation_alias="APP_NAME")
    app_version: str = Field(default="1.0.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=8000, validation_alias="APP_PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # Base de datos
    # =========================
    db_url: str = Field(default=DEFAULT_DB_URL, validation_alias="DB_URL")
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")
    db_pool_size: int = Field(default=5, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=5, validation_alias="DB_MAX_OVERFLOW")

    # Estrategia de comparación de texto (ver shared/database/text_match.py)
    text_match_strategy: Literal["ilike", "regex"] = Field(
        default="ilike", validation_alias="TEXT_MATCH_STRATEGY"
    )

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        """
        URL async para SQLAlchemy.
        Normaliza esquemas postgres:// → postgresql+asyncpg://.
        """
        url = self.db_url
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql+asyncpg://", 1)
        elif url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    # =========================
    # Archivos subidos
    # =========================
    uploads_dir: str = Field(default="uploads", validation_alias="UPLOADS_DIR")

    # =========================
    # Optimización de imágenes (Tinify)
    # =========================
    tinify_api_key: Optional[SecretStr] = Field(default=None, validation_alias="TINIFY_API_KEY")
    tinify_api_url: str = Field(default="https://api.tinify.com", validation_alias="TINIFY_API_URL")
    image_optimise_timeout_sec: float = Field(default=30.0, validation_alias="IMAGE_OPTIMISE_TIMEOUT_SEC")

    # =========================
    # Mantenimiento programado (0 = deshabilitado)
    # =========================
    maintenance_interval_minutes: int = Field(default=0, validation_alias="MAINTENANCE_INTERVAL_MINUTES")

    # =========================
    # CORS / Frontend
    # =========================
    allowed_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # =========================
    # Observabilidad / Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="pretty", validation_alias="LOG_FORMAT")
    metrics_enabled: bool = Field(default=True, validation_alias="METRICS_ENABLED")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    @property
    def tinify_key(self) -> str:
        """Clave Tinify en claro ("" si no está configurada)."""
        if self.tinify_api_key:
            return self.tinify_api_key.get_secret_value()
        return ""

    # ===== Utilidad para normalizar CORS =====
    def get_cors_origins(self) -> list[str]:
        """Convierte allowed_origins en lista procesable para CORS middleware."""
        if not self.allowed_origins or self.allowed_origins == "*":
            return ["*"]
        return [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]

    def _security_checks(self) -> None:
        """
        Validaciones mínimas de coherencia.
        Se invoca desde config_loader tras instanciar el settings.
        """
        import logging
        logger = logging.getLogger(__name__)

        if self.is_prod:
            if self.db_url == DEFAULT_DB_URL:
                raise ValueError("DB_URL debe configurarse explícitamente en producción")
            if self.debug:
                raise ValueError("DEBUG no puede estar activo en producción")

        if not self.tinify_key:
            logger.info("TINIFY_API_KEY vacío - las imágenes se guardarán sin optimizar")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


__all__ = ["BaseAppSettings", "EnvName", "DEFAULT_DB_URL"]

# Fin del archivo backend/showcase/shared/config/settings_base.py
