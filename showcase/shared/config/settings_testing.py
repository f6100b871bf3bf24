# -*- coding: utf-8 -*-
"""
backend/showcase/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista: logging moderado, SQLite en memoria
y optimización de imágenes deshabilitada.

Autor: Equipo Showcase
Fecha: 2026-10-02
"""

from typing import Literal

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: Literal["development", "test", "production"] = "test"

    # --- Logging en test: menos ruido ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "pretty", "plain"] = "pretty"

    # --- Base de datos aislada ---
    db_url: str = "sqlite+aiosqlite:///:memory:"

    # --- Sin métricas globales entre tests ---
    metrics_enabled: bool = False

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]

# Fin del archivo backend/showcase/shared/config/settings_testing.py
