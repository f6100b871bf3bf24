# -*- coding: utf-8 -*-
"""
backend/showcase/shared/config/config_loader.py

get_settings(): punto único de acceso a la configuración.

PYTHON_ENV elige la clase de settings y además se valida como campo
(`python_env`), así que solo se aceptan los tres nombres exactos. Un valor
desconocido es un error de despliegue y falla en el arranque en lugar de
caer en silencio a desarrollo. La instancia se valida y se cachea.

Autor: Equipo Showcase
Fecha: 2026-10-02
"""

import logging
import os
from functools import lru_cache
from typing import Dict, Type

from .settings_base import BaseAppSettings
from .settings_dev import DevSettings
from .settings_prod import ProdSettings
from .settings_testing import EnvTestingSettings

logger = logging.getLogger(__name__)

DEFAULT_ENV = "development"

_SETTINGS_BY_ENV: Dict[str, Type[BaseAppSettings]] = {
    "development": DevSettings,
    "test": EnvTestingSettings,
    "production": ProdSettings,
}


def settings_class_for(env: str) -> Type[BaseAppSettings]:
    """
    Raises:
        ValueError: Si PYTHON_ENV no corresponde a ningún entorno conocido
    """
    try:
        return _SETTINGS_BY_ENV[env]
    except KeyError:
        known = ", ".join(sorted(_SETTINGS_BY_ENV))
        raise ValueError(f"PYTHON_ENV desconocido: {env!r} (válidos: {known})") from None


@lru_cache(maxsize=1)
def get_settings() -> BaseAppSettings:
    settings_cls = settings_class_for(os.getenv("PYTHON_ENV", DEFAULT_ENV))
    settings = settings_cls()
    settings._security_checks()
    logger.debug("Settings cargados: %s (env=%s)", settings_cls.__name__, settings.python_env)
    return settings


__all__ = ["get_settings", "settings_class_for", "DEFAULT_ENV"]

# Fin del archivo backend/showcase/shared/config/config_loader.py
