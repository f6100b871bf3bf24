# -*- coding: utf-8 -*-
"""
backend/showcase/shared/config/logging_config.py

Configuración centralizada de logging para Showcase.
Soporta formato plain (desarrollo), pretty (con hora) y json (producción).

Autor: Equipo Showcase
Fecha: 2026-10-02
"""

import logging.config
from typing import Literal


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Formato de salida (plain, pretty, json)

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json")
    """
    formatter_name = {"json": "json", "pretty": "pretty"}.get(fmt, "default")

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": formatter_name,
            "stream": "ext://sys.stdout",
        }
    }

    formatters = {
        "default": {
            "format": "%(levelname)s [%(name)s]: %(message)s"
        },
        "pretty": {
            "format": "%(asctime)s %(levelname)-8s [%(name)s]: %(message)s",
            "datefmt": "%H:%M:%S",
        },
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        },
    }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": handlers,
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
        # SQLAlchemy solo si DB_ECHO_SQL lo pide (el engine se encarga)
        "loggers": {
            "sqlalchemy.engine": {"level": "WARNING"},
            "apscheduler": {"level": "WARNING"},
        },
    }

    logging.config.dictConfig(logging_config)


__all__ = ["setup_logging"]
# Fin del archivo backend/showcase/shared/config/logging_config.py
