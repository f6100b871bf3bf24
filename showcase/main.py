# -*- coding: utf-8 -*-
"""
backend/showcase/main.py

Punto de entrada principal del backend Showcase.

Ajustes clave:
- Logging configurado desde settings (LOG_LEVEL / LOG_FORMAT)
- Tablas creadas en el arranque (init_models, idempotente)
- Scheduler con job de mantenimiento si MAINTENANCE_INTERVAL_MINUTES > 0
- Observabilidad Prometheus (/metrics) vía showcase.observability.prom
- Health principal /health delegado al paquete showcase.routes
- CORS desde CORS_ORIGINS ("*" desactiva credenciales)

Autor: Equipo Showcase
Fecha: 2026-10-12
"""

import logging
from contextlib import asynccontextmanager

import anyio
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from showcase.shared.config import get_settings, setup_logging
from showcase.shared.database import init_models
from showcase.shared.middleware import JSONExceptionMiddleware, RequestLoggingMiddleware
from showcase.shared.scheduler import get_scheduler
from showcase.observability import setup_observability

# Registra los modelos en Base.metadata antes de init_models
import showcase.modules.projects.models  # noqa: F401
from showcase.modules.maintenance.jobs import register_maintenance_job

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings = get_settings()

    await init_models()
    logger.info("🗄️ Tablas verificadas")

    scheduler = None
    if settings.maintenance_interval_minutes > 0:
        scheduler = get_scheduler()
        register_maintenance_job(scheduler, settings.maintenance_interval_minutes)
        scheduler.start()
        logger.info("⏰ Scheduler iniciado con jobs programados")
    else:
        logger.info("⚡ Mantenimiento programado deshabilitado")

    logger.info("🟢 Backend de %s iniciado (%s).", settings.app_name, settings.python_env)
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        with anyio.CancelScope(shield=True):
            if scheduler is not None:
                scheduler.shutdown(wait=True)
                logger.info("⏰ Scheduler detenido")
        logger.info("🔴 Backend de %s apagado.", settings.app_name)


openapi_tags = [
    {"name": "projects", "description": "Proyectos del portafolio"},
    {"name": "projects:relations", "description": "Imágenes y repositorios de un proyecto"},
    {"name": "tags", "description": "Tecnologías asociables a proyectos"},
    {"name": "companies", "description": "Experiencia laboral"},
    {"name": "media", "description": "Archivos subidos"},
    {"name": "maintenance", "description": "Slugs faltantes y optimización de imágenes"},
]


def _configure_cors(app_instance: FastAPI) -> dict:
    """
    Configura CORS middleware.

    Returns:
        dict con la configuración aplicada para logging.
    """
    origins_list = get_settings().get_cors_origins()
    is_wildcard_only = origins_list == ["*"]

    cors_config = {
        "allow_origins": origins_list,
        # "*" con allow_credentials=True es inválido en navegadores
        "allow_credentials": not is_wildcard_only,
        "allow_methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["*"],
        "max_age": 600,
    }
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info("🌐 CORS habilitado para %s", origins_list)
    return cors_config


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="API de portafolio: proyectos, tags y compañías",
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=openapi_tags,
        debug=settings.debug,
    )

    # El orden real de ejecución de middlewares en Starlette es inverso al registro:
    # CORS se registra al final para ejecutarse primero (outermost).
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(JSONExceptionMiddleware)
    if settings.metrics_enabled:
        setup_observability(app)
    _configure_cors(app)

    from showcase.routes import router as main_router

    app.include_router(main_router)
    return app


app = create_app()


if __name__ == "__main__":
    _settings = get_settings()
    uvicorn.run("showcase.main:app", host=_settings.app_host, port=_settings.app_port)

# Fin del archivo backend/showcase/main.py
