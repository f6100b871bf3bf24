# -*- coding: utf-8 -*-
"""
backend/showcase/routes/master_routes.py

Router maestro: monta los routers de cada módulo sin prefijo adicional
(/projects, /tags, /companies, /media, /maintenance, /project-images).

Autor: Equipo Showcase
Fecha: 2026-10-12
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from showcase.modules.companies.routes import get_companies_router
from showcase.modules.maintenance.routes import router as maintenance_router
from showcase.modules.media.routes import router as media_router
from showcase.modules.projects.routes import get_projects_router
from showcase.modules.tags.routes import get_tags_router

logger = logging.getLogger(__name__)

public = APIRouter()

_loaded: list[str] = []  # trazabilidad/debug


def _include(target: APIRouter, router: APIRouter, name: str) -> None:
    """Incluye un router en la capa dada y registra trazabilidad en logs."""
    target.include_router(router)
    _loaded.append(name)
    logger.debug("Router '%s' montado (%d rutas)", name, len(router.routes))


_include(public, get_projects_router(), "projects")
_include(public, get_tags_router(), "tags")
_include(public, get_companies_router(), "companies")
_include(public, media_router, "media")
_include(public, maintenance_router, "maintenance")


def loaded_routers() -> list[str]:
    return list(_loaded)


__all__ = ["public", "loaded_routers"]

# Fin del archivo backend/showcase/routes/master_routes.py
