# -*- coding: utf-8 -*-
"""
backend/showcase/modules/tags/routes/__init__.py

Router del módulo Tags (CRUD bajo /tags).

Autor: Equipo Showcase
Fecha: 2026-10-11
"""
from fastapi import APIRouter

from .tags_routes import router as tags_router


def get_tags_router() -> APIRouter:
    router = APIRouter()
    router.include_router(tags_router, prefix="/tags")
    return router


__all__ = ["get_tags_router"]

# Fin del archivo backend/showcase/modules/tags/routes/__init__.py
