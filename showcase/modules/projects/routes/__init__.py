# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/routes/__init__.py

Router principal del módulo Projects.
Compone subrouters de:
- projects_crud (agregado)
- project_relations (imágenes y repositorios)

Autor: Equipo Showcase
Fecha: 2026-10-11
"""
from fastapi import APIRouter

from .projects_crud import router as projects_crud_router
from .project_relations import router as project_relations_router


def get_projects_router() -> APIRouter:
    """Ensambla los subrouters con el prefijo /projects."""
    router = APIRouter()
    router.include_router(projects_crud_router, prefix="/projects")
    router.include_router(project_relations_router, prefix="/projects")
    return router


__all__ = ["get_projects_router"]

# Fin del archivo backend/showcase/modules/projects/routes/__init__.py
