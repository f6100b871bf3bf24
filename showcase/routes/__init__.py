# -*- coding: utf-8 -*-
"""
backend/showcase/routes/__init__.py

Ensamblador principal de ruteadores de la API.

Responsabilidades:
- Incluir el router de health (/health).
- Reutilizar la capa `public` definida en master_routes.py.

Autor: Equipo Showcase
Fecha: 2026-10-12
"""

from fastapi import APIRouter

from .health_routes import router as health_router
from .master_routes import public

router = APIRouter()

router.include_router(health_router)
router.include_router(public)

__all__ = ["router"]

# Fin del archivo backend/showcase/routes/__init__.py
