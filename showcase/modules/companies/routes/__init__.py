# -*- coding: utf-8 -*-
"""
backend/showcase/modules/companies/routes/__init__.py

Router del módulo Companies (CRUD bajo /companies).

Autor: Equipo Showcase
Fecha: 2026-10-11
"""
from fastapi import APIRouter

from .companies_routes import router as companies_router


def get_companies_router() -> APIRouter:
    router = APIRouter()
    router.include_router(companies_router, prefix="/companies")
    return router


__all__ = ["get_companies_router"]

# Fin del archivo backend/showcase/modules/companies/routes/__init__.py
