# -*- coding: utf-8 -*-
"""
backend/showcase/modules/media/routes/__init__.py

Router de archivos subidos (/media/uploads/{file_name}).

Autor: Equipo Showcase
Fecha: 2026-10-11
"""
from .media_routes import router

__all__ = ["router"]

# Fin del archivo backend/showcase/modules/media/routes/__init__.py
