# -*- coding: utf-8 -*-
"""
backend/showcase/modules/maintenance/routes/__init__.py
"""
from .maintenance_routes import router

__all__ = ["router"]
