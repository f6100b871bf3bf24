# -*- coding: utf-8 -*-
"""
backend/showcase/shared/utils/__init__.py

Exportación de utilidades comunes.

Autor: Equipo Showcase
Fecha: 2026-10-03
"""

from .base_models import UTF8SafeModel, Field
from .http_exceptions import (
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    exception_for,
    unwrap_or_raise,
)
from .slug import to_slug, unique_slug

__all__ = [
    "UTF8SafeModel",
    "Field",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "exception_for",
    "unwrap_or_raise",
    "to_slug",
    "unique_slug",
]

# Fin del archivo backend/showcase/shared/utils/__init__.py
