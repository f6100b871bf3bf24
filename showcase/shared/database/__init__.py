# -*- coding: utf-8 -*-
"""
backend/showcase/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: Equipo Showcase
Fecha: 2026-10-03
"""

from __future__ import annotations

from .base import Base, NAMING_CONVENTION, as_str_enum
from .database import (
    engine,
    SessionLocal,
    get_db,
    session_scope,
    init_models,
    check_database_health,
)
from .repository import BaseRepository
from .text_match import TextMatcher, IlikeMatcher, RegexMatcher, build_text_matcher
from .transactions import commit_or_rollback

__all__ = [
    "Base",
    "NAMING_CONVENTION",
    "as_str_enum",
    "engine",
    "SessionLocal",
    "get_db",
    "session_scope",
    "init_models",
    "check_database_health",
    "BaseRepository",
    "TextMatcher",
    "IlikeMatcher",
    "RegexMatcher",
    "build_text_matcher",
    "commit_or_rollback",
]

# Fin del archivo backend/showcase/shared/database/__init__.py
