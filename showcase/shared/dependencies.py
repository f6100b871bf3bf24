# -*- coding: utf-8 -*-
"""
backend/showcase/shared/dependencies.py

Dependencias FastAPI compartidas por los routers de módulo:

- get_text_matcher(): estrategia de comparación de texto (TEXT_MATCH_STRATEGY)
- get_file_storage(): almacenamiento local de archivos subidos (UPLOADS_DIR)
- get_image_optimizer(): cliente Tinify (TINIFY_API_KEY) o None

Los tests pueden sobrescribirlas con app.dependency_overrides.

Autor: Equipo Showcase
Fecha: 2026-10-11
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from showcase.shared.config import get_settings
from showcase.shared.database import TextMatcher, build_text_matcher
from showcase.shared.integrations import ImageOptimizer, TinifyImageOptimizer
from showcase.shared.storage import LocalFileStorage


@lru_cache(maxsize=1)
def get_text_matcher() -> TextMatcher:
    return build_text_matcher(get_settings().text_match_strategy)


@lru_cache(maxsize=1)
def get_file_storage() -> LocalFileStorage:
    return LocalFileStorage(get_settings().uploads_dir)


@lru_cache(maxsize=1)
def get_image_optimizer() -> Optional[ImageOptimizer]:
    """None si TINIFY_API_KEY no está configurada: las imágenes se guardan tal cual."""
    settings = get_settings()
    if not settings.tinify_key:
        return None
    return TinifyImageOptimizer(
        api_key=settings.tinify_key,
        api_url=settings.tinify_api_url,
        timeout=settings.image_optimise_timeout_sec,
    )


__all__ = ["get_text_matcher", "get_file_storage", "get_image_optimizer"]

# Fin del archivo backend/showcase/shared/dependencies.py
