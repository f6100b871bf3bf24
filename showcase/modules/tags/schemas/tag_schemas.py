# -*- coding: utf-8 -*-
"""
backend/showcase/modules/tags/schemas/tag_schemas.py

Schemas Pydantic para creación, actualización y respuesta de tags.

Autor: Equipo Showcase
Fecha: 2026-10-07
"""

from typing import Optional

from pydantic import Field

from showcase.shared.utils.base_models import UTF8SafeModel
from showcase.modules.tags.enums import TagType


# ========== REQUEST SCHEMAS ==========

class TagIn(UTF8SafeModel):
    """Request para crear o reemplazar un tag."""
    title: str = Field(..., min_length=1, max_length=255, description="Nombre visible del tag")
    type: TagType = Field(TagType.DEFAULT, description="Categoría del tag")
    icon: Optional[str] = Field(None, max_length=255, description="Identificador de icono")
    custom_colour: Optional[str] = Field(
        None,
        max_length=32,
        description="Color que reemplaza al de la categoría (p.ej. #61DAFB)",
    )


# ========== RESPONSE SCHEMAS ==========

class TagOut(UTF8SafeModel):
    id: int
    title: str
    type: TagType
    icon: Optional[str] = None
    custom_colour: Optional[str] = None
    slug: Optional[str] = None


__all__ = ["TagIn", "TagOut"]

# Fin del archivo backend/showcase/modules/tags/schemas/tag_schemas.py
