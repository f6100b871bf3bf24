# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/schemas/project_schemas.py

Schemas Pydantic para el agregado Proyecto.

Las listas `images` y `repositories` describen el estado objetivo completo:
- elemento con `id`  → conservar ese hijo (y actualizar `order` si viene)
- elemento sin `id`  → crear uno nuevo
- hijo actual ausente de la lista → se elimina

Autor: Equipo Showcase
Fecha: 2026-10-07
"""

from typing import List, Optional

from pydantic import Base64Bytes, Field

from showcase.shared.utils.base_models import UTF8SafeModel
from showcase.modules.projects.enums import ImageType
from showcase.modules.tags.schemas import TagOut
from showcase.modules.companies.schemas import CompanyOut


# ========== REQUEST SCHEMAS ==========

class ProjectImageIn(UTF8SafeModel):
    """Imagen objetivo: referencia a una existente (id) o una nueva (image)."""
    id: Optional[int] = None
    type: ImageType
    order: Optional[int] = None
    image: Optional[Base64Bytes] = Field(None, description="Contenido del archivo en base64 (solo nuevas)")
    filename: Optional[str] = Field(None, max_length=255, description="Nombre original, para la extensión")


class ProjectRepositoryIn(UTF8SafeModel):
    """Repositorio objetivo: referencia a uno existente (id) o uno nuevo (title + url)."""
    id: Optional[int] = None
    title: Optional[str] = Field(None, max_length=255)
    url: Optional[str] = Field(None, max_length=1024)
    order: Optional[int] = None


class ProjectIn(UTF8SafeModel):
    """
    Request para crear o reemplazar un proyecto.

    Update tiene semántica de reemplazo total: tags, images y repositories
    se re-sincronizan siempre contra lo recibido.
    """
    title: str = Field(..., min_length=1, max_length=255)
    short_description: str = Field("", max_length=512)
    description: str = Field("", max_length=20_000)
    year: int = Field(..., ge=1900, le=2200)
    website: Optional[str] = Field(None, max_length=512)
    show_mockup: bool = False
    company_id: Optional[int] = None
    tags: List[str] = Field(default_factory=list, description="Títulos de tags (se crean si no existen)")
    images: List[ProjectImageIn] = Field(default_factory=list)
    repositories: List[ProjectRepositoryIn] = Field(default_factory=list)


# ========== RESPONSE SCHEMAS ==========

class ProjectImageOut(UTF8SafeModel):
    id: int
    image: str
    type: ImageType
    order: Optional[int] = None
    is_optimised: bool


class ProjectRepositoryOut(UTF8SafeModel):
    id: int
    title: str
    url: str
    order: Optional[int] = None


class ProjectOut(UTF8SafeModel):
    id: int
    title: str
    short_description: str
    description: str
    year: int
    website: Optional[str] = None
    show_mockup: bool
    slug: Optional[str] = None
    company_id: Optional[int] = None
    company: Optional[CompanyOut] = None
    tags: List[TagOut] = Field(default_factory=list)
    images: List[ProjectImageOut] = Field(default_factory=list)
    repositories: List[ProjectRepositoryOut] = Field(default_factory=list)


__all__ = [
    "ProjectImageIn",
    "ProjectRepositoryIn",
    "ProjectIn",
    "ProjectImageOut",
    "ProjectRepositoryOut",
    "ProjectOut",
]

# Fin del archivo backend/showcase/modules/projects/schemas/project_schemas.py
