# -*- coding: utf-8 -*-
"""
backend/showcase/modules/companies/schemas/company_schemas.py

Schemas Pydantic para compañías.

El logo viaja en base64 dentro del JSON (`logo`), con `logo_filename`
opcional para conservar la extensión del archivo original.

Autor: Equipo Showcase
Fecha: 2026-10-07
"""

from typing import Optional

from pydantic import Base64Bytes, Field

from showcase.shared.utils.base_models import UTF8SafeModel


# ========== REQUEST SCHEMAS ==========

class CompanyIn(UTF8SafeModel):
    """
    Request para crear o reemplazar una compañía.

    En update, `logo = None` conserva el logo actual; un logo nuevo
    reemplaza al anterior (el archivo viejo se borra tras el commit).
    """
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field("", max_length=10_000)
    website: Optional[str] = Field(None, max_length=512)
    logo: Optional[Base64Bytes] = Field(None, description="Imagen del logo en base64")
    logo_filename: Optional[str] = Field(None, max_length=255)


# ========== RESPONSE SCHEMAS ==========

class CompanyOut(UTF8SafeModel):
    id: int
    name: str
    description: str
    website: Optional[str] = None
    logo: Optional[str] = None
    slug: Optional[str] = None


__all__ = ["CompanyIn", "CompanyOut"]

# Fin del archivo backend/showcase/modules/companies/schemas/company_schemas.py
