# -*- coding: utf-8 -*-
"""
backend/showcase/shared/utils/base_models.py

Modelo base para los esquemas Pydantic de la API.

Incluye:
- Eliminación automática de espacios en campos de texto (`str_strip_whitespace = True`)
- Modo de atributos activado para serializar directamente desde ORM (`from_attributes = True`)

Autor: Equipo Showcase
Fecha: 2026-10-03
"""

from pydantic import BaseModel, ConfigDict, Field


class UTF8SafeModel(BaseModel):
    """Base común de esquemas de entrada y salida."""
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


__all__ = ["UTF8SafeModel", "Field"]
# Fin del archivo base_models.py
