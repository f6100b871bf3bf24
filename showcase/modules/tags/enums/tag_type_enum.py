# -*- coding: utf-8 -*-
"""
backend/showcase/modules/tags/enums/tag_type_enum.py

Enum: TagType
Categoría de un tag (el frontend la usa para agrupar y colorear).

Valores: ('Default', 'Backend', 'Frontend', 'DevOps', 'Other', 'Data', 'CMS', 'Mobile')

Autor: Equipo Showcase
Fecha: 2026-10-06
"""

from enum import StrEnum


class TagType(StrEnum):
    DEFAULT = "Default"
    BACKEND = "Backend"
    FRONTEND = "Frontend"
    DEVOPS = "DevOps"
    OTHER = "Other"
    DATA = "Data"
    CMS = "CMS"
    MOBILE = "Mobile"


__all__ = ["TagType"]

# Fin del archivo backend/showcase/modules/tags/enums/tag_type_enum.py
