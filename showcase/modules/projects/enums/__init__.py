# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/enums/__init__.py

Export central de enums del módulo de proyectos.
"""

from .image_type_enum import ImageType, SINGLE_OCCUPANCY_TYPES

__all__ = ["ImageType", "SINGLE_OCCUPANCY_TYPES"]
