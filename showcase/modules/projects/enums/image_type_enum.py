# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/enums/image_type_enum.py

Enum: ImageType
Categoría de una imagen de proyecto.

Valores: ('Logo', 'Banner', 'Card', 'Desktop', 'Mobile')

- Logo, Banner, Card: una sola por proyecto (ocupación única).
- Desktop, Mobile: ilimitadas, ordenadas por `order`.

El orden de declaración es el orden de lectura de las imágenes.

Autor: Equipo Showcase
Fecha: 2026-10-06
"""

from enum import StrEnum


class ImageType(StrEnum):
    LOGO = "Logo"
    BANNER = "Banner"
    CARD = "Card"
    DESKTOP = "Desktop"
    MOBILE = "Mobile"

    @property
    def is_single_occupancy(self) -> bool:
        return self in SINGLE_OCCUPANCY_TYPES

    @property
    def rank(self) -> int:
        return _RANK[self]


SINGLE_OCCUPANCY_TYPES = frozenset({ImageType.LOGO, ImageType.BANNER, ImageType.CARD})

_RANK = {image_type: index for index, image_type in enumerate(ImageType)}


__all__ = ["ImageType", "SINGLE_OCCUPANCY_TYPES"]

# Fin del archivo backend/showcase/modules/projects/enums/image_type_enum.py
