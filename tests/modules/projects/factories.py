# -*- coding: utf-8 -*-
"""
backend/tests/modules/projects/factories.py

Constructores de payloads para los tests de Projects.
"""

from typing import List, Optional

from showcase.modules.projects.enums import ImageType
from showcase.modules.projects.schemas import ProjectImageIn, ProjectIn, ProjectRepositoryIn

from tests.support import PNG_BYTES, b64


def new_image(image_type: ImageType = ImageType.DESKTOP, order: Optional[int] = None, data: bytes = PNG_BYTES) -> ProjectImageIn:
    return ProjectImageIn(type=image_type, order=order, image=b64(data), filename="shot.png")


def keep_image(image_id: int, image_type: ImageType = ImageType.DESKTOP, order: Optional[int] = None) -> ProjectImageIn:
    return ProjectImageIn(id=image_id, type=image_type, order=order)


def new_repository(title: str = "api", url: str = "https://github.com/acme/api", order: Optional[int] = None) -> ProjectRepositoryIn:
    return ProjectRepositoryIn(title=title, url=url, order=order)


def project_in(
    title: str = "Portfolio",
    year: int = 2024,
    tags: Optional[List[str]] = None,
    images: Optional[List[ProjectImageIn]] = None,
    repositories: Optional[List[ProjectRepositoryIn]] = None,
    company_id: Optional[int] = None,
    **extra,
) -> ProjectIn:
    return ProjectIn(
        title=title,
        year=year,
        tags=tags or [],
        images=images or [],
        repositories=repositories or [],
        company_id=company_id,
        **extra,
    )
