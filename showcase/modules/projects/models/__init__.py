# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/models/__init__.py

Importa también Company y Tag para que las relaciones por nombre
("Company", "Tag") se resuelvan al configurar los mappers.
"""

from showcase.modules.companies.models import Company  # noqa: F401
from showcase.modules.tags.models import Tag, project_tags  # noqa: F401

from .project_models import (
    Project,
    ProjectImage,
    ProjectRepository,
    image_read_order,
    repository_read_order,
    image_sort_key,
    repository_sort_key,
)

__all__ = [
    "Project",
    "ProjectImage",
    "ProjectRepository",
    "image_read_order",
    "repository_read_order",
    "image_sort_key",
    "repository_sort_key",
]
