# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/routes/deps.py

Dependencias inyectables para los servicios de Projects.
Tests pueden overridear estas dependencias (app.dependency_overrides).

Autor: Equipo Showcase
Fecha: 2026-10-11
"""

from typing import Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.shared.database import TextMatcher, get_db
from showcase.shared.dependencies import get_file_storage, get_image_optimizer, get_text_matcher
from showcase.shared.integrations import ImageOptimizer
from showcase.shared.storage import LocalFileStorage
from showcase.modules.projects.services import (
    ProjectImageService,
    ProjectRepositoryService,
    ProjectService,
)


async def get_project_service(
    db: AsyncSession = Depends(get_db),
    matcher: TextMatcher = Depends(get_text_matcher),
    storage: LocalFileStorage = Depends(get_file_storage),
    optimizer: Optional[ImageOptimizer] = Depends(get_image_optimizer),
) -> ProjectService:
    return ProjectService(db, matcher, storage, optimizer)


async def get_project_image_service(
    db: AsyncSession = Depends(get_db),
    storage: LocalFileStorage = Depends(get_file_storage),
    optimizer: Optional[ImageOptimizer] = Depends(get_image_optimizer),
) -> ProjectImageService:
    return ProjectImageService(db, storage, optimizer)


async def get_project_repository_service(
    db: AsyncSession = Depends(get_db),
) -> ProjectRepositoryService:
    return ProjectRepositoryService(db)

# Fin del archivo backend/showcase/modules/projects/routes/deps.py
