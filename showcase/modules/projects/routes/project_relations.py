# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/routes/project_relations.py

Rutas de las colecciones hijas de un proyecto (imágenes y repositorios).

PUT reemplaza la colección completa con la lista enviada:
- entradas con id existente se conservan (y actualizan su orden)
- entradas sin id se crean
- hijos actuales ausentes de la lista se eliminan

Autor: Equipo Showcase
Fecha: 2026-10-11
"""

from typing import List

from fastapi import APIRouter, Body, Depends

from showcase.shared.utils import unwrap_or_raise
from showcase.modules.projects.routes.deps import (
    get_project_image_service,
    get_project_repository_service,
)
from showcase.modules.projects.schemas import (
    ProjectImageIn,
    ProjectImageOut,
    ProjectRepositoryIn,
    ProjectRepositoryOut,
)
from showcase.modules.projects.services import ProjectImageService, ProjectRepositoryService

router = APIRouter(tags=["projects:relations"])


# ---------------------------------------------------------------------------
# Imágenes
# ---------------------------------------------------------------------------
@router.get("/{project_id}/images", response_model=List[ProjectImageOut], summary="Listar imágenes")
async def list_project_images(
    project_id: int,
    service: ProjectImageService = Depends(get_project_image_service),
):
    return unwrap_or_raise(await service.get_project_images(project_id))


@router.get(
    "/{project_id}/images/{image_id}",
    response_model=ProjectImageOut,
    summary="Obtener imagen",
)
async def get_project_image(
    project_id: int,
    image_id: int,
    service: ProjectImageService = Depends(get_project_image_service),
):
    return unwrap_or_raise(await service.get_project_image(project_id, image_id))


@router.put(
    "/{project_id}/images",
    response_model=List[ProjectImageOut],
    summary="Sincronizar imágenes del proyecto",
)
async def sync_project_images(
    project_id: int,
    payload: List[ProjectImageIn] = Body(...),
    service: ProjectImageService = Depends(get_project_image_service),
):
    return unwrap_or_raise(await service.sync_project_images(project_id, payload))


# ---------------------------------------------------------------------------
# Repositorios
# ---------------------------------------------------------------------------
@router.get(
    "/{project_id}/repositories",
    response_model=List[ProjectRepositoryOut],
    summary="Listar repositorios",
)
async def list_project_repositories(
    project_id: int,
    service: ProjectRepositoryService = Depends(get_project_repository_service),
):
    return unwrap_or_raise(await service.get_project_repositories(project_id))


@router.get(
    "/{project_id}/repositories/{repository_id}",
    response_model=ProjectRepositoryOut,
    summary="Obtener repositorio",
)
async def get_project_repository(
    project_id: int,
    repository_id: int,
    service: ProjectRepositoryService = Depends(get_project_repository_service),
):
    return unwrap_or_raise(await service.get_project_repository(project_id, repository_id))


@router.put(
    "/{project_id}/repositories",
    response_model=List[ProjectRepositoryOut],
    summary="Sincronizar repositorios del proyecto",
)
async def sync_project_repositories(
    project_id: int,
    payload: List[ProjectRepositoryIn] = Body(...),
    service: ProjectRepositoryService = Depends(get_project_repository_service),
):
    return unwrap_or_raise(await service.sync_project_repositories(project_id, payload))

# Fin del archivo backend/showcase/modules/projects/routes/project_relations.py
