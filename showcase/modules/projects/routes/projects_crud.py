# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/routes/projects_crud.py

Rutas del agregado Proyecto: listado con búsqueda, detalle por id o slug,
proyectos relacionados y create/update/delete.

Autor: Equipo Showcase
Fecha: 2026-10-11
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from showcase.shared.utils import unwrap_or_raise
from showcase.modules.projects.routes.deps import get_project_service
from showcase.modules.projects.schemas import ProjectIn, ProjectOut
from showcase.modules.projects.services import ProjectService

router = APIRouter(tags=["projects"])


@router.get("", response_model=List[ProjectOut], summary="Listar proyectos")
async def list_projects(
    search: Optional[str] = Query(None, max_length=255, description="Texto contenido en el título"),
    service: ProjectService = Depends(get_project_service),
):
    """Proyectos ordenados por año descendente, con todas sus relaciones."""
    return unwrap_or_raise(await service.list_projects(search))


@router.get("/slug/{slug}", response_model=ProjectOut, summary="Obtener proyecto por slug")
async def get_project_by_slug(slug: str, service: ProjectService = Depends(get_project_service)):
    return unwrap_or_raise(await service.get_project_by_slug(slug))


@router.get("/{project_id}", response_model=ProjectOut, summary="Obtener proyecto")
async def get_project(project_id: int, service: ProjectService = Depends(get_project_service)):
    return unwrap_or_raise(await service.get_project(project_id))


@router.get(
    "/{project_id}/related",
    response_model=List[ProjectOut],
    summary="Proyectos con más tags en común (máximo 3)",
)
async def get_related_projects(project_id: int, service: ProjectService = Depends(get_project_service)):
    return unwrap_or_raise(await service.get_related_projects(project_id))


@router.post(
    "",
    response_model=ProjectOut,
    status_code=status.HTTP_201_CREATED,
    summary="Crear proyecto",
)
async def create_project(payload: ProjectIn, service: ProjectService = Depends(get_project_service)):
    return unwrap_or_raise(await service.create_project(payload))


@router.put("/{project_id}", response_model=ProjectOut, summary="Reemplazar proyecto")
async def update_project(
    project_id: int,
    payload: ProjectIn,
    service: ProjectService = Depends(get_project_service),
):
    return unwrap_or_raise(await service.update_project(project_id, payload))


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Eliminar proyecto",
)
async def delete_project(project_id: int, service: ProjectService = Depends(get_project_service)):
    unwrap_or_raise(await service.delete_project(project_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Fin del archivo backend/showcase/modules/projects/routes/projects_crud.py
