# -*- coding: utf-8 -*-
"""
backend/showcase/modules/tags/routes/tags_routes.py

CRUD de tags. El título es único sin distinguir mayúsculas (409 si se repite).

Autor: Equipo Showcase
Fecha: 2026-10-11
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.shared.database import TextMatcher, get_db
from showcase.shared.dependencies import get_text_matcher
from showcase.shared.utils import unwrap_or_raise
from showcase.modules.tags.schemas import TagIn, TagOut
from showcase.modules.tags.services import TagService

router = APIRouter(tags=["tags"])


async def get_tag_service(
    db: AsyncSession = Depends(get_db),
    matcher: TextMatcher = Depends(get_text_matcher),
) -> TagService:
    return TagService(db, matcher)


@router.get("", response_model=List[TagOut], summary="Listar tags")
async def list_tags(
    search: Optional[str] = Query(None, max_length=255),
    service: TagService = Depends(get_tag_service),
):
    return unwrap_or_raise(await service.list_tags(search))


@router.get("/slug/{slug}", response_model=TagOut, summary="Obtener tag por slug")
async def get_tag_by_slug(slug: str, service: TagService = Depends(get_tag_service)):
    return unwrap_or_raise(await service.get_tag_by_slug(slug))


@router.get("/{tag_id}", response_model=TagOut, summary="Obtener tag")
async def get_tag(tag_id: int, service: TagService = Depends(get_tag_service)):
    return unwrap_or_raise(await service.get_tag(tag_id))


@router.post("", response_model=TagOut, status_code=status.HTTP_201_CREATED, summary="Crear tag")
async def create_tag(payload: TagIn, service: TagService = Depends(get_tag_service)):
    return unwrap_or_raise(await service.create_tag(payload))


@router.put("/{tag_id}", response_model=TagOut, summary="Actualizar tag")
async def update_tag(tag_id: int, payload: TagIn, service: TagService = Depends(get_tag_service)):
    return unwrap_or_raise(await service.update_tag(tag_id, payload))


@router.delete(
    "/{tag_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Eliminar tag (se desasocia de sus proyectos)",
)
async def delete_tag(tag_id: int, service: TagService = Depends(get_tag_service)):
    unwrap_or_raise(await service.delete_tag(tag_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Fin del archivo backend/showcase/modules/tags/routes/tags_routes.py
