# -*- coding: utf-8 -*-
"""
backend/showcase/modules/companies/routes/companies_routes.py

CRUD de compañías. El logo viaja en base64 (`logo`) con `logo_filename`
opcional para conservar la extensión.

Autor: Equipo Showcase
Fecha: 2026-10-11
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.shared.database import TextMatcher, get_db
from showcase.shared.dependencies import get_file_storage, get_text_matcher
from showcase.shared.storage import LocalFileStorage
from showcase.shared.utils import unwrap_or_raise
from showcase.modules.companies.schemas import CompanyIn, CompanyOut
from showcase.modules.companies.services import CompanyService

router = APIRouter(tags=["companies"])


async def get_company_service(
    db: AsyncSession = Depends(get_db),
    matcher: TextMatcher = Depends(get_text_matcher),
    storage: LocalFileStorage = Depends(get_file_storage),
) -> CompanyService:
    return CompanyService(db, matcher, storage)


@router.get("", response_model=List[CompanyOut], summary="Listar compañías")
async def list_companies(
    search: Optional[str] = Query(None, max_length=255),
    service: CompanyService = Depends(get_company_service),
):
    return unwrap_or_raise(await service.list_companies(search))


@router.get("/slug/{slug}", response_model=CompanyOut, summary="Obtener compañía por slug")
async def get_company_by_slug(slug: str, service: CompanyService = Depends(get_company_service)):
    return unwrap_or_raise(await service.get_company_by_slug(slug))


@router.get("/{company_id}", response_model=CompanyOut, summary="Obtener compañía")
async def get_company(company_id: int, service: CompanyService = Depends(get_company_service)):
    return unwrap_or_raise(await service.get_company(company_id))


@router.post(
    "",
    response_model=CompanyOut,
    status_code=status.HTTP_201_CREATED,
    summary="Crear compañía",
)
async def create_company(payload: CompanyIn, service: CompanyService = Depends(get_company_service)):
    return unwrap_or_raise(await service.create_company(payload))


@router.put("/{company_id}", response_model=CompanyOut, summary="Actualizar compañía")
async def update_company(
    company_id: int,
    payload: CompanyIn,
    service: CompanyService = Depends(get_company_service),
):
    return unwrap_or_raise(await service.update_company(company_id, payload))


@router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Eliminar compañía (sus proyectos quedan sin compañía)",
)
async def delete_company(company_id: int, service: CompanyService = Depends(get_company_service)):
    unwrap_or_raise(await service.delete_company(company_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Fin del archivo backend/showcase/modules/companies/routes/companies_routes.py
