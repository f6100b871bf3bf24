# -*- coding: utf-8 -*-
"""
backend/showcase/modules/companies/services/company_service.py

Servicio de compañías: CRUD con unicidad de nombre y logo opcional.

Borrar una compañía no borra sus proyectos: quedan con company_id = NULL.

Autor: Equipo Showcase
Fecha: 2026-10-09
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.shared.database import BaseRepository, TextMatcher, commit_or_rollback
from showcase.shared.results import Result, conflict, not_found, ok
from showcase.shared.storage import LocalFileStorage, StorageChangeSet
from showcase.shared.utils.slug import unique_slug
from showcase.modules.companies.models import Company
from showcase.modules.companies.schemas import CompanyIn
from showcase.modules.projects.models import Project

logger = logging.getLogger(__name__)

COMPANY_NOT_FOUND = "Company not found."
COMPANY_CONFLICT = "A company with the same name already exists."


class CompanyService:
    def __init__(self, db: AsyncSession, matcher: TextMatcher, storage: LocalFileStorage):
        self.db = db
        self.matcher = matcher
        self.storage = storage
        self.repo: BaseRepository[Company] = BaseRepository(Company)

    # === Lecturas ===

    async def list_companies(self, search: Optional[str] = None) -> Result[List[Company]]:
        criteria = [self.matcher.contains(Company.name, search)] if search else []
        rows = await self.repo.list(self.db, *criteria, order_by=(Company.name, Company.id))
        return ok(list(rows))

    async def get_company(self, company_id: int) -> Result[Company]:
        company = await self.repo.get(self.db, company_id)
        if company is None:
            return not_found(COMPANY_NOT_FOUND)
        return ok(company)

    async def get_company_by_slug(self, slug: str) -> Result[Company]:
        company = await self.repo.get_by_slug(self.db, slug)
        if company is None:
            return not_found(COMPANY_NOT_FOUND)
        return ok(company)

    # === Escrituras ===

    async def create_company(self, data: CompanyIn) -> Result[Company]:
        changes = StorageChangeSet(self.storage)

        async def _work() -> Result[Company]:
            if await self._name_taken(data.name):
                return conflict(COMPANY_CONFLICT)

            logo = None
            if data.logo:
                saved = await self.storage.save(data.logo, data.logo_filename)
                if saved.is_failure:
                    return saved
                logo = saved.unwrap()
                changes.track_created(logo)

            company = Company(
                name=data.name,
                description=data.description,
                website=data.website,
                logo=logo,
                slug=await unique_slug(self.db, Company, data.name),
            )
            await self.repo.add(self.db, company)
            logger.info("[companies] creada id=%s slug=%s", company.id, company.slug)
            return ok(company)

        return await commit_or_rollback(self.db, _work, changes)

    async def update_company(self, company_id: int, data: CompanyIn) -> Result[Company]:
        """Un logo nuevo reemplaza al anterior; sin logo se conserva el actual."""
        changes = StorageChangeSet(self.storage)

        async def _work() -> Result[Company]:
            company = await self.repo.get(self.db, company_id)
            if company is None:
                return not_found(COMPANY_NOT_FOUND)
            if await self._name_taken(data.name, exclude_id=company_id):
                return conflict(COMPANY_CONFLICT)

            if data.logo:
                saved = await self.storage.save(data.logo, data.logo_filename)
                if saved.is_failure:
                    return saved
                changes.track_created(saved.unwrap())
                changes.release(company.logo)
                company.logo = saved.unwrap()

            company.name = data.name
            company.description = data.description
            company.website = data.website
            company.slug = await unique_slug(self.db, Company, data.name, exclude_id=company_id)
            await self.db.flush()
            return ok(company)

        return await commit_or_rollback(self.db, _work, changes)

    async def delete_company(self, company_id: int) -> Result[Company]:
        changes = StorageChangeSet(self.storage)

        async def _work() -> Result[Company]:
            company = await self.repo.get(self.db, company_id)
            if company is None:
                return not_found(COMPANY_NOT_FOUND)

            await self.db.execute(
                update(Project).where(Project.company_id == company_id).values(company_id=None)
            )
            changes.release(company.logo)
            await self.repo.delete(self.db, company)
            logger.info("[companies] eliminada id=%s", company_id)
            return ok(company)

        return await commit_or_rollback(self.db, _work, changes)

    async def _name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        criteria = [self.matcher.equals(Company.name, name)]
        if exclude_id is not None:
            criteria.append(Company.id != exclude_id)
        return await self.repo.find_first(self.db, *criteria) is not None


__all__ = ["CompanyService", "COMPANY_NOT_FOUND", "COMPANY_CONFLICT"]

# Fin del archivo backend/showcase/modules/companies/services/company_service.py
