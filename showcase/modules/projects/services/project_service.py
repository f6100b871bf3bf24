# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/services/project_service.py

Servicio del agregado Proyecto: lecturas, creación, actualización y borrado.

Create/Update:
    1. unicidad del título (sin distinguir mayúsculas) → CONFLICT
    2. slug único derivado del título
    3. flush de la fila (para tener id)
    4. sync de tags → imágenes → repositorios; el primer fallo aborta
Todo corre en una sola transacción (commit_or_rollback): si algo falla no
queda ni la fila ni relaciones a medias, y los archivos escritos se borran.

Autor: Equipo Showcase
Fecha: 2026-10-09
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from showcase.shared.database import TextMatcher, commit_or_rollback
from showcase.shared.integrations import ImageOptimizer
from showcase.shared.results import Result, bad_request, conflict, not_found, ok
from showcase.shared.storage import LocalFileStorage, StorageChangeSet
from showcase.shared.utils.slug import unique_slug
from showcase.modules.companies.models import Company
from showcase.modules.projects.models import Project
from showcase.modules.projects.repositories import FULL, ProjectLoad, project_repository as repo
from showcase.modules.projects.schemas import ProjectIn
from showcase.modules.projects.services.project_image_service import ProjectImageService
from showcase.modules.projects.services.project_repository_service import ProjectRepositoryService
from showcase.modules.tags.services import TagService

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = "Project not found."
PROJECT_CONFLICT = "A project with the same title already exists."
COMPANY_MISSING = "The referenced company does not exist."

RELATED_LIMIT = 3

# Colecciones que una escritura re-sincroniza (company se lee aparte en _reload)
AGGREGATE = ProjectLoad(images=True, repositories=True, tags=True)


class ProjectService:
    def __init__(
        self,
        db: AsyncSession,
        matcher: TextMatcher,
        storage: LocalFileStorage,
        optimizer: Optional[ImageOptimizer] = None,
    ):
        self.db = db
        self.matcher = matcher
        self.storage = storage
        self.tags = TagService(db, matcher)
        self.images = ProjectImageService(db, storage, optimizer)
        self.repositories = ProjectRepositoryService(db)

    # === Lecturas ===

    async def list_projects(self, search: Optional[str] = None) -> Result[List[Project]]:
        return ok(await repo.list_projects(self.db, self.matcher, search=search))

    async def get_project(self, project_id: int) -> Result[Project]:
        project = await repo.get_project_by_id(self.db, project_id, FULL)
        if project is None:
            return not_found(PROJECT_NOT_FOUND)
        return ok(project)

    async def get_project_by_slug(self, slug: str) -> Result[Project]:
        project = await repo.get_project_by_slug(self.db, slug, FULL)
        if project is None:
            return not_found(PROJECT_NOT_FOUND)
        return ok(project)

    async def get_related_projects(self, project_id: int) -> Result[List[Project]]:
        """
        Hasta 3 proyectos con más tags en común (empates por id ascendente).
        Un proyecto sin tags no tiene relacionados (lista vacía, no error).
        """
        if not await repo.project_exists(self.db, project_id):
            return not_found(PROJECT_NOT_FOUND)
        tag_ids = await repo.get_project_tag_ids(self.db, project_id)
        if not tag_ids:
            return ok([])
        return ok(await repo.list_related_projects(self.db, project_id, tag_ids, limit=RELATED_LIMIT))

    # === Escrituras ===

    async def create_project(self, data: ProjectIn) -> Result[Project]:
        changes = StorageChangeSet(self.storage)

        async def _work() -> Result[Project]:
            if await repo.find_project_by_title(self.db, self.matcher, data.title):
                return conflict(PROJECT_CONFLICT)
            if not await self._company_exists(data.company_id):
                return bad_request(COMPANY_MISSING)

            project = Project(images=[], repositories=[], tags=[])
            await self._apply_scalars(project, data, exclude_id=None)
            self.db.add(project)
            await self.db.flush()

            synced = await self._sync_relations(project, data, changes)
            if synced.is_failure:
                return synced
            logger.info("[projects] creado id=%s slug=%s", project.id, project.slug)
            return ok(project)

        result = await commit_or_rollback(self.db, _work, changes)
        if result.is_failure:
            return result
        return await self._reload(result.unwrap().id)

    async def update_project(self, project_id: int, data: ProjectIn) -> Result[Project]:
        """Reemplazo total: escalares, slug y las tres relaciones."""
        changes = StorageChangeSet(self.storage)

        async def _work() -> Result[Project]:
            project = await repo.get_project_by_id(self.db, project_id, AGGREGATE)
            if project is None:
                return not_found(PROJECT_NOT_FOUND)
            if await repo.find_project_by_title(self.db, self.matcher, data.title, exclude_id=project_id):
                return conflict(PROJECT_CONFLICT)
            if not await self._company_exists(data.company_id):
                return bad_request(COMPANY_MISSING)

            await self._apply_scalars(project, data, exclude_id=project_id)
            synced = await self._sync_relations(project, data, changes)
            if synced.is_failure:
                return synced
            logger.info("[projects] actualizado id=%s slug=%s", project.id, project.slug)
            return ok(project)

        result = await commit_or_rollback(self.db, _work, changes)
        if result.is_failure:
            return result
        return await self._reload(project_id)

    async def delete_project(self, project_id: int) -> Result[Project]:
        """
        Borra el proyecto. Imágenes y repositorios se eliminan en cascada
        (sus archivos tras el commit); los tags sobreviven.

        Returns:
            El proyecto borrado (snapshot con relaciones cargadas)
        """
        changes = StorageChangeSet(self.storage)

        async def _work() -> Result[Project]:
            project = await repo.get_project_by_id(self.db, project_id, FULL)
            if project is None:
                return not_found(PROJECT_NOT_FOUND)
            self.images.release_all(project, changes)
            await self.db.delete(project)
            await self.db.flush()
            logger.info("[projects] eliminado id=%s", project_id)
            return ok(project)

        return await commit_or_rollback(self.db, _work, changes)

    # === helpers ===

    async def _apply_scalars(self, project: Project, data: ProjectIn, exclude_id: Optional[int]) -> None:
        project.title = data.title
        project.short_description = data.short_description
        project.description = data.description
        project.year = data.year
        project.website = data.website
        project.show_mockup = data.show_mockup
        project.company_id = data.company_id
        project.slug = await unique_slug(self.db, Project, data.title, exclude_id=exclude_id)

    async def _sync_relations(
        self, project: Project, data: ProjectIn, changes: StorageChangeSet
    ) -> Result[Project]:
        tags = await self.tags.sync_tags(data.tags)
        if tags.is_failure:
            return tags
        # La tabla de asociación tiene PK compuesta: un tag repetido se asocia una vez
        project.tags = list({id(tag): tag for tag in tags.unwrap()}.values())

        images = await self.images.sync_images(project, data.images, changes)
        if images.is_failure:
            return images

        repositories = await self.repositories.sync_repositories(project, data.repositories)
        if repositories.is_failure:
            return repositories

        return ok(project)

    async def _company_exists(self, company_id: Optional[int]) -> bool:
        if company_id is None:
            return True
        return await self.db.get(Company, company_id) is not None

    async def _reload(self, project_id: int) -> Result[Project]:
        project = await repo.get_project_by_id(self.db, project_id, FULL, refresh=True)
        if project is None:
            return not_found(PROJECT_NOT_FOUND)
        return ok(project)


__all__ = ["ProjectService", "PROJECT_NOT_FOUND", "PROJECT_CONFLICT"]

# Fin del archivo backend/showcase/modules/projects/services/project_service.py
