# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/services/project_repository_service.py

Repositorios de código de un proyecto: lectura y sincronización.

Misma mecánica que las imágenes pero sin ocupación única ni archivos:
title + url son la carga útil de un repositorio nuevo.

Autor: Equipo Showcase
Fecha: 2026-10-08
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from showcase.shared.database import commit_or_rollback
from showcase.shared.results import Result, bad_request, not_found, ok
from showcase.modules.projects.models import Project, ProjectRepository, repository_sort_key
from showcase.modules.projects.repositories import ProjectLoad, project_repository as repo
from showcase.modules.projects.schemas import ProjectRepositoryIn
from showcase.modules.projects.services.sync import apply_order, plan_sync

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = "Project not found."
REPOSITORY_NOT_FOUND = "Project repository not found."


class ProjectRepositoryService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_project_repositories(self, project_id: int) -> Result[List[ProjectRepository]]:
        if not await repo.project_exists(self.db, project_id):
            return not_found(PROJECT_NOT_FOUND)
        return ok(await repo.list_project_repositories(self.db, project_id))

    async def get_project_repository(self, project_id: int, repository_id: int) -> Result[ProjectRepository]:
        repository = await repo.get_project_repository(self.db, project_id, repository_id)
        if repository is None:
            return not_found(REPOSITORY_NOT_FOUND)
        return ok(repository)

    async def sync_project_repositories(
        self, project_id: int, targets: Sequence[ProjectRepositoryIn]
    ) -> Result[List[ProjectRepository]]:
        async def _work() -> Result[List[ProjectRepository]]:
            project = await repo.get_project_by_id(self.db, project_id, ProjectLoad(repositories=True))
            if project is None:
                return not_found(PROJECT_NOT_FOUND)
            return await self.sync_repositories(project, targets)

        return await commit_or_rollback(self.db, _work)

    async def sync_repositories(
        self, project: Project, targets: Sequence[ProjectRepositoryIn]
    ) -> Result[List[ProjectRepository]]:
        """Reconcilia `project.repositories` (ya cargados) con `targets` sin hacer commit."""
        plan = plan_sync(list(project.repositories), targets)

        for repository in plan.to_delete:
            project.repositories.remove(repository)

        apply_order(plan.to_keep)

        for target in plan.to_create:
            if not target.title or not target.url:
                return bad_request("Repository title and url are required.")
            project.repositories.append(
                ProjectRepository(title=target.title, url=target.url, order=target.order)
            )

        await self.db.flush()
        if plan.to_delete or plan.to_create:
            logger.debug(
                "[repositories] project=%s -%d +%d",
                project.id, len(plan.to_delete), len(plan.to_create),
            )
        return ok(sorted(project.repositories, key=repository_sort_key))


__all__ = ["ProjectRepositoryService", "REPOSITORY_NOT_FOUND"]

# Fin del archivo backend/showcase/modules/projects/services/project_repository_service.py
