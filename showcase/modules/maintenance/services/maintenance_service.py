# -*- coding: utf-8 -*-
"""
backend/showcase/modules/maintenance/services/maintenance_service.py

Pasadas de mantenimiento idempotentes:

- backfill_slugs(): asigna slug a tags, compañías y proyectos que no lo tengan.
- optimise_images(): optimiza (Tinify) las imágenes con is_optimised = False.

Pueden correr junto al tráfico normal: las actualizaciones de fila son
last-write-wins y cada imagen se confirma por separado.

Autor: Equipo Showcase
Fecha: 2026-10-10
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.shared.database import commit_or_rollback
from showcase.shared.integrations import ImageOptimizer
from showcase.shared.results import Result, bad_request, ok
from showcase.shared.storage import LocalFileStorage, StorageChangeSet
from showcase.shared.utils.slug import unique_slug
from showcase.observability import record_maintenance
from showcase.modules.companies.models import Company
from showcase.modules.projects.models import Project, ProjectImage
from showcase.modules.projects.repositories import project_repository as repo
from showcase.modules.tags.models import Tag

logger = logging.getLogger(__name__)

# (clave del resumen, modelo, atributo fuente del slug)
_SLUGGED = (
    ("tags", Tag, "title"),
    ("companies", Company, "name"),
    ("projects", Project, "title"),
)


class MaintenanceService:
    def __init__(
        self,
        db: AsyncSession,
        storage: LocalFileStorage,
        optimizer: Optional[ImageOptimizer] = None,
    ):
        self.db = db
        self.storage = storage
        self.optimizer = optimizer

    async def backfill_slugs(self) -> Result[Dict[str, int]]:
        """
        Returns:
            Success({"tags": n, "companies": n, "projects": n}) con las filas actualizadas
        """
        async def _work() -> Result[Dict[str, int]]:
            summary: Dict[str, int] = {}
            for key, model, source in _SLUGGED:
                rows = (
                    await self.db.execute(
                        select(model)
                        .where(or_(model.slug.is_(None), model.slug == ""))
                        .order_by(model.id)
                    )
                ).scalars().all()
                for row in rows:
                    row.slug = await unique_slug(self.db, model, getattr(row, source), exclude_id=row.id)
                    # flush por fila: la siguiente consulta de unique_slug debe verla
                    await self.db.flush()
                summary[key] = len(rows)
            return ok(summary)

        result = await commit_or_rollback(self.db, _work)
        if result.is_success:
            logger.info("[maintenance] slugs asignados: %s", result.unwrap())
            record_maintenance("slugs", sum(result.unwrap().values()))
        return result

    async def optimise_images(self) -> Result[int]:
        """
        Optimiza cada imagen pendiente y la confirma por separado.
        Las imágenes sin archivo o cuyo optimizado falla se omiten.

        Returns:
            Success(número de imágenes optimizadas) o BAD_REQUEST si no hay optimizador
        """
        if self.optimizer is None:
            return bad_request("Image optimisation is not configured.")

        optimised = 0
        for image in await repo.list_unoptimised_images(self.db):
            result = await self._optimise_one(image)
            if result.is_success and result.unwrap():
                optimised += 1

        logger.info("[maintenance] imágenes optimizadas: %d", optimised)
        record_maintenance("images", optimised)
        return ok(optimised)

    async def _optimise_one(self, image: ProjectImage) -> Result[bool]:
        changes = StorageChangeSet(self.storage)

        async def _work() -> Result[bool]:
            original = await self.storage.read(image.image)
            if original.is_failure:
                logger.warning("[maintenance] imagen id=%s sin archivo (%s)", image.id, image.image)
                return ok(False)

            shrunk = await self.optimizer.optimise(original.unwrap())
            if shrunk.is_failure:
                logger.warning("[maintenance] imagen id=%s no optimizada: %s", image.id, shrunk.message)
                return ok(False)

            saved = await self.storage.save(shrunk.unwrap(), image.image)
            if saved.is_failure:
                logger.warning("[maintenance] imagen id=%s: %s", image.id, saved.message)
                return ok(False)
            changes.track_created(saved.unwrap())
            changes.release(image.image)

            image.image = saved.unwrap()
            image.is_optimised = True
            await self.db.flush()
            return ok(True)

        return await commit_or_rollback(self.db, _work, changes)


__all__ = ["MaintenanceService"]

# Fin del archivo backend/showcase/modules/maintenance/services/maintenance_service.py
