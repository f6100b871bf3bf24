# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/services/project_image_service.py

Imágenes de proyecto: lectura y sincronización contra una lista objetivo.

Reglas de la sincronización:
1. Hijos actuales ausentes en el objetivo → se eliminan (archivo liberado).
2. Objetivos sin id → se crean. Si la categoría es de ocupación única
   (Logo, Banner, Card) primero se elimina la imagen existente de esa
   categoría, incluida una creada antes en la misma llamada (gana la última).
3. Objetivos con id → se conserva el hijo y solo se actualiza `order`.
4. Un fallo al guardar un archivo aborta la sincronización completa
   (BAD_REQUEST); el llamador hace rollback.

La optimización (Tinify) es best-effort: si falla se guarda el original
con is_optimised = False.

Autor: Equipo Showcase
Fecha: 2026-10-08
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from showcase.shared.database import commit_or_rollback
from showcase.shared.integrations import ImageOptimizer
from showcase.shared.results import Result, bad_request, not_found, ok
from showcase.shared.storage import LocalFileStorage, StorageChangeSet
from showcase.observability import record_image_optimisation
from showcase.modules.projects.models import Project, ProjectImage, image_sort_key
from showcase.modules.projects.repositories import ProjectLoad, project_repository as repo
from showcase.modules.projects.schemas import ProjectImageIn
from showcase.modules.projects.services.sync import apply_order, plan_sync

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = "Project not found."
IMAGE_NOT_FOUND = "Project image not found."


class ProjectImageService:
    def __init__(
        self,
        db: AsyncSession,
        storage: LocalFileStorage,
        optimizer: Optional[ImageOptimizer] = None,
    ):
        self.db = db
        self.storage = storage
        self.optimizer = optimizer

    # ---- Lecturas ----

    async def get_project_images(self, project_id: int) -> Result[List[ProjectImage]]:
        if not await repo.project_exists(self.db, project_id):
            return not_found(PROJECT_NOT_FOUND)
        return ok(await repo.list_project_images(self.db, project_id))

    async def get_project_image(self, project_id: int, image_id: int) -> Result[ProjectImage]:
        image = await repo.get_project_image(self.db, project_id, image_id)
        if image is None:
            return not_found(IMAGE_NOT_FOUND)
        return ok(image)

    # ---- Sincronización ----

    async def sync_project_images(
        self, project_id: int, targets: Sequence[ProjectImageIn]
    ) -> Result[List[ProjectImage]]:
        """Sincroniza las imágenes de un proyecto en su propia transacción."""
        changes = StorageChangeSet(self.storage)

        async def _work() -> Result[List[ProjectImage]]:
            project = await repo.get_project_by_id(self.db, project_id, ProjectLoad(images=True))
            if project is None:
                return not_found(PROJECT_NOT_FOUND)
            return await self.sync_images(project, targets, changes)

        return await commit_or_rollback(self.db, _work, changes)

    async def sync_images(
        self,
        project: Project,
        targets: Sequence[ProjectImageIn],
        changes: StorageChangeSet,
    ) -> Result[List[ProjectImage]]:
        """
        Reconcilia `project.images` (ya cargadas) con `targets` sin hacer commit.

        Returns:
            Success con las imágenes resultantes en orden de lectura,
            o Failure BAD_REQUEST si un archivo nuevo no pudo guardarse.
        """
        plan = plan_sync(list(project.images), targets)

        for image in plan.to_delete:
            self._remove(project, image, changes)

        apply_order(plan.to_keep)

        for target in plan.to_create:
            if target.type.is_single_occupancy:
                for existing in [i for i in project.images if i.type == target.type]:
                    logger.info(
                        "[images] project=%s reemplaza %s id=%s", project.id, target.type, existing.id
                    )
                    self._remove(project, existing, changes)

            stored = await self._store(target, changes)
            if stored.is_failure:
                return stored
            name, optimised = stored.unwrap()

            project.images.append(
                ProjectImage(
                    image=name,
                    type=target.type,
                    order=target.order,
                    is_optimised=optimised,
                )
            )

        await self.db.flush()
        return ok(sorted(project.images, key=image_sort_key))

    def release_all(self, project: Project, changes: StorageChangeSet) -> None:
        """Marca para borrado (tras commit) los archivos de todas las imágenes."""
        for image in project.images:
            changes.release(image.image)

    # ---- helpers ----

    def _remove(self, project: Project, image: ProjectImage, changes: StorageChangeSet) -> None:
        # delete-orphan: quitarla de la colección basta para borrar la fila en el flush
        project.images.remove(image)
        changes.release(image.image)

    async def _store(
        self, target: ProjectImageIn, changes: StorageChangeSet
    ) -> Result[Tuple[str, bool]]:
        if not target.image:
            return bad_request("An image file is required for new images.")

        data, optimised = await self._optimise(target.image)
        saved = await self.storage.save(data, target.filename)
        if saved.is_failure:
            return saved
        name = saved.unwrap()
        changes.track_created(name)
        return ok((name, optimised))

    async def _optimise(self, data: bytes) -> Tuple[bytes, bool]:
        if self.optimizer is None:
            record_image_optimisation("disabled")
            return data, False
        result = await self.optimizer.optimise(data)
        if result.is_failure:
            logger.info("[images] se guarda sin optimizar: %s", result.message)
            record_image_optimisation("fallback")
            return data, False
        record_image_optimisation("optimised")
        return result.unwrap(), True


__all__ = ["ProjectImageService", "PROJECT_NOT_FOUND", "IMAGE_NOT_FOUND"]

# Fin del archivo backend/showcase/modules/projects/services/project_image_service.py
