# -*- coding: utf-8 -*-
"""
backend/showcase/modules/maintenance/routes/maintenance_routes.py

Disparadores manuales de las pasadas de mantenimiento:

- POST /maintenance/slugs          → asigna slugs faltantes
- PUT  /project-images/optimise    → optimiza imágenes pendientes

Autor: Equipo Showcase
Fecha: 2026-10-11
"""

from typing import Dict, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.shared.database import get_db
from showcase.shared.dependencies import get_file_storage, get_image_optimizer
from showcase.shared.integrations import ImageOptimizer
from showcase.shared.storage import LocalFileStorage
from showcase.shared.utils import unwrap_or_raise
from showcase.modules.maintenance.services import MaintenanceService

router = APIRouter(tags=["maintenance"])


async def get_maintenance_service(
    db: AsyncSession = Depends(get_db),
    storage: LocalFileStorage = Depends(get_file_storage),
    optimizer: Optional[ImageOptimizer] = Depends(get_image_optimizer),
) -> MaintenanceService:
    return MaintenanceService(db, storage, optimizer)


@router.post("/maintenance/slugs", summary="Asignar slugs faltantes")
async def backfill_slugs(service: MaintenanceService = Depends(get_maintenance_service)) -> Dict[str, int]:
    return unwrap_or_raise(await service.backfill_slugs())


@router.put("/project-images/optimise", summary="Optimizar imágenes pendientes")
async def optimise_images(service: MaintenanceService = Depends(get_maintenance_service)) -> Dict[str, int]:
    return {"optimised": unwrap_or_raise(await service.optimise_images())}

# Fin del archivo backend/showcase/modules/maintenance/routes/maintenance_routes.py
