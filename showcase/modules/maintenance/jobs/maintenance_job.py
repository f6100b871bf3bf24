# -*- coding: utf-8 -*-
"""
backend/showcase/modules/maintenance/jobs/maintenance_job.py

Job programado que ejecuta las dos pasadas de mantenimiento:
asignación de slugs faltantes y optimización de imágenes pendientes.

Se registra solo si MAINTENANCE_INTERVAL_MINUTES > 0. La optimización se
omite cuando no hay TINIFY_API_KEY.

Autor: Equipo Showcase
Fecha: 2026-10-12
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError

from showcase.shared.database import session_scope
from showcase.shared.dependencies import get_file_storage, get_image_optimizer
from showcase.modules.maintenance.services import MaintenanceService

logger = logging.getLogger(__name__)

JOB_ID = "maintenance_interval"


async def run_maintenance() -> Dict[str, Any]:
    """
    Returns:
        Dict con los resúmenes de cada pasada (o el error de BD)
    """
    started = datetime.now(timezone.utc)
    summary: Dict[str, Any] = {"timestamp": started.isoformat()}
    optimizer = get_image_optimizer()

    try:
        async with session_scope() as db:
            service = MaintenanceService(db, get_file_storage(), optimizer)

            slugs = await service.backfill_slugs()
            summary["slugs"] = slugs.unwrap() if slugs.is_success else slugs.message

            if optimizer is not None:
                images = await service.optimise_images()
                summary["optimised"] = images.unwrap() if images.is_success else images.message
    except SQLAlchemyError as e:
        logger.error("[maintenance_job] error de BD: %s", e, exc_info=True)
        summary["error"] = str(e)
        return summary

    elapsed_ms = (datetime.now(timezone.utc) - started).total_seconds() * 1000
    summary["duration_ms"] = round(elapsed_ms, 2)
    logger.info("[maintenance_job] %s", summary)
    return summary


def register_maintenance_job(scheduler, minutes: int) -> str:
    """
    Registra el job en el scheduler (intervalo desde el arranque del proceso).

    Args:
        scheduler: Instancia de SchedulerService
        minutes: Intervalo en minutos

    Returns:
        ID del job registrado
    """
    scheduler.add_interval_job(func=run_maintenance, job_id=JOB_ID, minutes=minutes)
    logger.info("[maintenance_job] Job '%s' registrado: cada %d min", JOB_ID, minutes)
    return JOB_ID


__all__ = ["run_maintenance", "register_maintenance_job", "JOB_ID"]

# Fin del archivo backend/showcase/modules/maintenance/jobs/maintenance_job.py
