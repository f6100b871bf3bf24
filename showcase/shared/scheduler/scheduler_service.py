# -*- coding: utf-8 -*-
"""
backend/showcase/shared/scheduler/scheduler_service.py

Servicio de programación de tareas periódicas usando APScheduler.
Hoy solo aloja el job de mantenimiento (slugs + optimización de imágenes).

Autor: Equipo Showcase
Fecha: 2026-10-05
"""

import logging
from typing import Callable, Optional

from apscheduler.executors.asyncio import AsyncIOExecutor
from apscheduler.jobstores.memory import MemoryJobStore
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger(__name__)


class SchedulerService:
    """Envoltura mínima sobre AsyncIOScheduler."""

    def __init__(self):
        self._scheduler = AsyncIOScheduler(
            jobstores={"default": MemoryJobStore()},
            executors={"default": AsyncIOExecutor()},
            job_defaults={
                "coalesce": True,  # Combinar ejecuciones perdidas
                "max_instances": 1,  # Una instancia por job
                "misfire_grace_time": 30,
            },
            timezone="UTC",
        )
        self._started = False

    def start(self):
        if not self._started:
            self._scheduler.start()
            self._started = True
            logger.info("SchedulerService iniciado")

    def shutdown(self, wait: bool = True):
        """
        Detiene el scheduler.

        Args:
            wait: Si True, espera a que terminen los jobs en ejecución
        """
        if self._started:
            self._scheduler.shutdown(wait=wait)
            self._started = False
            logger.info("SchedulerService detenido")

    def add_interval_job(self, func: Callable, job_id: str, minutes: int, **kwargs) -> str:
        """
        Agrega (o reemplaza) un job que se ejecuta cada `minutes` minutos.

        Returns:
            ID del job agregado
        """
        self._scheduler.add_job(
            func=func,
            trigger=IntervalTrigger(minutes=minutes),
            id=job_id,
            name=job_id,
            replace_existing=True,
            kwargs=kwargs,
        )
        logger.info("Job '%s' agregado: cada %s min", job_id, minutes)
        return job_id

    def remove_job(self, job_id: str) -> bool:
        try:
            self._scheduler.remove_job(job_id)
        except JobLookupError:
            logger.warning("Job '%s' no existe", job_id)
            return False
        logger.info("Job '%s' eliminado", job_id)
        return True

    def get_jobs(self) -> list[dict]:
        return [
            {
                "id": job.id,
                "name": job.name,
                "next_run": job.next_run_time,
                "trigger": str(job.trigger),
            }
            for job in self._scheduler.get_jobs()
        ]

    @property
    def is_running(self) -> bool:
        return self._started and self._scheduler.running


# Singleton global del scheduler
_scheduler_instance: Optional[SchedulerService] = None


def get_scheduler() -> SchedulerService:
    """Obtiene la instancia global del scheduler (singleton)."""
    global _scheduler_instance
    if _scheduler_instance is None:
        _scheduler_instance = SchedulerService()
    return _scheduler_instance


__all__ = ["SchedulerService", "get_scheduler"]

# Fin del archivo backend/showcase/shared/scheduler/scheduler_service.py
