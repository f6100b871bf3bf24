# -*- coding: utf-8 -*-
"""
backend/showcase/shared/scheduler/__init__.py

Jobs programados usando APScheduler.

Autor: Equipo Showcase
Fecha: 2026-10-05
"""

from .scheduler_service import SchedulerService, get_scheduler

__all__ = [
    "SchedulerService",
    "get_scheduler",
]
