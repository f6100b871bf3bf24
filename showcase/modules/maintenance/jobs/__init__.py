# -*- coding: utf-8 -*-
"""
backend/showcase/modules/maintenance/jobs/__init__.py

Jobs programados de mantenimiento.
"""

from .maintenance_job import run_maintenance, register_maintenance_job

__all__ = ["run_maintenance", "register_maintenance_job"]
