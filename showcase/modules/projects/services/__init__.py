# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/services/__init__.py
"""

from .sync import SyncPlan, plan_sync, apply_order
from .project_image_service import ProjectImageService
from .project_repository_service import ProjectRepositoryService
from .project_service import ProjectService, PROJECT_NOT_FOUND, PROJECT_CONFLICT

__all__ = [
    "SyncPlan",
    "plan_sync",
    "apply_order",
    "ProjectImageService",
    "ProjectRepositoryService",
    "ProjectService",
    "PROJECT_NOT_FOUND",
    "PROJECT_CONFLICT",
]
