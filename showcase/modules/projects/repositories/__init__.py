# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/repositories/__init__.py
"""

from . import project_repository
from .project_repository import BARE, FULL, ProjectLoad

__all__ = ["project_repository", "ProjectLoad", "BARE", "FULL"]
