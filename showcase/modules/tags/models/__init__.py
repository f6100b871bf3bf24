# -*- coding: utf-8 -*-
"""
backend/showcase/modules/tags/models/__init__.py
"""

from .tag_models import Tag, project_tags

__all__ = ["Tag", "project_tags"]
