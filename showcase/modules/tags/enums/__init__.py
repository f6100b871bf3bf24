# -*- coding: utf-8 -*-
"""
backend/showcase/modules/tags/enums/__init__.py
"""

from .tag_type_enum import TagType

__all__ = ["TagType"]
