# -*- coding: utf-8 -*-
"""
backend/showcase/modules/companies/models/__init__.py
"""

from .company_models import Company

__all__ = ["Company"]
