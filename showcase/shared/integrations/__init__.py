# -*- coding: utf-8 -*-
"""
backend/showcase/shared/integrations/__init__.py

Integraciones con servicios externos.
"""

from .image_optimizer import ImageOptimizer, TinifyImageOptimizer

__all__ = ["ImageOptimizer", "TinifyImageOptimizer"]
