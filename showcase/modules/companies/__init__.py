# -*- coding: utf-8 -*-
"""
backend/showcase/modules/companies/__init__.py

Módulo de compañías (experiencia laboral).
"""
