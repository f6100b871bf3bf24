# -*- coding: utf-8 -*-
"""
backend/showcase/modules/tags/__init__.py

Módulo de tags (tecnologías) asociables a proyectos.
"""
