# -*- coding: utf-8 -*-
"""
backend/showcase/modules/maintenance/__init__.py

Pasadas de mantenimiento (slugs faltantes, optimización de imágenes) y
su job programado.
"""
