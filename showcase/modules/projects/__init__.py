# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/__init__.py

Módulo de proyectos del portafolio.

Este módulo gestiona:
- El agregado Proyecto (tags, imágenes, repositorios, compañía)
- Sincronización de colecciones hijas con categorías de ocupación única
- Proyectos relacionados por tags en común

Autor: Equipo Showcase
Fecha: 2026-10-05
"""

# Fin del archivo backend/showcase/modules/projects/__init__.py
