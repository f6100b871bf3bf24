# -*- coding: utf-8 -*-
"""
backend/showcase/__init__.py

Paquete principal del backend Showcase (portafolio y experiencia laboral).

Autor: Equipo Showcase
Fecha: 2026-10-02
"""

__version__ = "1.0.0"

# Fin del archivo backend/showcase/__init__.py
