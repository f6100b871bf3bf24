# -*- coding: utf-8 -*-
"""
backend/showcase/shared/results/__init__.py

Re-exporta el tipo Result y sus constructores.

Autor: Equipo Showcase
Fecha: 2026-10-03
"""

from .result import (
    ErrorType,
    ResultError,
    Success,
    Failure,
    Result,
    ok,
    not_found,
    conflict,
    bad_request,
    unauthorized,
    forbidden,
)

__all__ = [
    "ErrorType",
    "ResultError",
    "Success",
    "Failure",
    "Result",
    "ok",
    "not_found",
    "conflict",
    "bad_request",
    "unauthorized",
    "forbidden",
]

# Fin del archivo backend/showcase/shared/results/__init__.py
