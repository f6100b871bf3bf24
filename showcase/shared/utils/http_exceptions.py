# -*- coding: utf-8 -*-
"""
backend/showcase/shared/utils/http_exceptions.py

Excepciones HTTP de la API y traducción de Result → respuesta HTTP.

    NOT_FOUND    → 404
    CONFLICT     → 409
    BAD_REQUEST  → 400
    UNAUTHORIZED → 401
    FORBIDDEN    → 403

Autor: Equipo Showcase
Fecha: 2026-10-03
"""

from typing import Any, Dict, Optional, TypeVar

from fastapi import HTTPException, status

from showcase.shared.results import ErrorType, Failure, Result

T = TypeVar("T")


class BadRequestException(HTTPException):
    """400 - Solicitud mal formada o parámetros inválidos"""
    def __init__(self, detail: str = "Bad request.", headers: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail, headers=headers)


class UnauthorizedException(HTTPException):
    """401 - Autenticación requerida"""
    def __init__(self, detail: str = "Unauthorized.", headers: Optional[Dict[str, Any]] = None):
        if headers is None:
            headers = {"WWW-Authenticate": "Bearer"}
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail, headers=headers)


class ForbiddenException(HTTPException):
    """403 - Autenticado pero sin permisos"""
    def __init__(self, detail: str = "Forbidden.", headers: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail, headers=headers)


class NotFoundException(HTTPException):
    """404 - Recurso no encontrado"""
    def __init__(self, detail: str = "Not found.", headers: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail, headers=headers)


class ConflictException(HTTPException):
    """409 - Conflicto con el estado actual del recurso"""
    def __init__(self, detail: str = "Conflict.", headers: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail, headers=headers)


_EXCEPTION_BY_ERROR_TYPE: Dict[ErrorType, type[HTTPException]] = {
    ErrorType.NOT_FOUND: NotFoundException,
    ErrorType.CONFLICT: ConflictException,
    ErrorType.BAD_REQUEST: BadRequestException,
    ErrorType.UNAUTHORIZED: UnauthorizedException,
    ErrorType.FORBIDDEN: ForbiddenException,
}


def exception_for(failure: Failure) -> HTTPException:
    """Construye la HTTPException que corresponde a un Failure."""
    exc_cls = _EXCEPTION_BY_ERROR_TYPE[failure.error_type]
    return exc_cls(detail=failure.message)


def unwrap_or_raise(result: Result[T]) -> T:
    """
    Devuelve el valor de un Success o lanza la HTTPException equivalente.

    Raises:
        HTTPException: 400/401/403/404/409 según el ErrorType del Failure
    """
    if isinstance(result, Failure):
        raise exception_for(result)
    return result.value


__all__ = [
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "exception_for",
    "unwrap_or_raise",
]

# Fin del archivo backend/showcase/shared/utils/http_exceptions.py
