# -*- coding: utf-8 -*-
"""
backend/showcase/shared/middleware/exception_handler.py

Última red de seguridad HTTP: toda excepción que escape de una ruta se
responde como JSON con `error_code` y `request_id`.

    IntegrityError    → 409 CONFLICT       (p.ej. dos altas simultáneas con el mismo slug)
    OperationalError  → 503 DATABASE_UNAVAILABLE
    cualquier otra    → 500 INTERNAL_SERVER_ERROR

El cuerpo nunca incluye el mensaje interno de la excepción.

Autor: Equipo Showcase
Fecha: 2026-10-05
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Tuple

from sqlalchemy.exc import IntegrityError, OperationalError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADERS = ("x-request-id", "x-correlation-id")

# (tipo, status, error_code, mensaje); se evalúan en orden
_ERROR_MAP: Tuple[Tuple[type, int, str, str], ...] = (
    (IntegrityError, 409, "CONFLICT", "The request conflicts with existing data."),
    (OperationalError, 503, "DATABASE_UNAVAILABLE", "The database is temporarily unavailable."),
)


def get_request_id(request: Request) -> str:
    """request_id del header entrante o uno nuevo de 16 hex."""
    for header in REQUEST_ID_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return uuid.uuid4().hex[:16]


def _classify(exc: Exception) -> Tuple[int, str, str]:
    for exc_type, status, code, message in _ERROR_MAP:
        if isinstance(exc, exc_type):
            return status, code, message
    return 500, "INTERNAL_SERVER_ERROR", "Internal server error"


class JSONExceptionMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = get_request_id(request)
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as exc:
            status, code, message = _classify(exc)
            if status >= 500:
                logger.exception(
                    "unhandled_exception request_id=%s method=%s path=%s error=%r",
                    request_id, request.method, request.url.path, exc,
                )
            else:
                logger.warning(
                    "db_conflict request_id=%s method=%s path=%s error=%s",
                    request_id, request.method, request.url.path, type(exc).__name__,
                )
            return JSONResponse(
                status_code=status,
                content={"detail": {"error_code": code, "message": message, "request_id": request_id}},
                headers={"X-Request-ID": request_id},
            )

        response.headers["X-Request-ID"] = request_id
        return response


__all__ = ["JSONExceptionMiddleware", "get_request_id"]

# Fin del archivo backend/showcase/shared/middleware/exception_handler.py
