# -*- coding: utf-8 -*-
"""
backend/showcase/shared/middleware/request_logging.py

Una línea de log por request terminado, con nivel según el resultado:
5xx → ERROR, 4xx → WARNING, lento (> slow_ms) → WARNING, resto → INFO.
/health, /metrics y /media se omiten por volumen.

Autor: Equipo Showcase
Fecha: 2026-10-05
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .exception_handler import get_request_id

logger = logging.getLogger(__name__)

QUIET_PREFIXES = ("/health", "/metrics", "/media/", "/favicon.ico")


def _level_for(status: int, duration_ms: float, slow_ms: float) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400 or duration_ms > slow_ms:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, quiet_prefixes: Sequence[str] = QUIET_PREFIXES, slow_ms: float = 1000.0):
        super().__init__(app)
        self.quiet_prefixes = tuple(quiet_prefixes)
        self.slow_ms = slow_ms

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if path.startswith(self.quiet_prefixes):
            return await call_next(request)

        request_id = getattr(request.state, "request_id", None) or get_request_id(request)
        request.state.request_id = request_id

        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.log(
                _level_for(status, duration_ms, self.slow_ms),
                "request_completed request_id=%s method=%s path=%s status=%d duration_ms=%.2f",
                request_id, request.method, path, status, duration_ms,
            )

        return response


__all__ = ["RequestLoggingMiddleware"]

# Fin del archivo backend/showcase/shared/middleware/request_logging.py
