# -*- coding: utf-8 -*-
"""
backend/showcase/observability/prom.py

Métricas Prometheus del backend Showcase.

- HTTP: conteo y latencia por método / plantilla de ruta / status
- Dominio: resultado de la optimización de imágenes y pasadas de mantenimiento
- GET /metrics (pull model, con soporte multiproceso si
  PROMETHEUS_MULTIPROC_DIR está definido)

Los helpers record_* se llaman desde los servicios aunque /metrics no esté
montado; prometheus_client acumula en el registry global de todas formas.

Autor: Equipo Showcase
Fecha: 2026-10-05
"""
from __future__ import annotations

import os
from time import perf_counter

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    multiprocess,
)

METRICS_PATH = "/metrics"

HTTP_REQUESTS = Counter(
    "showcase_http_requests_total",
    "Requests HTTP atendidos",
    ["method", "path", "status"],
)
HTTP_LATENCY = Histogram(
    "showcase_http_request_latency_seconds",
    "Latencia por request (s)",
    ["method", "path"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)
IMAGE_OPTIMISATIONS = Counter(
    "showcase_image_optimisations_total",
    "Imágenes procesadas por el optimizador",
    ["outcome"],  # optimised | fallback | disabled
)
MAINTENANCE_ROWS = Counter(
    "showcase_maintenance_rows_total",
    "Filas actualizadas por las pasadas de mantenimiento",
    ["task"],  # slugs | images
)


def record_image_optimisation(outcome: str) -> None:
    IMAGE_OPTIMISATIONS.labels(outcome).inc()


def record_maintenance(task: str, rows: int) -> None:
    if rows:
        MAINTENANCE_ROWS.labels(task).inc(rows)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Instrumenta cada request salvo el propio scrape de /metrics."""

    async def dispatch(self, request: Request, call_next):
        if request.url.path == METRICS_PATH:
            return await call_next(request)

        start = perf_counter()
        response = await call_next(request)
        elapsed = perf_counter() - start

        # plantilla (/projects/{project_id}) y no path real: cardinalidad acotada
        route = request.scope.get("route")
        path = getattr(route, "path", None) or "unmatched"
        HTTP_LATENCY.labels(request.method, path).observe(elapsed)
        HTTP_REQUESTS.labels(request.method, path, str(response.status_code)).inc()
        return response


def _scrape() -> bytes:
    if os.environ.get("PROMETHEUS_MULTIPROC_DIR"):
        registry = CollectorRegistry()
        multiprocess.MultiProcessCollector(registry)
        return generate_latest(registry)
    return generate_latest()


def mount_metrics(app: FastAPI, path: str = METRICS_PATH) -> None:
    """Registra el endpoint de scrape en la app."""

    @app.get(path, include_in_schema=False)
    def metrics() -> Response:
        return Response(content=_scrape(), media_type=CONTENT_TYPE_LATEST)


def setup_observability(app: FastAPI) -> None:
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)


__all__ = [
    "PrometheusMiddleware",
    "mount_metrics",
    "setup_observability",
    "record_image_optimisation",
    "record_maintenance",
]

# Fin del archivo backend/showcase/observability/prom.py
