# -*- coding: utf-8 -*-
"""
backend/showcase/shared/integrations/image_optimizer.py

Cliente de optimización de imágenes contra la API HTTP de Tinify.

Flujo:
    1. POST {api_url}/shrink con los bytes originales (basic auth api:<key>)
    2. 201 + header Location → GET Location con la misma auth
    3. El cuerpo del GET son los bytes optimizados

La optimización es best-effort: cualquier fallo se devuelve como Failure
y el llamador guarda la imagen original (is_optimised = False).

Usa httpx async para no bloquear el event loop.

Autor: Equipo Showcase
Fecha: 2026-10-04
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx

from showcase.shared.results import Result, bad_request, ok

logger = logging.getLogger(__name__)


class ImageOptimizer(Protocol):
    async def optimise(self, data: bytes) -> Result[bytes]: ...


class TinifyImageOptimizer:
    """Optimiza imágenes vía Tinify; deshabilitado si no hay API key."""

    def __init__(
        self,
        api_key: str,
        api_url: str = "https://api.tinify.com",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def optimise(self, data: bytes) -> Result[bytes]:
        if not self.enabled:
            return bad_request("Image optimisation is not configured.")
        if not data:
            return bad_request("The image is empty.")

        auth = httpx.BasicAuth("api", self.api_key)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, auth=auth, transport=self._transport
            ) as client:
                shrink = await client.post(f"{self.api_url}/shrink", content=data)
                if shrink.status_code != 201:
                    logger.warning("[tinify] shrink HTTP %s", shrink.status_code)
                    return bad_request("The image could not be optimised.")

                location = shrink.headers.get("Location")
                if not location:
                    logger.warning("[tinify] respuesta sin Location")
                    return bad_request("The image could not be optimised.")

                output = await client.get(location)
                if output.status_code != 200:
                    logger.warning("[tinify] output HTTP %s", output.status_code)
                    return bad_request("The image could not be optimised.")

        except httpx.HTTPError as e:
            logger.warning("[tinify] error de transporte: %s", e)
            return bad_request("The image could not be optimised.")

        logger.debug("[tinify] %d → %d bytes", len(data), len(output.content))
        return ok(output.content)


__all__ = ["ImageOptimizer", "TinifyImageOptimizer"]

# Fin del archivo backend/showcase/shared/integrations/image_optimizer.py
