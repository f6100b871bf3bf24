# -*- coding: utf-8 -*-
"""
backend/showcase/shared/storage/file_storage.py

Almacenamiento local de archivos subidos (imágenes de proyecto y logos).

Los archivos se guardan como `<uuid4 hex><ext>` dentro de `base_dir`;
las filas de BD solo guardan ese nombre. La E/S de disco se ejecuta en un
hilo (anyio.to_thread) para no bloquear el event loop.

Autor: Equipo Showcase
Fecha: 2026-10-04
"""

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path
from typing import Optional

import anyio

from showcase.shared.results import Result, bad_request, not_found, ok

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".png"


class LocalFileStorage:
    """Guarda, lee y borra archivos bajo un directorio base."""

    def __init__(self, base_dir: str | os.PathLike[str]):
        self.base_dir = Path(base_dir).resolve()

    # ---- helpers ----

    def path_for(self, name: str) -> Path:
        """
        Ruta absoluta de un archivo almacenado.

        Raises:
            ValueError: Si el nombre intenta salir de base_dir
        """
        candidate = (self.base_dir / name).resolve()
        if candidate.parent != self.base_dir:
            raise ValueError(f"Nombre de archivo inválido: {name!r}")
        return candidate

    @staticmethod
    def _extension(suggested_name: Optional[str]) -> str:
        ext = Path(suggested_name or "").suffix.lower()
        if not ext or len(ext) > 10 or not ext[1:].isalnum():
            return DEFAULT_EXTENSION
        return ext

    # ---- operaciones ----

    async def save(self, data: bytes, suggested_name: Optional[str] = None) -> Result[str]:
        """
        Escribe `data` en disco.

        Returns:
            Success(nombre_de_archivo) o Failure BAD_REQUEST si no se pudo escribir
        """
        if not data:
            return bad_request("The uploaded file is empty.")

        name = f"{uuid.uuid4().hex}{self._extension(suggested_name)}"
        path = self.base_dir / name

        def _write() -> None:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)

        try:
            await anyio.to_thread.run_sync(_write)
        except OSError as e:
            logger.error("[storage] no se pudo guardar %s: %s", name, e)
            return bad_request("The file could not be saved.")

        logger.debug("[storage] guardado %s (%d bytes)", name, len(data))
        return ok(name)

    async def read(self, name: str) -> Result[bytes]:
        try:
            path = self.path_for(name)
        except ValueError:
            return not_found("File not found.")
        try:
            data = await anyio.to_thread.run_sync(path.read_bytes)
        except FileNotFoundError:
            return not_found("File not found.")
        except OSError as e:
            logger.error("[storage] no se pudo leer %s: %s", name, e)
            return bad_request("The file could not be read.")
        return ok(data)

    def delete(self, name: Optional[str]) -> None:
        """Borra un archivo; no hace nada si el nombre es vacío o no existe."""
        if not name:
            return
        try:
            self.path_for(name).unlink(missing_ok=True)
        except (OSError, ValueError) as e:
            logger.warning("[storage] no se pudo borrar %s: %s", name, e)
            return
        logger.debug("[storage] borrado %s", name)


__all__ = ["LocalFileStorage"]

# Fin del archivo backend/showcase/shared/storage/file_storage.py
