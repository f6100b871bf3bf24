# -*- coding: utf-8 -*-
"""
backend/showcase/modules/media/routes/media_routes.py

Sirve los archivos guardados por LocalFileStorage (imágenes de proyecto y
logos de compañía).

Autor: Equipo Showcase
Fecha: 2026-10-11
"""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from showcase.shared.dependencies import get_file_storage
from showcase.shared.storage import LocalFileStorage
from showcase.shared.utils import NotFoundException

router = APIRouter(prefix="/media", tags=["media"])

FILE_NOT_FOUND = "File not found."


@router.get("/uploads/{file_name}", summary="Descargar archivo subido")
async def get_upload(file_name: str, storage: LocalFileStorage = Depends(get_file_storage)):
    try:
        path = storage.path_for(file_name)
    except ValueError:
        raise NotFoundException(FILE_NOT_FOUND)
    if not path.is_file():
        raise NotFoundException(FILE_NOT_FOUND)
    return FileResponse(path)

# Fin del archivo backend/showcase/modules/media/routes/media_routes.py
