# -*- coding: utf-8 -*-
"""
backend/showcase/shared/storage/__init__.py

Almacenamiento de archivos subidos.
"""

from .file_storage import LocalFileStorage
from .change_set import StorageChangeSet

__all__ = ["LocalFileStorage", "StorageChangeSet"]
