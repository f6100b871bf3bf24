# -*- coding: utf-8 -*-
"""
backend/showcase/shared/storage/change_set.py

Registro de efectos sobre archivos durante una transacción de BD.

- created:  archivos escritos en esta operación → se borran si hay rollback
- released: archivos de filas eliminadas/reemplazadas → se borran tras commit

Autor: Equipo Showcase
Fecha: 2026-10-04
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from showcase.shared.storage.file_storage import LocalFileStorage


@dataclass
class StorageChangeSet:
    storage: LocalFileStorage
    created: list[str] = field(default_factory=list)
    released: list[str] = field(default_factory=list)

    def track_created(self, name: str) -> None:
        self.created.append(name)

    def release(self, name: Optional[str]) -> None:
        if name:
            self.released.append(name)

    def apply(self) -> None:
        """Tras commit: borra los archivos liberados (ya ninguna fila los referencia)."""
        for name in self.released:
            self.storage.delete(name)
        self.created.clear()
        self.released.clear()

    def discard(self) -> None:
        """Tras rollback: borra los archivos nuevos; los liberados siguen vigentes."""
        for name in self.created:
            self.storage.delete(name)
        self.created.clear()
        self.released.clear()


__all__ = ["StorageChangeSet"]

# Fin del archivo backend/showcase/shared/storage/change_set.py
