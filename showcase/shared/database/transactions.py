# -*- coding: utf-8 -*-
"""
backend/showcase/shared/database/transactions.py

Frontera transaccional única para operaciones de servicio.

commit_or_rollback(db, work, changes) ejecuta `work()` y:
- Success  → commit; después aplica el StorageChangeSet (borra archivos liberados)
- Failure  → rollback; descarta archivos escritos durante la operación
- excepción → rollback; descarta archivos escritos; re-lanza

Así una operación de agregado (proyecto + imágenes + repositorios + tags)
es atómica: o se confirma completa o no queda nada visible.

Autor: Equipo Showcase
Fecha: 2026-10-03
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Optional, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from showcase.shared.results import Failure, Result

if TYPE_CHECKING:
    from showcase.shared.storage.change_set import StorageChangeSet

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def commit_or_rollback(
    db: AsyncSession,
    work: Callable[[], Awaitable[Result[T]]],
    changes: Optional["StorageChangeSet"] = None,
) -> Result[T]:
    """
    Ejecuta work() dentro de un contexto transaccional.

    Args:
        db: AsyncSession
        work: Corrutina que devuelve un Result
        changes: Archivos creados/liberados durante work()

    Returns:
        El Result de work()

    Raises:
        Cualquier excepción lanzada por work() o por el commit
    """
    try:
        result = await work()
        if isinstance(result, Failure):
            await db.rollback()
            if changes is not None:
                changes.discard()
            logger.debug("[TX] rollback por %s: %s", result.error_type, result.message)
            return result
        await db.commit()
    except Exception:
        await db.rollback()
        if changes is not None:
            changes.discard()
        raise

    if changes is not None:
        changes.apply()
    return result


__all__ = ["commit_or_rollback"]
# Fin del archivo backend/showcase/shared/database/transactions.py
