# -*- coding: utf-8 -*-
"""
backend/showcase/shared/utils/slug.py

Generación de slugs URL-safe a partir de títulos/nombres.

- to_slug(): transformación pura y determinista.
- unique_slug(): variante async que consulta la tabla para evitar colisiones
  ("mi-proyecto", "mi-proyecto-2", ...).

Autor: Equipo Showcase
Fecha: 2026-10-03
"""

from __future__ import annotations

import re
import secrets
import unicodedata
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

_WHITESPACE = re.compile(r"\s+")
_INVALID = re.compile(r"[^a-z0-9_-]")
_REPEATED_SEPARATORS = re.compile(r"([-_])[-_]+")


def to_slug(text: Optional[str]) -> str:
    """
    Convierte un texto en slug.

    Reglas:
        1. minúsculas y sin diacríticos ("Canción" → "cancion")
        2. espacios → "-"
        3. se descarta todo lo que no sea [a-z0-9_-]
        4. sin separadores al inicio/fin
        5. rachas de separadores se colapsan al primero ("a--_b" → "a-b")

    Es idempotente: to_slug(to_slug(x)) == to_slug(x).
    """
    if not text:
        return ""
    value = unicodedata.normalize("NFKD", text.lower())
    value = "".join(ch for ch in value if not unicodedata.combining(ch))
    value = _WHITESPACE.sub("-", value)
    value = _INVALID.sub("", value)
    value = _REPEATED_SEPARATORS.sub(r"\1", value)
    return value.strip("-_")


async def unique_slug(
    db: AsyncSession,
    model: Any,
    text: Optional[str],
    exclude_id: Optional[int] = None,
) -> str:
    """
    Devuelve un slug libre en la tabla de `model` (columna `slug`).

    Args:
        db: AsyncSession
        model: Modelo ORM con columnas `id` y `slug`
        text: Título/nombre de origen
        exclude_id: Fila que se está actualizando (su propio slug no cuenta)

    Returns:
        Slug no vacío y no usado por otra fila
    """
    base = to_slug(text) or secrets.token_hex(4)

    stmt = select(model.slug).where(
        (model.slug == base) | model.slug.like(f"{base}-%")
    )
    if exclude_id is not None:
        stmt = stmt.where(model.id != exclude_id)
    taken = set((await db.execute(stmt)).scalars().all())

    if base not in taken:
        return base
    n = 2
    while f"{base}-{n}" in taken:
        n += 1
    return f"{base}-{n}"


__all__ = ["to_slug", "unique_slug"]

# Fin del archivo backend/showcase/shared/utils/slug.py
