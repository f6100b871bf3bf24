# -*- coding: utf-8 -*-
"""
backend/showcase/shared/database/repository.py

Repositorio base para operaciones async con SQLAlchemy.
Usado por tags y compañías (entidades planas sin relaciones hijas).

Autor: Equipo Showcase
Fecha: 2026-10-03
"""

from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

T = TypeVar("T")  # modelo ORM


class BaseRepository(Generic[T]):
    """Repositorio asincrónico base para CRUD común."""

    def __init__(self, model: Type[T]):
        self.model = model

    # -------------------------------------------------------------
    # Lecturas
    # -------------------------------------------------------------
    async def get(self, session: AsyncSession, obj_id: Any) -> Optional[T]:
        return await session.get(self.model, obj_id)

    async def get_by_slug(self, session: AsyncSession, slug: str) -> Optional[T]:
        result = await session.execute(select(self.model).where(self.model.slug == slug))  # type: ignore[attr-defined]
        return result.scalars().first()

    async def find_first(self, session: AsyncSession, *criteria: ColumnElement[bool]) -> Optional[T]:
        result = await session.execute(select(self.model).where(*criteria).limit(1))
        return result.scalars().first()

    async def list(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
        order_by: Sequence[Any] = (),
    ) -> Sequence[T]:
        stmt = select(self.model).where(*criteria)
        if order_by:
            stmt = stmt.order_by(*order_by)
        result = await session.execute(stmt)
        return result.scalars().all()

    # -------------------------------------------------------------
    # Escrituras (flush; el commit lo decide commit_or_rollback)
    # -------------------------------------------------------------
    async def add(self, session: AsyncSession, obj: T) -> T:
        session.add(obj)
        await session.flush()
        return obj

    async def delete(self, session: AsyncSession, obj: T) -> None:
        await session.delete(obj)
        await session.flush()

# Fin del archivo backend/showcase/shared/database/repository.py
