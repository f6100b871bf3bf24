# -*- coding: utf-8 -*-
"""
backend/showcase/modules/tags/repositories/tag_repository.py

Acceso a datos de tags sobre BaseRepository.

Autor: Equipo Showcase
Fecha: 2026-10-08
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.shared.database import BaseRepository, TextMatcher
from showcase.modules.tags.models import Tag, project_tags


class TagRepository(BaseRepository[Tag]):
    def __init__(self, matcher: TextMatcher):
        super().__init__(Tag)
        self.matcher = matcher

    async def find_by_title(
        self,
        session: AsyncSession,
        title: str,
        *,
        exclude_id: Optional[int] = None,
    ) -> Optional[Tag]:
        criteria = [self.matcher.equals(Tag.title, title)]
        if exclude_id is not None:
            criteria.append(Tag.id != exclude_id)
        return await self.find_first(session, *criteria)

    async def search(self, session: AsyncSession, search: Optional[str] = None) -> List[Tag]:
        criteria = [self.matcher.contains(Tag.title, search)] if search else []
        return list(await self.list(session, *criteria, order_by=(Tag.title, Tag.id)))

    async def detach_from_projects(self, session: AsyncSession, tag_id: int) -> None:
        """Elimina las filas de asociación del tag; los proyectos no se tocan."""
        await session.execute(delete(project_tags).where(project_tags.c.tag_id == tag_id))


__all__ = ["TagRepository"]

# Fin del archivo backend/showcase/modules/tags/repositories/tag_repository.py
