# -*- coding: utf-8 -*-
"""
backend/showcase/modules/tags/services/tag_service.py

Servicio de tags: CRUD directo y sincronización find-or-create.

sync_tags(["c#", "C#", "Rust"]) con un tag "C#" existente devuelve
[C#, C#, Rust]: una entrada por título recibido, en el mismo orden, sin
deduplicar; solo "Rust" se crea.

Autor: Equipo Showcase
Fecha: 2026-10-09
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from showcase.shared.database import TextMatcher, commit_or_rollback
from showcase.shared.results import Result, bad_request, conflict, not_found, ok
from showcase.shared.utils.slug import unique_slug
from showcase.modules.tags.enums import TagType
from showcase.modules.tags.models import Tag
from showcase.modules.tags.repositories import TagRepository
from showcase.modules.tags.schemas import TagIn

logger = logging.getLogger(__name__)

TAG_NOT_FOUND = "Tag not found."
TAG_CONFLICT = "A tag with the same title already exists."


class TagService:
    def __init__(self, db: AsyncSession, matcher: TextMatcher):
        self.db = db
        self.repo = TagRepository(matcher)

    # === Lecturas ===

    async def list_tags(self, search: Optional[str] = None) -> Result[List[Tag]]:
        return ok(await self.repo.search(self.db, search))

    async def get_tag(self, tag_id: int) -> Result[Tag]:
        tag = await self.repo.get(self.db, tag_id)
        if tag is None:
            return not_found(TAG_NOT_FOUND)
        return ok(tag)

    async def get_tag_by_slug(self, slug: str) -> Result[Tag]:
        tag = await self.repo.get_by_slug(self.db, slug)
        if tag is None:
            return not_found(TAG_NOT_FOUND)
        return ok(tag)

    # === Escrituras ===

    async def create_tag(self, data: TagIn) -> Result[Tag]:
        async def _work() -> Result[Tag]:
            if await self.repo.find_by_title(self.db, data.title):
                return conflict(TAG_CONFLICT)
            tag = Tag(
                title=data.title,
                type=data.type,
                icon=data.icon,
                custom_colour=data.custom_colour,
                slug=await unique_slug(self.db, Tag, data.title),
            )
            await self.repo.add(self.db, tag)
            logger.info("[tags] creado id=%s slug=%s", tag.id, tag.slug)
            return ok(tag)

        return await commit_or_rollback(self.db, _work)

    async def update_tag(self, tag_id: int, data: TagIn) -> Result[Tag]:
        async def _work() -> Result[Tag]:
            tag = await self.repo.get(self.db, tag_id)
            if tag is None:
                return not_found(TAG_NOT_FOUND)
            if await self.repo.find_by_title(self.db, data.title, exclude_id=tag_id):
                return conflict(TAG_CONFLICT)
            tag.title = data.title
            tag.type = data.type
            tag.icon = data.icon
            tag.custom_colour = data.custom_colour
            tag.slug = await unique_slug(self.db, Tag, data.title, exclude_id=tag_id)
            await self.db.flush()
            return ok(tag)

        return await commit_or_rollback(self.db, _work)

    async def delete_tag(self, tag_id: int) -> Result[Tag]:
        """Elimina el tag y sus asociaciones; los proyectos permanecen."""
        async def _work() -> Result[Tag]:
            tag = await self.repo.get(self.db, tag_id)
            if tag is None:
                return not_found(TAG_NOT_FOUND)
            await self.repo.detach_from_projects(self.db, tag_id)
            await self.repo.delete(self.db, tag)
            logger.info("[tags] eliminado id=%s", tag_id)
            return ok(tag)

        return await commit_or_rollback(self.db, _work)

    # === Sincronización find-or-create ===

    async def sync_tags(self, titles: Sequence[str]) -> Result[List[Tag]]:
        """
        Convierte títulos en tags persistidos, creando los que falten.

        No hace commit: los tags nuevos se insertan (flush) dentro de la
        transacción del llamador.

        Returns:
            Success con un Tag por título recibido, en orden y sin deduplicar;
            Failure BAD_REQUEST si algún título está vacío.
        """
        resolved: List[Tag] = []
        seen: Dict[str, Tag] = {}

        for raw in titles:
            title = (raw or "").strip()
            if not title:
                return bad_request("Tag titles cannot be empty.")

            key = title.lower()
            tag = seen.get(key)
            if tag is None:
                tag = await self.repo.find_by_title(self.db, title)
            if tag is None:
                tag = Tag(
                    title=title,
                    type=TagType.DEFAULT,
                    slug=await unique_slug(self.db, Tag, title),
                )
                await self.repo.add(self.db, tag)
                logger.info("[tags] creado por sync id=%s title=%s", tag.id, title)

            seen[key] = tag
            resolved.append(tag)

        return ok(resolved)


__all__ = ["TagService", "TAG_NOT_FOUND", "TAG_CONFLICT"]

# Fin del archivo backend/showcase/modules/tags/services/tag_service.py
