# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/repositories/project_repository.py

Repositorio para acceso a datos del agregado Proyecto.

Responsabilidades:
- Lecturas por id / slug / título con carga explícita de relaciones
- Listado con búsqueda y ranking de proyectos relacionados
- Lecturas de imágenes y repositorios hijos

Las relaciones del modelo son lazy="raise": quien llama indica con
ProjectLoad qué colecciones necesita y aquí se traducen a selectinload.
La lógica de negocio (unicidad, slug, sincronización) vive en services/.

Autor: Equipo Showcase
Fecha: 2026-10-08
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from showcase.shared.database import TextMatcher
from showcase.modules.projects.models import (
    Project,
    ProjectImage,
    ProjectRepository,
    image_read_order,
    project_tags,
    repository_read_order,
)


@dataclass(frozen=True)
class ProjectLoad:
    """Relaciones a cargar junto con el proyecto."""
    images: bool = False
    repositories: bool = False
    tags: bool = False
    company: bool = False

    def options(self) -> list:
        opts = []
        if self.images:
            opts.append(selectinload(Project.images))
        if self.repositories:
            opts.append(selectinload(Project.repositories))
        if self.tags:
            opts.append(selectinload(Project.tags))
        if self.company:
            opts.append(selectinload(Project.company))
        return opts


BARE = ProjectLoad()
FULL = ProjectLoad(images=True, repositories=True, tags=True, company=True)


def _select_project(load: ProjectLoad, refresh: bool):
    stmt = select(Project).options(*load.options())
    if refresh:
        # Reemplaza el estado en memoria (colecciones incluidas) por el de BD
        stmt = stmt.execution_options(populate_existing=True)
    return stmt


# === Lecturas básicas ===

async def get_project_by_id(
    db: AsyncSession,
    project_id: int,
    load: ProjectLoad = BARE,
    *,
    refresh: bool = False,
) -> Optional[Project]:
    result = await db.execute(_select_project(load, refresh).where(Project.id == project_id))
    return result.scalars().first()


async def get_project_by_slug(
    db: AsyncSession,
    slug: str,
    load: ProjectLoad = BARE,
) -> Optional[Project]:
    result = await db.execute(_select_project(load, False).where(Project.slug == slug))
    return result.scalars().first()


async def find_project_by_title(
    db: AsyncSession,
    matcher: TextMatcher,
    title: str,
    *,
    exclude_id: Optional[int] = None,
) -> Optional[Project]:
    """Proyecto con el mismo título (sin distinguir mayúsculas), excluyendo `exclude_id`."""
    stmt = select(Project).where(matcher.equals(Project.title, title))
    if exclude_id is not None:
        stmt = stmt.where(Project.id != exclude_id)
    result = await db.execute(stmt.limit(1))
    return result.scalars().first()


async def list_projects(
    db: AsyncSession,
    matcher: TextMatcher,
    *,
    search: Optional[str] = None,
    load: ProjectLoad = FULL,
) -> List[Project]:
    """
    Lista proyectos, más recientes primero (year desc, id asc).

    Args:
        search: Subcadena buscada en título o descripción corta (sin distinguir mayúsculas)
    """
    stmt = _select_project(load, False)
    if search:
        stmt = stmt.where(
            or_(
                matcher.contains(Project.title, search),
                matcher.contains(Project.short_description, search),
            )
        )
    stmt = stmt.order_by(Project.year.desc(), Project.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


# === Relacionados ===

async def get_project_tag_ids(db: AsyncSession, project_id: int) -> List[int]:
    result = await db.execute(
        select(project_tags.c.tag_id).where(project_tags.c.project_id == project_id)
    )
    return list(result.scalars().all())


async def list_related_projects(
    db: AsyncSession,
    project_id: int,
    tag_ids: Sequence[int],
    *,
    limit: int = 3,
    load: ProjectLoad = FULL,
) -> List[Project]:
    """
    Otros proyectos ordenados por cantidad de tags compartidos (desc),
    empates por id ascendente.
    """
    shared = func.count(project_tags.c.tag_id).label("shared")
    ranking = await db.execute(
        select(project_tags.c.project_id, shared)
        .where(
            project_tags.c.tag_id.in_(list(tag_ids)),
            project_tags.c.project_id != project_id,
        )
        .group_by(project_tags.c.project_id)
        .order_by(shared.desc(), project_tags.c.project_id)
        .limit(limit)
    )
    ranked_ids = [row.project_id for row in ranking]
    if not ranked_ids:
        return []

    result = await db.execute(_select_project(load, False).where(Project.id.in_(ranked_ids)))
    by_id = {p.id: p for p in result.scalars().all()}
    return [by_id[i] for i in ranked_ids if i in by_id]


# === Hijos ===

async def list_project_images(db: AsyncSession, project_id: int) -> List[ProjectImage]:
    result = await db.execute(
        select(ProjectImage)
        .where(ProjectImage.project_id == project_id)
        .order_by(*image_read_order())
    )
    return list(result.scalars().all())


async def get_project_image(db: AsyncSession, project_id: int, image_id: int) -> Optional[ProjectImage]:
    result = await db.execute(
        select(ProjectImage).where(
            ProjectImage.project_id == project_id,
            ProjectImage.id == image_id,
        )
    )
    return result.scalars().first()


async def list_unoptimised_images(db: AsyncSession) -> List[ProjectImage]:
    result = await db.execute(
        select(ProjectImage)
        .where(ProjectImage.is_optimised.is_(False))
        .order_by(ProjectImage.id)
    )
    return list(result.scalars().all())


async def list_project_repositories(db: AsyncSession, project_id: int) -> List[ProjectRepository]:
    result = await db.execute(
        select(ProjectRepository)
        .where(ProjectRepository.project_id == project_id)
        .order_by(*repository_read_order())
    )
    return list(result.scalars().all())


async def get_project_repository(
    db: AsyncSession, project_id: int, repository_id: int
) -> Optional[ProjectRepository]:
    result = await db.execute(
        select(ProjectRepository).where(
            ProjectRepository.project_id == project_id,
            ProjectRepository.id == repository_id,
        )
    )
    return result.scalars().first()


async def project_exists(db: AsyncSession, project_id: int) -> bool:
    result = await db.execute(select(Project.id).where(Project.id == project_id))
    return result.scalar_one_or_none() is not None


__all__ = [
    "ProjectLoad",
    "BARE",
    "FULL",
    "get_project_by_id",
    "get_project_by_slug",
    "find_project_by_title",
    "list_projects",
    "get_project_tag_ids",
    "list_related_projects",
    "list_project_images",
    "get_project_image",
    "list_unoptimised_images",
    "list_project_repositories",
    "get_project_repository",
    "project_exists",
]

# Fin del archivo backend/showcase/modules/projects/repositories/project_repository.py
