# -*- coding: utf-8 -*-
"""
backend/showcase/modules/projects/models/project_models.py

Modelos SQLAlchemy del agregado Proyecto:
- Project: fila raíz del agregado
- ProjectImage: imágenes propias del proyecto (Logo/Banner/Card únicas,
  Desktop/Mobile ordenadas)
- ProjectRepository: enlaces a repositorios de código, ordenados

Las relaciones usan lazy="raise": ningún acceso a atributo dispara consultas
implícitas. La carga se pide explícitamente en project_repository.py.

Autor: Equipo Showcase
Fecha: 2026-10-06
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, case, func
from sqlalchemy.orm import relationship

from showcase.shared.database import Base, as_str_enum
from showcase.modules.projects.enums import ImageType
from showcase.modules.tags.models import project_tags


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    short_description = Column(String(512), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    year = Column(Integer, nullable=False, index=True)
    website = Column(String(512), nullable=True)
    show_mockup = Column(Boolean, nullable=False, default=False)
    company_id = Column(
        Integer,
        ForeignKey("companies.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    # NULL solo en filas previas al backfill de slugs (ver maintenance)
    slug = Column(String(255), nullable=True, unique=True, index=True)

    # Relationships
    company = relationship("Company", back_populates="projects", lazy="raise")
    images = relationship(
        "ProjectImage",
        cascade="all, delete-orphan",
        lazy="raise",
        order_by=lambda: image_read_order(),
    )
    repositories = relationship(
        "ProjectRepository",
        cascade="all, delete-orphan",
        lazy="raise",
        order_by=lambda: repository_read_order(),
    )
    tags = relationship("Tag", secondary=project_tags, back_populates="projects", lazy="raise")

    def __repr__(self):
        return f"<Project(id={self.id}, title='{self.title}', slug='{self.slug}')>"


class ProjectImage(Base):
    __tablename__ = "project_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Nombre de archivo dentro de UPLOADS_DIR
    image = Column(String(255), nullable=False)
    type = Column(as_str_enum(ImageType), nullable=False)
    order = Column(Integer, nullable=True)
    is_optimised = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<ProjectImage(id={self.id}, type={self.type}, order={self.order})>"


class ProjectRepository(Base):
    __tablename__ = "project_repositories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    url = Column(String(1024), nullable=False)
    order = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<ProjectRepository(id={self.id}, title='{self.title}', order={self.order})>"


# ---- Orden de lectura (SQL para cargas, clave Python para listas en memoria) ----

def image_read_order() -> list:
    rank = case({t.value: t.rank for t in ImageType}, value=ProjectImage.type, else_=len(ImageType))
    return [rank, func.coalesce(ProjectImage.order, 0), ProjectImage.id]


def repository_read_order() -> list:
    return [func.coalesce(ProjectRepository.order, 0), ProjectRepository.id]


def image_sort_key(image: ProjectImage) -> tuple:
    """Orden de lectura: categoría, order (None = 0), id."""
    return (ImageType(image.type).rank, image.order or 0, image.id or 0)


def repository_sort_key(repository: ProjectRepository) -> tuple:
    """Orden de lectura: order (None = 0), id."""
    return (repository.order or 0, repository.id or 0)


__all__ = [
    "Project",
    "ProjectImage",
    "ProjectRepository",
    "image_read_order",
    "repository_read_order",
    "image_sort_key",
    "repository_sort_key",
]
# Fin del archivo backend/showcase/modules/projects/models/project_models.py
