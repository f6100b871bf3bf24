# -*- coding: utf-8 -*-
"""
backend/showcase/modules/tags/models/tag_models.py

Modelo SQLAlchemy para tags (tecnologías / habilidades) y la tabla
de asociación muchos-a-muchos con proyectos.

Un tag vive independiente de cualquier proyecto: borrar un proyecto solo
elimina sus filas en project_tags, nunca el tag.

Autor: Equipo Showcase
Fecha: 2026-10-06
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from showcase.shared.database import Base, as_str_enum
from showcase.modules.tags.enums import TagType


project_tags = Table(
    "project_tags",
    Base.metadata,
    Column("project_id", Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    type = Column(as_str_enum(TagType), nullable=False, default=TagType.DEFAULT)
    icon = Column(String(255), nullable=True)
    # Color hex (#RRGGBB) que reemplaza al color por tipo en el frontend
    custom_colour = Column(String(32), nullable=True)
    # NULL solo en filas previas al backfill de slugs (ver maintenance)
    slug = Column(String(255), nullable=True, unique=True, index=True)

    # Las filas de project_tags se borran por ON DELETE CASCADE
    projects = relationship(
        "Project",
        secondary=project_tags,
        back_populates="tags",
        lazy="raise",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Tag(id={self.id}, title='{self.title}', type={self.type})>"


__all__ = ["Tag", "project_tags"]
# Fin del archivo backend/showcase/modules/tags/models/tag_models.py
