# -*- coding: utf-8 -*-
"""
backend/showcase/modules/companies/models/company_models.py

Modelo SQLAlchemy para compañías (empleadores / clientes de los proyectos).

Los proyectos guardan una referencia débil (company_id nullable,
ON DELETE SET NULL); la compañía no es dueña de sus proyectos.

Autor: Equipo Showcase
Fecha: 2026-10-06
"""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from showcase.shared.database import Base


class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    website = Column(String(512), nullable=True)
    # Nombre de archivo dentro de UPLOADS_DIR
    logo = Column(String(255), nullable=True)
    # NULL solo en filas previas al backfill de slugs (ver maintenance)
    slug = Column(String(255), nullable=True, unique=True, index=True)

    # Referencia débil: al borrar la compañía el FK queda en NULL (ON DELETE SET NULL),
    # sin cargar la colección
    projects = relationship("Project", back_populates="company", lazy="raise", passive_deletes=True)

    def __repr__(self):
        return f"<Company(id={self.id}, name='{self.name}', slug='{self.slug}')>"


__all__ = ["Company"]
# Fin del archivo backend/showcase/modules/companies/models/company_models.py
