# -*- coding: utf-8 -*-
"""
backend/showcase/shared/database/base.py

Base declarativa y convención de nombres para modelos ORM.

Este módulo proporciona:
- Base: clase base declarativa de SQLAlchemy
- NAMING_CONVENTION: convención de nombres para constraints
- as_str_enum: helper para guardar enums Python como texto portable

Autor: Equipo Showcase
Fecha: 2026-10-02
"""

from __future__ import annotations

from enum import Enum
from typing import Type

from sqlalchemy import Enum as SAEnum
from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# ===== NAMING CONVENTION =====
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


# ===== BASE DECLARATIVA =====
class Base(DeclarativeBase):
    """
    Base declarativa para todos los modelos ORM de Showcase.
    Incluye convención de nombres para constraints.
    """
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# ===== HELPER PARA ENUMS =====
def as_str_enum(enum_cls: Type[Enum], length: int = 32) -> SAEnum:
    """
    Devuelve un tipo Enum de SQLAlchemy que persiste el *valor* del enum
    como VARCHAR (sin tipo ENUM nativo), válido en SQLite y PostgreSQL.

    Uso típico:

        class ProjectImage(Base):
            type = Column(as_str_enum(ImageType), nullable=False)
    """
    def _values(_: object) -> list[str]:
        return [e.value for e in enum_cls]  # type: ignore[arg-type]

    return SAEnum(
        enum_cls,
        native_enum=False,
        length=length,
        values_callable=_values,
        validate_strings=True,
    )


__all__ = ["Base", "NAMING_CONVENTION", "as_str_enum"]

# Fin del archivo backend/showcase/shared/database/base.py
