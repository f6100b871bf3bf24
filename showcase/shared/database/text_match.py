# -*- coding: utf-8 -*-
"""
backend/showcase/shared/database/text_match.py

Estrategias de comparación de texto insensible a mayúsculas.

Los servicios reciben un TextMatcher al construirse y lo usan para búsquedas
(`contains`) y verificaciones de unicidad (`equals`). La estrategia se elige
por configuración (TEXT_MATCH_STRATEGY), nunca inspeccionando el entorno en
tiempo de ejecución:

- "ilike": LIKE insensible a mayúsculas nativo del motor (por defecto).
- "regex": expresión regular sobre lower(col); útil en motores sin ILIKE
  con la semántica esperada.

La igualdad (`equals`) es igual en ambas: lower(col) = término.lower().
El lower() del motor debe plegar Unicode como str.lower(); en SQLite lo
garantiza configure_sqlite_connection (ver database.py).

Autor: Equipo Showcase
Fecha: 2026-10-03
"""

from __future__ import annotations

import re
from typing import Protocol

from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement


class TextMatcher(Protocol):
    """Contrato mínimo de una estrategia de comparación."""

    name: str

    def contains(self, column: ColumnElement[str], term: str) -> ColumnElement[bool]: ...

    def equals(self, column: ColumnElement[str], term: str) -> ColumnElement[bool]: ...


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _folded_equals(column: ColumnElement[str], term: str) -> ColumnElement[bool]:
    return func.lower(column) == term.lower()


class IlikeMatcher:
    name = "ilike"

    def contains(self, column: ColumnElement[str], term: str) -> ColumnElement[bool]:
        return column.ilike(f"%{_escape_like(term)}%", escape="\\")

    def equals(self, column: ColumnElement[str], term: str) -> ColumnElement[bool]:
        return _folded_equals(column, term)


class RegexMatcher:
    name = "regex"

    def contains(self, column: ColumnElement[str], term: str) -> ColumnElement[bool]:
        return func.lower(column).regexp_match(re.escape(term.lower()))

    def equals(self, column: ColumnElement[str], term: str) -> ColumnElement[bool]:
        return _folded_equals(column, term)


_MATCHERS: dict[str, type] = {
    IlikeMatcher.name: IlikeMatcher,
    RegexMatcher.name: RegexMatcher,
}


def build_text_matcher(strategy: str) -> TextMatcher:
    """
    Construye la estrategia indicada.

    Raises:
        ValueError: Si la estrategia no existe
    """
    try:
        return _MATCHERS[strategy.lower()]()
    except KeyError:
        raise ValueError(f"Estrategia de comparación desconocida: {strategy}") from None


__all__ = ["TextMatcher", "IlikeMatcher", "RegexMatcher", "build_text_matcher"]

# Fin del archivo backend/showcase/shared/database/text_match.py
