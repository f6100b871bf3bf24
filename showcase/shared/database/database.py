# -*- coding: utf-8 -*-
"""
backend/showcase/shared/database/database.py

SQLAlchemy async (aiosqlite en local/test, asyncpg en despliegues Postgres).

Provee:
- engine (create_async_engine)
- SessionLocal (async_sessionmaker)
- Dependencia FastAPI: get_db
- context manager: session_scope()
- init_models(): crea las tablas si no existen
- check_database_health()

Notas:
- En SQLite se activa PRAGMA foreign_keys en cada conexión para que
  ON DELETE SET NULL / CASCADE se respeten.

Autor: Equipo Showcase
Fecha: 2026-10-02
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from showcase.shared.config import get_settings
from showcase.shared.database.base import Base

logger = logging.getLogger(__name__)

settings = get_settings()


def _unicode_lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def configure_sqlite_connection(async_engine: AsyncEngine) -> None:
    """
    Ajustes por conexión SQLite nueva:

    - PRAGMA foreign_keys=ON (cascadas y SET NULL declarados en los modelos)
    - lower() Unicode: el built-in de SQLite solo pliega ASCII, y ILIKE / los
      matchers de texto comparan lower(col) contra lower(término). Con esto
      "Über" y "über" colisionan igual que en PostgreSQL.
    """
    if async_engine.dialect.name != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def _on_connect(dbapi_connection: Any, _record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        # una función de aplicación con el mismo nombre reemplaza al built-in
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Construye el engine async; las opciones de pool solo aplican fuera de SQLite."""
    kwargs: dict[str, Any] = {"echo": echo}
    if not url.startswith("sqlite"):
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,
        )
    async_engine = create_async_engine(url, **kwargs)
    configure_sqlite_connection(async_engine)
    return async_engine


engine = build_engine(settings.database_url, echo=settings.db_echo_sql)
logger.info("[DB] engine listo (dialect=%s, echo=%s)", engine.dialect.name, settings.db_echo_sql)

# ── Session factory
SessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession,
    autoflush=False,
)


# ── Dependencia FastAPI
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
        finally:
            if session.in_transaction():
                await session.rollback()


# ── Context manager reutilizable en jobs/scripts
@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
            # El commit/rollback lo decide quien use el scope
        finally:
            if session.in_transaction():
                await session.rollback()


async def init_models(target: AsyncEngine | None = None) -> None:
    """Crea las tablas declaradas en Base.metadata (idempotente)."""
    async with (target or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# ── Health check
async def check_database_health(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Args:
        timeout_s: Tiempo máximo de espera en segundos
        sql: Query SQL a ejecutar (default: "SELECT 1")

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        async with asyncio.timeout(timeout_s):
            async with engine.connect() as conn:
                await conn.execute(text(sql))
        return True
    except Exception as e:
        logger.warning("[DB] health check falló: %s", e)
        return False


__all__ = [
    "engine",
    "SessionLocal",
    "build_engine",
    "configure_sqlite_connection",
    "get_db",
    "session_scope",
    "init_models",
    "check_database_health",
]
# Fin del archivo backend/showcase/shared/database/database.py
