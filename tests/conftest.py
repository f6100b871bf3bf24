# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests para Showcase.

- PYTHON_ENV=test antes de importar cualquier módulo de la app
- Engine SQLite en memoria por test (StaticPool: una sola conexión compartida)
- Pre-carga de modelos para resolver relationships('ClassName')
- Almacenamiento en tmp_path y optimizador falso
"""

import os

os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("TEXT_MATCH_STRATEGY", "ilike")

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from showcase.shared.database import Base, IlikeMatcher
from showcase.shared.database.database import configure_sqlite_connection
from showcase.shared.storage import LocalFileStorage

# Registra projects, tags, companies (y la tabla project_tags) en Base.metadata
import showcase.modules.projects.models  # noqa: F401

from tests.support import FakeOptimizer

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine():
    test_engine = create_async_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    configure_sqlite_connection(test_engine)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        class_=AsyncSession,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def matcher():
    return IlikeMatcher()


@pytest.fixture
def storage(tmp_path) -> LocalFileStorage:
    return LocalFileStorage(tmp_path / "uploads")


@pytest.fixture
def optimizer() -> FakeOptimizer:
    return FakeOptimizer()


# -----------------------------------------------------------------------------
# App FastAPI de pruebas y cliente httpx (ASGITransport)
# -----------------------------------------------------------------------------
@pytest.fixture
def app(session_factory, storage, matcher):
    """
    App con el router maestro y dependencias apuntando a la BD en memoria,
    al almacenamiento temporal y sin optimizador.
    """
    from fastapi import FastAPI

    from showcase.routes import router
    from showcase.shared.database import get_db
    from showcase.shared.dependencies import get_file_storage, get_image_optimizer, get_text_matcher
    from showcase.shared.middleware import JSONExceptionMiddleware

    test_app = FastAPI(title="Showcase Test App")
    test_app.add_middleware(JSONExceptionMiddleware)
    test_app.include_router(router)

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    test_app.dependency_overrides[get_db] = _override_get_db
    test_app.dependency_overrides[get_file_storage] = lambda: storage
    test_app.dependency_overrides[get_text_matcher] = lambda: matcher
    test_app.dependency_overrides[get_image_optimizer] = lambda: None
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
