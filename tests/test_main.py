# -*- coding: utf-8 -*-
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from showcase.main import create_app


async def test_app_starts_and_serves_health():
    app = create_app()

    async with LifespanManager(app) as manager:
        async with AsyncClient(transport=ASGITransport(app=manager.app), base_url="http://testserver") as client:
            r = await client.get("/health")

    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.headers["X-Request-ID"]


async def test_openapi_lists_module_routes():
    app = create_app()
    paths = app.openapi()["paths"]

    for path in (
        "/projects",
        "/projects/{project_id}/related",
        "/projects/{project_id}/images",
        "/tags",
        "/companies/{company_id}",
        "/media/uploads/{file_name}",
        "/maintenance/slugs",
        "/project-images/optimise",
    ):
        assert path in paths
