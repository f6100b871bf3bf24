# -*- coding: utf-8 -*-
from showcase.shared.dependencies import get_image_optimizer

from tests.support import FakeOptimizer, b64


async def test_backfill_slugs_route(client):
    r = await client.post("/maintenance/slugs")
    assert r.status_code == 200
    assert r.json() == {"tags": 0, "companies": 0, "projects": 0}


async def test_optimise_route_without_optimizer_is_400(client):
    r = await client.put("/project-images/optimise")
    assert r.status_code == 400
    assert r.json()["detail"] == "Image optimisation is not configured."


async def test_optimise_route_with_optimizer(app, client):
    r = await client.post(
        "/projects",
        json={"title": "Shots", "year": 2024, "images": [{"type": "Desktop", "image": b64()}]},
    )
    assert r.status_code == 201

    app.dependency_overrides[get_image_optimizer] = lambda: FakeOptimizer()
    r = await client.put("/project-images/optimise")

    assert r.status_code == 200
    assert r.json() == {"optimised": 1}
