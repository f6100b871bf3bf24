# -*- coding: utf-8 -*-
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from prometheus_client import REGISTRY

from showcase.observability import record_image_optimisation, record_maintenance, setup_observability


def _sample(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


async def test_metrics_endpoint_counts_by_route_template():
    app = FastAPI()
    setup_observability(app)

    @app.get("/items/{item_id}")
    async def item(item_id: int):
        return {"id": item_id}

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        await client.get("/items/7")
        r = await client.get("/metrics")

    assert r.status_code == 200
    assert 'showcase_http_requests_total{method="GET",path="/items/{item_id}",status="200"}' in r.text
    assert 'path="/metrics"' not in r.text


def test_domain_counters():
    labels = {"outcome": "fallback"}
    before = _sample("showcase_image_optimisations_total", labels)
    record_image_optimisation("fallback")
    assert _sample("showcase_image_optimisations_total", labels) == before + 1

    before = _sample("showcase_maintenance_rows_total", {"task": "slugs"})
    record_maintenance("slugs", 3)
    record_maintenance("slugs", 0)
    assert _sample("showcase_maintenance_rows_total", {"task": "slugs"}) == before + 3
