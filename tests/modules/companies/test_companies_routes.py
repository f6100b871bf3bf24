# -*- coding: utf-8 -*-
from tests.support import b64


async def test_company_crud_routes(client):
    r = await client.post("/companies", json={"name": "Acme", "logo": b64(b"logo"), "logo_filename": "a.png"})
    assert r.status_code == 201
    company = r.json()
    assert company["slug"] == "acme"
    assert company["logo"].endswith(".png")

    r = await client.post("/projects", json={"title": "Client Work", "year": 2022, "company_id": company["id"]})
    assert r.status_code == 201
    project = r.json()
    assert project["company"]["name"] == "Acme"

    assert (await client.post("/companies", json={"name": "ACME"})).status_code == 409
    assert (await client.put(f"/companies/{company['id']}", json={"name": "Acme Inc"})).json()["slug"] == "acme-inc"

    assert (await client.delete(f"/companies/{company['id']}")).status_code == 204
    assert (await client.get(f"/companies/{company['id']}")).status_code == 404

    r = await client.get(f"/projects/{project['id']}")
    assert r.json()["company_id"] is None
    assert r.json()["company"] is None


async def test_project_with_unknown_company_is_400(client):
    r = await client.post("/projects", json={"title": "Orphan", "year": 2022, "company_id": 42})
    assert r.status_code == 400
    assert r.json()["detail"] == "The referenced company does not exist."
