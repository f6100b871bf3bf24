# -*- coding: utf-8 -*-
from tests.support import b64


def _payload(title="Portfolio", **extra):
    body = {"title": title, "year": 2024, "tags": [], "images": [], "repositories": []}
    body.update(extra)
    return body


async def test_create_and_get_project(client):
    r = await client.post(
        "/projects",
        json=_payload(
            "Landing Page",
            tags=["Vue", "vue"],
            images=[{"type": "Logo", "image": b64(), "filename": "logo.png"}],
            repositories=[{"title": "web", "url": "https://github.com/acme/web"}],
        ),
    )
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["slug"] == "landing-page"
    assert [t["title"] for t in body["tags"]] == ["Vue"]
    assert body["images"][0]["type"] == "Logo"
    assert body["images"][0]["is_optimised"] is False
    assert body["repositories"][0]["url"] == "https://github.com/acme/web"

    r = await client.get(f"/projects/{body['id']}")
    assert r.status_code == 200
    assert r.json()["title"] == "Landing Page"

    r = await client.get("/projects/slug/landing-page")
    assert r.status_code == 200
    assert r.json()["id"] == body["id"]


async def test_create_duplicate_title_is_409(client):
    assert (await client.post("/projects", json=_payload("Foo"))).status_code == 201

    r = await client.post("/projects", json=_payload("FOO"))

    assert r.status_code == 409
    assert r.json()["detail"] == "A project with the same title already exists."


async def test_invalid_payload_is_422(client):
    r = await client.post("/projects", json={"title": "", "year": 2024})
    assert r.status_code == 422


async def test_missing_project_is_404(client):
    r = await client.get("/projects/999")
    assert r.status_code == 404
    assert r.json()["detail"] == "Project not found."


async def test_new_image_without_file_is_400(client):
    r = await client.post("/projects", json=_payload(images=[{"type": "Card"}]))
    assert r.status_code == 400


async def test_update_and_delete_project(client):
    created = (await client.post("/projects", json=_payload("Before", tags=["A"]))).json()

    r = await client.put(f"/projects/{created['id']}", json=_payload("After", year=2019, tags=["B"]))
    assert r.status_code == 200
    assert r.json()["slug"] == "after"
    assert [t["title"] for t in r.json()["tags"]] == ["B"]

    r = await client.delete(f"/projects/{created['id']}")
    assert r.status_code == 204
    assert r.content == b""
    assert (await client.get(f"/projects/{created['id']}")).status_code == 404


async def test_list_projects_with_search(client):
    for title, year in [("Alpha App", 2021), ("Beta", 2023), ("Gamma App", 2022)]:
        assert (await client.post("/projects", json=_payload(title, year=year))).status_code == 201

    r = await client.get("/projects", params={"search": "app"})

    assert r.status_code == 200
    assert [p["title"] for p in r.json()] == ["Gamma App", "Alpha App"]


async def test_related_projects_route(client):
    target = (await client.post("/projects", json=_payload("Target", tags=["A", "B"]))).json()
    other = (await client.post("/projects", json=_payload("Other", tags=["B"]))).json()

    r = await client.get(f"/projects/{target['id']}/related")

    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == [other["id"]]


async def test_image_and_repository_sync_routes(client):
    project = (
        await client.post(
            "/projects",
            json=_payload(
                images=[{"type": "Desktop", "image": b64(), "order": 1}],
                repositories=[{"title": "api", "url": "https://github.com/acme/api"}],
            ),
        )
    ).json()
    pid = project["id"]
    image_id = project["images"][0]["id"]
    repo_id = project["repositories"][0]["id"]

    r = await client.put(
        f"/projects/{pid}/images",
        json=[
            {"id": image_id, "type": "Desktop", "order": 2},
            {"type": "Banner", "image": b64(b"banner"), "filename": "banner.webp"},
        ],
    )
    assert r.status_code == 200, r.text
    assert [i["type"] for i in r.json()] == ["Banner", "Desktop"]
    assert r.json()[1]["order"] == 2

    r = await client.get(f"/projects/{pid}/images/{image_id}")
    assert r.status_code == 200
    assert (await client.get(f"/projects/{pid}/images/9999")).status_code == 404

    r = await client.put(f"/projects/{pid}/repositories", json=[])
    assert r.status_code == 200
    assert r.json() == []
    assert (await client.get(f"/projects/{pid}/repositories/{repo_id}")).status_code == 404
    assert (await client.get(f"/projects/{pid}/repositories")).json() == []


async def test_media_route_serves_uploaded_files(client):
    project = (
        await client.post("/projects", json=_payload(images=[{"type": "Mobile", "image": b64(b"pixels")}]))
    ).json()
    name = project["images"][0]["image"]

    r = await client.get(f"/media/uploads/{name}")

    assert r.status_code == 200
    assert r.content == b"pixels"
    assert (await client.get("/media/uploads/missing.png")).status_code == 404
