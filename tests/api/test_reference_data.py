"""Author and item type API tests."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.requires_db


async def test_author_crud(client: AsyncClient) -> None:
    created = await client.post(
        "/api/v1/authors",
        json={"name": "Octavia E. Butler", "birthDate": "1947-06-22", "biography": "Writer"},
    )
    assert created.status_code == 201
    author = created.json()
    assert author["birthDate"].startswith("1947-06-22")

    listed = (await client.get("/api/v1/authors")).json()
    assert [a["name"] for a in listed] == ["Octavia E. Butler"]

    replaced = await client.put(f"/api/v1/authors/{author['id']}", json={"name": "O. E. Butler"})
    assert replaced.status_code == 200
    assert replaced.json()["biography"] is None

    assert (await client.delete(f"/api/v1/authors/{author['id']}")).status_code == 204
    assert (await client.get(f"/api/v1/authors/{author['id']}")).status_code == 404


async def test_item_type_crud(client: AsyncClient) -> None:
    created = (await client.post("/api/v1/item-types", json={"name": "Poetry"})).json()
    fetched = await client.get(f"/api/v1/item-types/{created['id']}")
    assert fetched.json() == created

    updated = await client.put(
        f"/api/v1/item-types/{created['id']}", json={"name": "Poems", "description": "Verse"}
    )
    assert updated.json()["name"] == "Poems"
    assert (await client.put("/api/v1/item-types/99", json={"name": "x"})).status_code == 404
    assert (await client.delete("/api/v1/item-types/99")).status_code == 404


async def test_author_name_required(client: AsyncClient) -> None:
    assert (await client.post("/api/v1/authors", json={"name": ""})).status_code == 400
    assert (await client.post("/api/v1/authors", json={"name": "   "})).status_code == 400
